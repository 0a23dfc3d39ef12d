"""Logging configuration and setup for disroute."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from disroute.core.config.models import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE = "disroute.log"


def setup_logging(
    level: str = "INFO",
    directory: str | Path | None = "logs",
    max_size_mb: int = 10,
    backup_count: int = 5,
    console: bool = True,
) -> None:
    """Configure root logger with console and rotating file handlers.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        directory: Directory for the log file. None disables file logging.
        max_size_mb: Maximum size in MB before rotation.
        backup_count: Number of backup files to keep.
        console: Whether to also log to stderr.

    Raises:
        ValueError: If level is not a known logging level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    # Clear any existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    root_logger.setLevel(numeric_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if directory is not None:
        log_dir = Path(directory)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.info(f"Logging initialized: level={level}, directory={directory}")


def setup_logging_from_config(config: "LoggingConfig") -> None:
    """Configure logging from a LoggingConfig model."""
    setup_logging(
        level=config.level,
        directory=config.directory,
        max_size_mb=config.max_size_mb,
        backup_count=config.backup_count,
        console=config.console,
    )
