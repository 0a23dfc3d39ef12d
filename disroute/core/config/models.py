"""Pydantic configuration models for disroute.

For loading and merging logic, see loader.py.
"""

from pydantic import BaseModel, Field, field_validator

from disroute.routing.paths import check_separator


class RouterConfig(BaseModel):
    """Configuration for a Router instance."""

    separator: str = Field(default=":", description="String joining path segments into a route key")
    log_dispatch: bool = Field(default=False, description="Log every resolved dispatch at DEBUG level")

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Reject separators that could not split a route key unambiguously."""
        return check_separator(v)


class LoggingConfig(BaseModel):
    """Configuration for logging system."""

    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    directory: str | None = Field(default="logs", description="Directory for log files (null disables file logging)")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB before rotation")
    backup_count: int = Field(default=5, description="Number of backup log files to keep")
    console: bool = Field(default=True, description="Also log to the console")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid logging level: {v}")
        return level


class Config(BaseModel):
    """Root configuration for disroute."""

    router: RouterConfig = Field(default_factory=RouterConfig, description="Router configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    model_config = {"extra": "allow"}
