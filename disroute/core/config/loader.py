"""Loading the YAML configuration file.

A bot usually keeps one ``disroute.yaml`` per deployment and tweaks a few keys
per environment (``log_dispatch`` on in staging, a different log directory in
containers). ``load_config`` reads the file, lays the caller's overrides on
top, then resolves ``${VAR}`` references against the process environment and
an optional ``.env`` file before pydantic validation.
"""

import logging
import os
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from disroute.core.config.models import Config

logger = logging.getLogger(__name__)

ENV_REFERENCE = re.compile(r"\$\{(?P<name>[^}]+)\}")


def _map_strings(obj: Any, fn: Callable[[str], Any]) -> Any:
    """Rebuild dicts and lists, applying fn to every string leaf."""
    if isinstance(obj, str):
        return fn(obj)
    if isinstance(obj, dict):
        return {key: _map_strings(value, fn) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_map_strings(item, fn) for item in obj]
    return obj


def expand_env_vars(value: str) -> str:
    """Substitute ``${NAME}`` with the environment value; unknown names stay as written."""
    return ENV_REFERENCE.sub(lambda m: os.environ.get(m["name"], m[0]), value)


def expand_env_vars_recursive(obj: Any) -> Any:
    """Apply expand_env_vars to every string inside nested dicts and lists."""
    return _map_strings(obj, expand_env_vars)


def check_unexpanded_vars(data: Any, source: str) -> None:
    """Fail if any ``${NAME}`` reference is left after expansion.

    Args:
        data: Expanded configuration data.
        source: Label used in the error message, usually the file path.

    Raises:
        ValueError: Naming every unresolved reference, sorted.
    """
    leftover: set[str] = set()
    _map_strings(data, lambda s: leftover.update(m[0] for m in ENV_REFERENCE.finditer(s)))
    if leftover:
        raise ValueError(
            f"Unresolved environment variable(s) in {source}: {', '.join(sorted(leftover))}"
        )


def merge_configs(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Return base with overrides laid on top, merging nested sections key by key.

    Neither argument is modified.

    Examples:
        >>> merge_configs({'router': {'separator': ':', 'log_dispatch': False}},
        ...               {'router': {'log_dispatch': True}})
        {'router': {'separator': ':', 'log_dispatch': True}}
    """
    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: Path | str,
    env_file: Path | str | None = None,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """Load, override, expand and validate the configuration file.

    Args:
        path: YAML configuration file.
        env_file: Optional .env file; its values never replace variables that
            are already set in the environment.
        overrides: Sections/keys merged over the file contents, e.g.
            ``{"router": {"log_dispatch": True}}``.

    Returns:
        Validated Config.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If a ${VAR} reference stays unresolved.
        pydantic.ValidationError: If a value fails validation.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    if env_file is not None:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)
            logger.debug(f"Loaded environment from {env_path}")
        else:
            logger.warning(f"Env file not found, skipping: {env_path}")

    with config_path.open(encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    if overrides:
        data = merge_configs(data, overrides)
        logger.debug(f"Applied config overrides for: {', '.join(sorted(overrides))}")

    data = expand_env_vars_recursive(data)
    check_unexpanded_vars(data, source=str(config_path))

    return Config(**data)
