"""Configuration package for disroute.

Pydantic configuration models and loading utilities, re-exported at the
package level.
"""

from disroute.core.config.loader import (
    check_unexpanded_vars,
    expand_env_vars,
    expand_env_vars_recursive,
    load_config,
    merge_configs,
)
from disroute.core.config.models import Config, LoggingConfig, RouterConfig

__all__ = [
    # Models
    "Config",
    "LoggingConfig",
    "RouterConfig",
    # Loaders
    "check_unexpanded_vars",
    "expand_env_vars",
    "expand_env_vars_recursive",
    "load_config",
    "merge_configs",
]
