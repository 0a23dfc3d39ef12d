"""Route key construction and the Router itself."""

from disroute.routing.paths import (
    DEFAULT_SEPARATOR,
    ResolvedRoute,
    RouteEntry,
    build_registration_paths,
    check_separator,
    flatten_options,
    join_path,
    resolve_interaction,
)
from disroute.routing.router import Router, default_component_key

__all__ = [
    "DEFAULT_SEPARATOR",
    "ResolvedRoute",
    "RouteEntry",
    "Router",
    "build_registration_paths",
    "check_separator",
    "default_component_key",
    "flatten_options",
    "join_path",
    "resolve_interaction",
]
