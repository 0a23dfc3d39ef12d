"""Exceptions raised by route registration and dispatch."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from disroute.model.interaction import InteractionType


class RouterError(Exception):
    """Base class for every error the router raises itself."""


class InvalidDefinitionError(RouterError, ValueError):
    """Raised when a command or component definition cannot be registered."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{message} (at '{path}')"
        super().__init__(message)


class WrongInteractionTypeError(RouterError):
    """Raised when a dispatch entry point receives the wrong kind of interaction."""

    def __init__(self, expected: "InteractionType", actual: "InteractionType"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid interaction type: expected {getattr(expected, 'name', expected)}, "
            f"got {getattr(actual, 'name', actual)}"
        )


class RouteNotFoundError(RouterError, LookupError):
    """Raised when no handler is registered for the resolved route."""

    def __init__(self, path: str, table: str = "command"):
        self.path = path
        self.table = table
        super().__init__(f"No {table} handler registered for '{path}'")


class ComponentNotFoundError(RouterError, LookupError):
    """Raised when no component handler is registered for the extracted key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No component handler registered for '{key}'")
