"""disroute - path-keyed dispatch of chat-platform interactions.

Register nested slash command trees once at startup, then route each inbound
command, autocomplete or component interaction to its handler.
"""

from disroute.core.errors import (
    ComponentNotFoundError,
    InvalidDefinitionError,
    RouteNotFoundError,
    RouterError,
    WrongInteractionTypeError,
)
from disroute.model import (
    Command,
    CommandKind,
    CommandOption,
    Component,
    Handlers,
    Interaction,
    InteractionOption,
    InteractionType,
    OptionType,
)
from disroute.routing import Router, default_component_key

__version__ = "0.1.0"

__all__ = [
    # Router
    "Router",
    "default_component_key",
    # Definitions
    "Command",
    "CommandKind",
    "CommandOption",
    "Component",
    "Handlers",
    # Events
    "Interaction",
    "InteractionOption",
    "InteractionType",
    "OptionType",
    # Errors
    "ComponentNotFoundError",
    "InvalidDefinitionError",
    "RouteNotFoundError",
    "RouterError",
    "WrongInteractionTypeError",
]
