"""disroute domain models - plain dataclasses and enums.

Nothing in this package depends on the router or on configuration.
"""

from disroute.model.command import (
    Command,
    CommandKind,
    CommandOption,
    Component,
    ComponentHandlerFunc,
    ComponentKeyFunc,
    HandlerFunc,
    Handlers,
)
from disroute.model.interaction import (
    Interaction,
    InteractionOption,
    InteractionType,
    OptionType,
)

__all__ = [
    # Definitions
    "Command",
    "CommandKind",
    "CommandOption",
    "Component",
    "Handlers",
    # Callable shapes
    "ComponentHandlerFunc",
    "ComponentKeyFunc",
    "HandlerFunc",
    # Events
    "Interaction",
    "InteractionOption",
    "InteractionType",
    "OptionType",
]
