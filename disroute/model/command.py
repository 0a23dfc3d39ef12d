"""Domain models for declared commands and components.

These are the startup-time definitions a bot hands to the router. They are
frozen so a registered tree cannot change under the route table.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from disroute.model.interaction import Interaction, InteractionOption

HandlerFunc = Callable[["Interaction", dict[str, "InteractionOption"]], Any]
ComponentHandlerFunc = Callable[["Interaction"], Any]
ComponentKeyFunc = Callable[["Interaction"], str]


class CommandKind(Enum):
    """Role of a nested command option in the route tree."""

    COMMAND = "command"  # scalar option, never a path segment
    SUBCOMMAND = "subcommand"
    SUBCOMMAND_GROUP = "subcommand_group"


@dataclass(frozen=True)
class Handlers:
    """Callbacks attached to one route.

    Attributes:
        command: Runs when the command is invoked.
        autocomplete: Runs when the platform asks for option suggestions.
    """

    command: HandlerFunc | None = None
    autocomplete: HandlerFunc | None = None


@dataclass(frozen=True)
class CommandOption:
    """Nested node of a command tree (subcommand, group, or scalar option)."""

    path: str
    kind: CommandKind = CommandKind.COMMAND
    handlers: Handlers = Handlers()
    options: tuple["CommandOption", ...] = ()


@dataclass(frozen=True)
class Command:
    """Root of a command tree, named as the user types it after the slash."""

    path: str
    handlers: Handlers = Handlers()
    options: tuple[CommandOption, ...] = ()


@dataclass(frozen=True)
class Component:
    """Handler for a message component (button, select menu) keyed by custom id."""

    key: str
    handler: ComponentHandlerFunc | None = None
