"""Domain models for inbound interaction events."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class InteractionType(IntEnum):
    """Kind of inbound interaction, numbered as on the platform."""

    PING = 1
    COMMAND = 2
    COMPONENT = 3
    AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class OptionType(IntEnum):
    """Type tag carried by an interaction option."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11

    @property
    def is_nesting(self) -> bool:
        """True for the two types that select a subcommand rather than carry a value."""
        return self in (OptionType.SUB_COMMAND, OptionType.SUB_COMMAND_GROUP)


@dataclass(frozen=True)
class InteractionOption:
    """One option of an interaction.

    Subcommand and subcommand-group options have no value and carry the
    selected level in ``options``. Scalar options carry ``value``.

    Attributes:
        name: Option name as declared on the command.
        type: Option type tag.
        value: Scalar value for non-nesting options.
        options: Nested options for subcommand and group options.
        focused: Set on the option the user is typing in (autocomplete only).
    """

    name: str
    type: OptionType
    value: Any = None
    options: tuple["InteractionOption", ...] = ()
    focused: bool = False


@dataclass(frozen=True)
class Interaction:
    """Already-deserialized inbound event handed over by the transport.

    The router reads ``type``, ``name``, ``options`` and ``custom_id`` and
    passes the whole object through to handlers untouched. ``id`` and ``raw``
    are for handlers: the platform interaction id needed to send a response,
    and the transport's original event object.
    """

    type: InteractionType
    name: str = ""
    options: tuple[InteractionOption, ...] = ()
    custom_id: str | None = None
    id: str | None = None
    raw: Any = None
