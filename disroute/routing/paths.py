"""Route key construction.

Two functions build the same key from different inputs: the declared command
tree at registration time, and the live option list at dispatch time. A leaf
is only reachable if both produce the identical string for it.

    Command("role") -> group "admin" -> subcommand "add"   =>  "role:admin:add"
    Interaction(name="role", options=[admin[add[...]]])    =>  "role:admin:add"
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from disroute.core.errors import InvalidDefinitionError
from disroute.model.command import Command, CommandKind, CommandOption, Handlers
from disroute.model.interaction import Interaction, InteractionOption, OptionType

DEFAULT_SEPARATOR = ":"


@dataclass(frozen=True)
class RouteEntry:
    """One registrable leaf: its route key and the handlers bound to it."""

    path: str
    handlers: Handlers


@dataclass(frozen=True)
class ResolvedRoute:
    """Route key and option map recovered from an interaction."""

    path: str
    options: dict[str, InteractionOption]


def join_path(parts: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join path segments into a route key."""
    return separator.join(parts)


def flatten_options(options: Sequence[InteractionOption] | None) -> dict[str, InteractionOption]:
    """Map each option's name to the option itself.

    Sibling names are unique on the platform, so no collision handling.
    """
    return {option.name: option for option in options or ()}


def build_registration_paths(
    command: Command,
    separator: str = DEFAULT_SEPARATOR,
) -> list[RouteEntry]:
    """Flatten a command tree into route entries.

    Args:
        command: Root command definition.
        separator: String used to join path segments.

    Returns:
        Entries in declaration order.

    Raises:
        InvalidDefinitionError: If any node of the tree cannot be routed.
    """
    root = [_segment(command.path, separator, parent=None)]
    root_path = join_path(root, separator)

    if not command.options:
        if command.handlers.command is None:
            raise InvalidDefinitionError("Command has no handler and no subcommands", root_path)
        return [RouteEntry(root_path, command.handlers)]

    routing = [opt for opt in command.options if opt.kind is not CommandKind.COMMAND]

    if not routing:
        # Only scalar options: the root itself is the leaf
        if command.handlers.command is None:
            raise InvalidDefinitionError(
                "Command with only plain options must have its own handler", root_path
            )
        _reject_option_handlers(command.options, root_path)
        return [RouteEntry(root_path, command.handlers)]

    if _has_handlers(command.handlers):
        raise InvalidDefinitionError(
            "Command with subcommands cannot have its own handler", root_path
        )
    if len(routing) != len(command.options):
        raise InvalidDefinitionError(
            "Command with subcommands cannot also declare plain options", root_path
        )

    entries: list[RouteEntry] = []
    for option in command.options:
        parts = [*root, _segment(option.path, separator, parent=root_path)]

        if option.kind is CommandKind.SUBCOMMAND:
            entries.append(_subcommand_entry(parts, option, separator))
            continue

        group_path = join_path(parts, separator)
        if _has_handlers(option.handlers):
            raise InvalidDefinitionError("Subcommand group cannot have its own handler", group_path)
        if not option.options:
            raise InvalidDefinitionError("Subcommand group has no subcommands", group_path)

        for sub in option.options:
            if sub.kind is not CommandKind.SUBCOMMAND:
                raise InvalidDefinitionError(
                    f"Subcommand group child '{sub.path}' is not a subcommand", group_path
                )
            sub_parts = [*parts, _segment(sub.path, separator, parent=group_path)]
            entries.append(_subcommand_entry(sub_parts, sub, separator))

    return entries


def _subcommand_entry(parts: list[str], option: CommandOption, separator: str) -> RouteEntry:
    path = join_path(parts, separator)
    if option.handlers.command is None:
        raise InvalidDefinitionError("Subcommand has no handler", path)
    for child in option.options:
        if child.kind is not CommandKind.COMMAND:
            raise InvalidDefinitionError(
                f"Subcommand cannot nest '{child.path}' of kind {child.kind.value}", path
            )
    _reject_option_handlers(option.options, path)
    return RouteEntry(path, option.handlers)


def _has_handlers(handlers: Handlers) -> bool:
    return handlers.command is not None or handlers.autocomplete is not None


def _reject_option_handlers(options: Sequence[CommandOption], parent: str) -> None:
    """Plain options are arguments, not routes; handlers on them are unreachable."""
    for option in options:
        if _has_handlers(option.handlers):
            raise InvalidDefinitionError(
                f"Plain option '{option.path}' cannot have its own handler", parent
            )


def check_separator(separator: str) -> str:
    """Return the separator if it can split route keys unambiguously.

    Raises:
        ValueError: If the separator is empty or contains whitespace.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    if any(ch.isspace() for ch in separator):
        raise ValueError("separator must not contain whitespace")
    return separator


def _segment(value: str, separator: str, parent: str | None) -> str:
    """Validate one path segment before it becomes part of a key."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidDefinitionError("Path segment must be a non-empty string", parent)
    if separator in value:
        raise InvalidDefinitionError(
            f"Path segment '{value}' contains the separator '{separator}'", parent
        )
    return value


def resolve_interaction(
    interaction: Interaction,
    separator: str = DEFAULT_SEPARATOR,
) -> ResolvedRoute:
    """Recover the route key and leaf-level options from an interaction.

    Only the first root option can select a subcommand or group. Scalar options
    at the root never form path segments.
    """
    parts = [interaction.name]
    options = flatten_options(interaction.options)

    if not interaction.options:
        return ResolvedRoute(join_path(parts, separator), options)

    first = interaction.options[0]

    if first.type == OptionType.SUB_COMMAND:
        parts.append(first.name)
        options = flatten_options(first.options)

    elif first.type == OptionType.SUB_COMMAND_GROUP:
        parts.append(first.name)
        if first.options:
            chosen = first.options[0]
            parts.append(chosen.name)
            options = flatten_options(chosen.options)
        else:
            options = {}

    return ResolvedRoute(join_path(parts, separator), options)
