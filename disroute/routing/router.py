"""Interaction routing.

The Router owns three tables: command handlers and autocomplete handlers keyed
by route path, and component handlers keyed by custom id. Tables are
copy-on-write. Registration stages a full copy under the write lock and
publishes it with a single assignment, so dispatch reads without locking and
never sees half of a batch.
"""

import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from disroute.core.errors import (
    ComponentNotFoundError,
    InvalidDefinitionError,
    RouteNotFoundError,
    WrongInteractionTypeError,
)
from disroute.model.command import (
    Command,
    Component,
    ComponentHandlerFunc,
    ComponentKeyFunc,
    HandlerFunc,
)
from disroute.model.interaction import Interaction, InteractionType
from disroute.routing.paths import (
    DEFAULT_SEPARATOR,
    build_registration_paths,
    check_separator,
    resolve_interaction,
)

if TYPE_CHECKING:
    from disroute.core.config.models import RouterConfig

logger = logging.getLogger(__name__)


def default_component_key(interaction: Interaction) -> str:
    """Return the custom id of a component interaction, or "" for anything else."""
    if interaction.type != InteractionType.COMPONENT:
        return ""
    return interaction.custom_id or ""


class Router:
    """Maps interactions to registered handlers.

    Build one per bot, register everything at startup, then dispatch from any
    number of threads. Handlers run on the calling thread and their return
    values and exceptions pass through untouched.

    Example:
        >>> router = Router()
        >>> router.register_all([Command("ping", Handlers(command=ping))])
        >>> router.find_and_execute(interaction)
    """

    def __init__(
        self,
        component_key: ComponentKeyFunc | None = None,
        separator: str = DEFAULT_SEPARATOR,
        log_dispatch: bool = False,
    ) -> None:
        """Initialize an empty router.

        Args:
            component_key: Extracts the lookup key from a component interaction.
                Defaults to the interaction's custom id.
            separator: String joining path segments into route keys.
            log_dispatch: Log every resolved dispatch at DEBUG level.
        """
        self.separator = check_separator(separator)
        self.log_dispatch = log_dispatch
        self._component_key = component_key or default_component_key

        self._write_lock = threading.Lock()
        self._commands: Mapping[str, HandlerFunc] = MappingProxyType({})
        self._autocompletes: Mapping[str, HandlerFunc] = MappingProxyType({})
        self._components: Mapping[str, ComponentHandlerFunc] = MappingProxyType({})

    @classmethod
    def from_config(
        cls,
        config: "RouterConfig",
        component_key: ComponentKeyFunc | None = None,
    ) -> "Router":
        """Create a router from a RouterConfig."""
        return cls(
            component_key=component_key,
            separator=config.separator,
            log_dispatch=config.log_dispatch,
        )

    # Registration

    def register_all(self, commands: Iterable[Command]) -> None:
        """Register command trees.

        The batch is all-or-nothing: on the first invalid definition or
        duplicate route nothing from this call becomes visible.

        Args:
            commands: Root command definitions.

        Raises:
            InvalidDefinitionError: If a definition is invalid or a route key
                is already registered.
        """
        with self._write_lock:
            staged_commands = dict(self._commands)
            staged_autocompletes = dict(self._autocompletes)
            added = 0

            for command in commands:
                try:
                    entries = build_registration_paths(command, self.separator)
                except InvalidDefinitionError as e:
                    logger.error(f"Rejected command definition: {e}")
                    raise

                for entry in entries:
                    if entry.path in staged_commands:
                        logger.error(f"Rejected duplicate route: {entry.path}")
                        raise InvalidDefinitionError("Route is already registered", entry.path)

                    staged_commands[entry.path] = entry.handlers.command
                    if entry.handlers.autocomplete is not None:
                        staged_autocompletes[entry.path] = entry.handlers.autocomplete
                    added += 1

            self._commands = MappingProxyType(staged_commands)
            self._autocompletes = MappingProxyType(staged_autocompletes)

        logger.info(f"Registered {added} route(s), {len(staged_commands)} total")

    def register_components(self, components: Iterable[Component]) -> None:
        """Register component handlers, all-or-nothing.

        Raises:
            InvalidDefinitionError: On a blank key, a missing handler, or a key
                that is already registered.
        """
        with self._write_lock:
            staged = dict(self._components)
            added = 0

            for component in components:
                key = component.key
                if not isinstance(key, str) or not key.strip() or component.handler is None:
                    logger.error(f"Rejected component definition: {key!r}")
                    raise InvalidDefinitionError("Invalid component, missing key or handler", key or None)
                if key in staged:
                    logger.error(f"Rejected duplicate component: {key}")
                    raise InvalidDefinitionError("Component is already registered", key)
                staged[key] = component.handler
                added += 1

            self._components = MappingProxyType(staged)

        logger.info(f"Registered {added} component(s), {len(staged)} total")

    # Introspection

    def get_all(self) -> Mapping[str, HandlerFunc]:
        """Read-only view of every command route and its handler."""
        return self._commands

    def get_autocompletes(self) -> Mapping[str, HandlerFunc]:
        """Read-only view of routes that have an autocomplete handler."""
        return self._autocompletes

    def get_components(self) -> Mapping[str, ComponentHandlerFunc]:
        """Read-only view of component keys and their handlers."""
        return self._components

    def list_routes(self) -> list[str]:
        """Sorted command route keys."""
        return sorted(self._commands)

    # Dispatch

    def find_and_execute(self, interaction: Interaction) -> Any:
        """Run the command handler for an application command interaction.

        Args:
            interaction: Interaction of type COMMAND.

        Returns:
            Whatever the handler returns.

        Raises:
            WrongInteractionTypeError: If the interaction is not a command.
            RouteNotFoundError: If no handler is registered for its route.
        """
        return self._dispatch(interaction, InteractionType.COMMAND, self._commands, "command")

    def find_and_autocomplete(self, interaction: Interaction) -> Any:
        """Run the autocomplete handler for an autocomplete interaction.

        Raises:
            WrongInteractionTypeError: If the interaction is not an autocomplete request.
            RouteNotFoundError: If the route has no autocomplete handler.
        """
        return self._dispatch(
            interaction, InteractionType.AUTOCOMPLETE, self._autocompletes, "autocomplete"
        )

    def find_and_execute_component(self, interaction: Interaction) -> Any:
        """Run the component handler for a component interaction.

        Raises:
            WrongInteractionTypeError: If the interaction is not a component activation.
            ComponentNotFoundError: If no handler is registered for the extracted key.
        """
        if interaction.type != InteractionType.COMPONENT:
            raise WrongInteractionTypeError(InteractionType.COMPONENT, interaction.type)

        components = self._components
        key = self._component_key(interaction)
        handler = components.get(key)
        if handler is None:
            logger.debug(f"Component not registered: {key!r}")
            raise ComponentNotFoundError(key)

        if self.log_dispatch:
            logger.debug(f"Dispatching component {key!r}")
        return handler(interaction)

    def _dispatch(
        self,
        interaction: Interaction,
        expected: InteractionType,
        table: Mapping[str, HandlerFunc],
        table_name: str,
    ) -> Any:
        if interaction.type != expected:
            raise WrongInteractionTypeError(expected, interaction.type)

        resolved = resolve_interaction(interaction, self.separator)
        handler = table.get(resolved.path)
        if handler is None:
            logger.debug(f"No {table_name} handler for route: {resolved.path}")
            raise RouteNotFoundError(resolved.path, table_name)

        if self.log_dispatch:
            logger.debug(
                f"Dispatching {table_name} {resolved.path} with options {sorted(resolved.options)}"
            )
        return handler(interaction, resolved.options)
