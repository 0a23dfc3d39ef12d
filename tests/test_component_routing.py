"""Tests for message component routing."""

import pytest

from disroute.core.errors import (
    ComponentNotFoundError,
    InvalidDefinitionError,
    WrongInteractionTypeError,
)
from disroute.model import Component, Interaction, InteractionType
from disroute.routing.router import Router, default_component_key


def component_event(custom_id: str | None, **kwargs) -> Interaction:
    return Interaction(type=InteractionType.COMPONENT, custom_id=custom_id, **kwargs)


@pytest.fixture
def router() -> Router:
    """Router with a confirm button and a cancel button."""
    r = Router()
    r.register_components(
        [
            Component(key="confirm", handler=lambda i: "confirmed"),
            Component(key="cancel", handler=lambda i: "cancelled"),
        ]
    )
    return r


def test_default_component_key():
    assert default_component_key(component_event("confirm")) == "confirm"
    assert default_component_key(component_event(None)) == ""


def test_default_component_key_ignores_other_types():
    event = Interaction(type=InteractionType.COMMAND, name="ping", custom_id="confirm")

    assert default_component_key(event) == ""


def test_execute_component(router: Router):
    assert router.find_and_execute_component(component_event("confirm")) == "confirmed"
    assert router.find_and_execute_component(component_event("cancel")) == "cancelled"


def test_handler_receives_interaction(router: Router):
    seen: list[Interaction] = []
    router.register_components([Component(key="echo", handler=seen.append)])
    event = component_event("echo", id="123")

    router.find_and_execute_component(event)

    assert seen == [event]


def test_wrong_interaction_type(router: Router):
    with pytest.raises(WrongInteractionTypeError):
        router.find_and_execute_component(
            Interaction(type=InteractionType.COMMAND, name="confirm", custom_id="confirm")
        )


def test_unknown_component(router: Router):
    with pytest.raises(ComponentNotFoundError) as exc_info:
        router.find_and_execute_component(component_event("missing"))

    assert exc_info.value.key == "missing"


def test_custom_key_function():
    """Prefix-keyed components, e.g. 'vote:42' routes to 'vote'."""

    def prefix_key(interaction: Interaction) -> str:
        return (interaction.custom_id or "").split(":", 1)[0]

    router = Router(component_key=prefix_key)
    router.register_components([Component(key="vote", handler=lambda i: i.custom_id)])

    assert router.find_and_execute_component(component_event("vote:42")) == "vote:42"


@pytest.mark.parametrize(
    "component",
    [
        Component(key="", handler=lambda i: None),
        Component(key="   ", handler=lambda i: None),
        Component(key="button", handler=None),
    ],
    ids=["empty-key", "blank-key", "no-handler"],
)
def test_invalid_components(component: Component):
    router = Router()

    with pytest.raises(InvalidDefinitionError):
        router.register_components([component])

    assert len(router.get_components()) == 0


def test_failed_component_batch_is_not_applied(router: Router):
    with pytest.raises(InvalidDefinitionError):
        router.register_components(
            [
                Component(key="retry", handler=lambda i: None),
                Component(key="confirm", handler=lambda i: None),
            ]
        )

    assert set(router.get_components()) == {"confirm", "cancel"}


def test_components_do_not_touch_command_tables(router: Router):
    assert len(router.get_all()) == 0
    assert len(router.get_autocompletes()) == 0
