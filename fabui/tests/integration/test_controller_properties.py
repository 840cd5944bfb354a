"""End-to-end behavior of blueprints built and constructed through a factory."""

from __future__ import annotations

import pytest

from fabui.adapters.dom_memory import MemoryElement
from fabui.adapters.model_pydantic import ControllerModel
from fabui.tests.unit.helpers import add_widget, make_factory, record_calls

_ELEMENT_KEYS = {"el", "wrapped"}


def _plain_attributes(controller) -> dict:
    return {key: value for key, value in controller.attributes().items() if key not in _ELEMENT_KEYS}


@pytest.mark.parametrize(
    "defaults,overrides",
    [
        ({"a": 1, "b": 2}, {"b": 3}),
        ({"a": 1}, {"a": None, "c": "new"}),
        ({"f": len, "obj": {"x": 1}}, {}),
        ({}, {"only": "override"}),
    ],
)
def test_overrides_win_over_defaults(defaults, overrides) -> None:
    factory, _ = make_factory()
    factory.make("sample", defaults)
    instance = factory.construct("sample", overrides)

    for key in set(defaults) | set(overrides):
        expected = overrides[key] if key in overrides else defaults[key]
        assert getattr(instance, key) is expected


@pytest.mark.parametrize("args", [(), (None,), (42,), (3.5,)])
def test_empty_blueprints_only_carry_element_attributes(args) -> None:
    factory, _ = make_factory()
    instance = factory.make(*args)()
    assert set(instance.attributes()) == _ELEMENT_KEYS


def test_registration_does_not_change_merge_semantics() -> None:
    factory, dom = make_factory()
    add_widget(dom)
    defaults = {"title": "Todo", "count": 0}
    options = {"el": "#widget", "count": 5, "extra": [1]}

    factory.make("todo", defaults)
    by_name = factory.construct("todo", options)
    direct = factory.make(defaults)(options)

    assert by_name.attributes() == direct.attributes()


def test_unknown_name_returns_none_without_tracking() -> None:
    factory, _ = make_factory()
    factory.make("known")
    factory.construct("known")
    before = factory.constructed()

    assert factory.construct("neverRegistered") is None
    assert factory.constructed() == before


def test_second_registration_replaces_first() -> None:
    factory, _ = make_factory()
    factory.make("todo", {"title": "First", "only_first": True})
    factory.make("todo", {"title": "Second"})

    instance = factory.construct("todo")

    assert instance.title == "Second"
    assert not hasattr(instance, "only_first")


def test_absent_el_creates_fresh_element_per_instance() -> None:
    factory, _ = make_factory()
    factory.make("panel")
    first = factory.construct("panel")
    second = factory.construct("panel")

    assert first.el is first.wrapped.first()
    assert first.el.tag == "div"
    assert first.el.children == []
    assert first.el is not second.el


def test_selector_el_resolves_through_query() -> None:
    factory, dom = make_factory()
    widget = add_widget(dom)
    factory.make("widget", {"el": "#widget"})

    instance = factory.construct("widget")

    assert instance.wrapped == dom.query("#widget")
    assert instance.el is widget


def test_delegated_click_invokes_callback_once_with_instance() -> None:
    factory, dom = make_factory()
    widget = add_widget(dom, buttons=2)
    calls = []
    factory.make("widget", {"el": "#widget", "events": {"click .btn": record_calls(calls)}})
    instance = factory.construct("widget")

    dom.dispatch(widget.children[1], "click")

    assert len(calls) == 1
    controller, (event,) = calls[0]
    assert controller is instance
    assert event.delegate_target is widget.children[1]

    dom.dispatch(widget, "click")
    outside = dom.document.append(MemoryElement("button", classes=["btn"]))
    dom.dispatch(outside, "click")
    assert len(calls) == 1


def test_instances_do_not_share_listeners() -> None:
    factory, dom = make_factory()
    calls = []
    factory.make("panel", {"events": {"click": record_calls(calls)}})
    first = factory.construct("panel")
    second = factory.construct("panel")

    dom.dispatch(first.el, "click")

    assert [controller for controller, _ in calls] == [first]
    dom.dispatch(second.el, "click")
    assert [controller for controller, _ in calls] == [first, second]


def test_plain_model_becomes_generated_model_instance() -> None:
    factory, _ = make_factory()
    data = {"title": "Todo", "done": False}
    factory.make("todo", {"model": data})

    instance = factory.construct("todo")

    assert isinstance(instance.model, ControllerModel)
    assert instance.model is not data
    assert (instance.model.title, instance.model.done) == ("Todo", False)
    assert _plain_attributes(instance).keys() == {"model"}


def test_init_runs_before_events_are_wired() -> None:
    factory, dom = make_factory()
    calls = []

    def init(self) -> None:
        self.el.append(MemoryElement("button", classes=["late"]))
        self.events = {"click .late": record_calls(calls)}

    factory.make("late", {"init": init})
    instance = factory.construct("late")
    dom.dispatch(instance.el.children[0], "click")

    assert [controller for controller, _ in calls] == [instance]
