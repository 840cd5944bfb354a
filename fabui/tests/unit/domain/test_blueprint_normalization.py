from __future__ import annotations

import pytest

from fabui.domain.blueprint import Blueprint, normalize_blueprint_args


def test_named_blueprint_keeps_name_and_defaults() -> None:
    blueprint = normalize_blueprint_args("todo", {"title": "Todo", "count": 0})
    assert blueprint.name == "todo"
    assert dict(blueprint.defaults) == {"title": "Todo", "count": 0}
    assert blueprint.anonymous is False


def test_mapping_first_argument_is_anonymous() -> None:
    blueprint = normalize_blueprint_args({"title": "Todo"}, {"ignored": True})
    assert blueprint.name is None
    assert dict(blueprint.defaults) == {"title": "Todo"}


@pytest.mark.parametrize("first", [None, 42, 3.5, True, ["a"], object()])
def test_non_string_non_mapping_degrades_to_empty(first) -> None:
    blueprint = normalize_blueprint_args(first, {"title": "Todo"})
    assert blueprint == Blueprint()
    assert dict(blueprint.defaults) == {}


def test_no_arguments_is_empty_anonymous() -> None:
    blueprint = normalize_blueprint_args()
    assert blueprint.name is None
    assert dict(blueprint.defaults) == {}


def test_empty_name_is_anonymous() -> None:
    assert normalize_blueprint_args("", {"a": 1}).name is None


def test_string_name_with_non_mapping_defaults() -> None:
    blueprint = normalize_blueprint_args("todo", "not-a-mapping")
    assert blueprint.name == "todo"
    assert dict(blueprint.defaults) == {}


def test_defaults_are_snapshotted_but_values_shared() -> None:
    shared = {"items": []}
    source = {"state": shared}
    blueprint = normalize_blueprint_args("todo", source)
    source["late"] = True
    assert "late" not in blueprint.defaults
    assert blueprint.defaults["state"] is shared
    with pytest.raises(TypeError):
        blueprint.defaults["x"] = 1  # type: ignore[index]
