from __future__ import annotations

import pytest

from fabui.adapters.dom_memory import MemoryElement
from fabui.domain.errors import SelectorError
from fabui.domain.selectors import CHILD, DESCENDANT, compile_selector


@pytest.fixture
def tree() -> MemoryElement:
    root = MemoryElement("#document")
    page = root.append(MemoryElement("section", id="page", classes=["main"]))
    toolbar = page.append(MemoryElement("div", classes=["toolbar"]))
    toolbar.append(MemoryElement("button", id="save", classes=["btn", "primary"]))
    toolbar.append(MemoryElement("button", classes=["btn"], attrs={"disabled": "", "data-role": "cancel"}))
    items = page.append(MemoryElement("ul", classes=["list"]))
    for index in range(3):
        items.append(MemoryElement("li", classes=["item"], attrs={"data-index": str(index)}))
    return root


def test_compile_structure() -> None:
    group = compile_selector("div.toolbar > button.btn, #page .item")
    first, second = group.alternatives
    assert [combinator for combinator, _ in first.steps] == [None, CHILD]
    assert [combinator for combinator, _ in second.steps] == [None, DESCENDANT]
    assert first.steps[1][1].classes == ("btn",)


@pytest.mark.parametrize(
    "selector,count",
    [
        ("button", 2),
        (".btn", 2),
        ("#save", 1),
        ("button.btn.primary", 1),
        ("[disabled]", 1),
        ("[data-role=cancel]", 1),
        ('[data-role="cancel"]', 1),
        ("[data-index='2']", 1),
        ("#page .item", 3),
        ("section > .item", 0),
        ("ul > li", 3),
        ("*", 8),
        ("li, button", 5),
    ],
)
def test_select_counts(tree, selector, count) -> None:
    assert len(tree.select(selector)) == count


def test_select_keeps_document_order(tree) -> None:
    found = tree.select("button, section")
    assert [element.tag for element in found] == ["section", "button", "button"]


def test_matches_single_element(tree) -> None:
    save = tree.select("#save")[0]
    assert save.matches(".toolbar button")
    assert save.matches("section button.primary")
    assert not save.matches(".list button")


@pytest.mark.parametrize("selector", ["", "   ", "div >", ", div", "div,", "a b$", "div#"])
def test_invalid_selectors_raise(selector) -> None:
    with pytest.raises(SelectorError):
        compile_selector(selector)


def test_tag_match_is_case_insensitive(tree) -> None:
    assert len(tree.select("BUTTON")) == 2
