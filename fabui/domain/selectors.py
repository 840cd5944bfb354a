"""Small CSS-style selector engine shared by the element adapters.

Supported syntax: type selectors (``div``), the universal selector (``*``),
``#id``, ``.class``, ``[attr]``, ``[attr=value]`` (quoted or bare), compound
selectors (``button.primary[disabled]``), the descendant (whitespace) and
child (``>``) combinators, and comma-separated groups.

The engine is node-agnostic: adapters supply a :class:`NodeView` that knows
how to describe, climb and walk their own element objects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Protocol, Tuple

from .errors import SelectorError

_IDENT = r"-?[A-Za-z_][\w-]*"
_TOKEN = re.compile(
    rf"""
      \s*(?P<comb>[>,])\s*
    | (?P<ws>\s+)
    | (?P<tag>\*|{_IDENT})
    | \#(?P<id>[\w-]+)
    | \.(?P<cls>{_IDENT})
    | \[\s*(?P<attr>{_IDENT})\s*
        (?:=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\]\s]+))\s*)?
      \]
    """,
    re.VERBOSE,
)

DESCENDANT = " "
CHILD = ">"


@dataclass(frozen=True)
class NodeInfo:
    """What a selector can see of a node."""

    tag: str
    id: Optional[str] = None
    classes: FrozenSet[str] = frozenset()
    attrs: Mapping[str, Any] = field(default_factory=dict)


class NodeView(Protocol):
    def describe(self, node: Any) -> NodeInfo: ...
    def parent(self, node: Any) -> Optional[Any]: ...
    def children(self, node: Any) -> Iterable[Any]: ...


@dataclass(frozen=True)
class AttrTest:
    name: str
    value: Optional[str] = None

    def matches(self, attrs: Mapping[str, Any]) -> bool:
        if self.name not in attrs:
            return False
        return self.value is None or str(attrs[self.name]) == self.value


@dataclass(frozen=True)
class Compound:
    tag: Optional[str] = None
    ids: Tuple[str, ...] = ()
    classes: Tuple[str, ...] = ()
    attrs: Tuple[AttrTest, ...] = ()

    def matches(self, info: NodeInfo) -> bool:
        if self.tag not in (None, "*") and info.tag.lower() != self.tag:
            return False
        if any(ident != info.id for ident in self.ids):
            return False
        if not info.classes.issuperset(self.classes):
            return False
        return all(test.matches(info.attrs) for test in self.attrs)


@dataclass(frozen=True)
class ComplexSelector:
    # (combinator, compound) pairs, left to right; the first combinator is None
    steps: Tuple[Tuple[Optional[str], Compound], ...]

    def matches(self, node: Any, view: NodeView) -> bool:
        last = len(self.steps) - 1
        if not self.steps[last][1].matches(view.describe(node)):
            return False
        return self._match_left(last, node, view)

    def _match_left(self, index: int, node: Any, view: NodeView) -> bool:
        if index == 0:
            return True
        combinator = self.steps[index][0]
        wanted = self.steps[index - 1][1]
        ancestor = view.parent(node)
        while ancestor is not None:
            if wanted.matches(view.describe(ancestor)) and self._match_left(index - 1, ancestor, view):
                return True
            if combinator == CHILD:
                return False
            ancestor = view.parent(ancestor)
        return False


@dataclass(frozen=True)
class SelectorGroup:
    text: str
    alternatives: Tuple[ComplexSelector, ...]

    def matches(self, node: Any, view: NodeView) -> bool:
        return any(alternative.matches(node, view) for alternative in self.alternatives)

    def select(self, root: Any, view: NodeView, *, include_root: bool = False) -> List[Any]:
        """Return matching nodes under ``root`` in document order."""
        return [node for node in _walk(root, view, include_root) if self.matches(node, view)]


class _PendingCompound:
    def __init__(self) -> None:
        self.tag: Optional[str] = None
        self.ids: List[str] = []
        self.classes: List[str] = []
        self.attrs: List[AttrTest] = []

    @property
    def empty(self) -> bool:
        return self.tag is None and not (self.ids or self.classes or self.attrs)

    def build(self) -> Compound:
        return Compound(
            tag=self.tag,
            ids=tuple(self.ids),
            classes=tuple(self.classes),
            attrs=tuple(self.attrs),
        )


@lru_cache(maxsize=256)
def compile_selector(text: str) -> SelectorGroup:
    """Parse ``text`` into a :class:`SelectorGroup` (raises :class:`SelectorError`)."""
    if not isinstance(text, str):
        raise SelectorError(repr(text), "selector must be a string")
    source = text.strip()
    if not source:
        raise SelectorError(text, "empty selector")

    alternatives: List[ComplexSelector] = []
    steps: List[Tuple[Optional[str], Compound]] = []
    pending: Optional[str] = None
    compound = _PendingCompound()
    pos = 0
    while pos < len(source):
        match = _TOKEN.match(source, pos)
        if match is None or match.end() == pos:
            raise SelectorError(text, f"unexpected {source[pos]!r} at position {pos}")
        pos = match.end()

        comb = match.group("comb")
        if comb is not None:
            if compound.empty:
                raise SelectorError(text, f"dangling {comb!r}")
            steps.append((pending, compound.build()))
            compound = _PendingCompound()
            if comb == ",":
                alternatives.append(ComplexSelector(tuple(steps)))
                steps = []
                pending = None
            else:
                pending = CHILD
        elif match.group("ws") is not None:
            if not compound.empty:
                steps.append((pending, compound.build()))
                compound = _PendingCompound()
                pending = DESCENDANT
        elif match.group("tag") is not None:
            if not compound.empty:
                raise SelectorError(text, "type selector must start a compound")
            compound.tag = match.group("tag").lower()
        elif match.group("id") is not None:
            compound.ids.append(match.group("id"))
        elif match.group("cls") is not None:
            compound.classes.append(match.group("cls"))
        else:
            value = next(
                (v for v in (match.group("dq"), match.group("sq"), match.group("bare")) if v is not None),
                None,
            )
            compound.attrs.append(AttrTest(match.group("attr"), value))

    if compound.empty:
        raise SelectorError(text, "selector ends with a combinator")
    steps.append((pending, compound.build()))
    alternatives.append(ComplexSelector(tuple(steps)))
    return SelectorGroup(text=source, alternatives=tuple(alternatives))


def _walk(root: Any, view: NodeView, include_root: bool) -> Iterator[Any]:
    if include_root:
        yield root
    stack = list(reversed(list(view.children(root))))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(view.children(node))))


__all__ = [
    "AttrTest",
    "CHILD",
    "ComplexSelector",
    "Compound",
    "DESCENDANT",
    "NodeInfo",
    "NodeView",
    "SelectorGroup",
    "compile_selector",
]
