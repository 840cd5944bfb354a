from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union, overload

from fabui.domain.ports import ElementPort, EventHandler
from fabui.domain.selectors import NodeInfo, compile_selector

DOCUMENT_TAG = "#document"


@dataclass
class Event:
    """Event object passed to listeners during :meth:`MemoryDom.dispatch`."""

    type: str
    target: "MemoryElement"
    detail: Dict[str, Any] = field(default_factory=dict)
    current_target: Optional["MemoryElement"] = None
    delegate_target: Optional["MemoryElement"] = None
    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass(frozen=True)
class _Listener:
    event_type: str
    handler: EventHandler
    selector: Optional[str] = None


class MemoryElement:
    """Minimal element node: tag, id, classes, attributes and children."""

    def __init__(
        self,
        tag: str = "div",
        *,
        id: Optional[str] = None,
        classes: Iterable[str] = (),
        attrs: Optional[Dict[str, Any]] = None,
        text: str = "",
    ) -> None:
        self.tag = tag.lower()
        self.id = id
        self.classes: List[str] = list(classes)
        self.attrs: Dict[str, Any] = dict(attrs or {})
        self.text = text
        self.parent: Optional[MemoryElement] = None
        self.children: List[MemoryElement] = []
        self.listeners: List[_Listener] = []

    # ---------- tree ----------

    def append(self, child: "MemoryElement") -> "MemoryElement":
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: "MemoryElement") -> None:
        self.children.remove(child)
        child.parent = None

    def ancestors(self) -> Iterator["MemoryElement"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    # ---------- selectors ----------

    def matches(self, selector: str) -> bool:
        return compile_selector(selector).matches(self, MEMORY_VIEW)

    def select(self, selector: str) -> List["MemoryElement"]:
        return compile_selector(selector).select(self, MEMORY_VIEW)

    def __repr__(self) -> str:
        label = self.tag
        if self.id:
            label += f"#{self.id}"
        for cls in self.classes:
            label += f".{cls}"
        return f"<{label}>"


class _MemoryView:
    def describe(self, node: MemoryElement) -> NodeInfo:
        return NodeInfo(
            tag=node.tag,
            id=node.id,
            classes=frozenset(node.classes),
            attrs=node.attrs,
        )

    def parent(self, node: MemoryElement) -> Optional[MemoryElement]:
        return node.parent

    def children(self, node: MemoryElement) -> Iterable[MemoryElement]:
        return node.children


MEMORY_VIEW = _MemoryView()


class ElementSet(Sequence):
    """Wrapped, ordered collection of :class:`MemoryElement` objects."""

    def __init__(self, elements: Iterable[MemoryElement] = ()) -> None:
        self._elements = tuple(elements)

    @overload
    def __getitem__(self, index: int) -> MemoryElement: ...
    @overload
    def __getitem__(self, index: slice) -> "ElementSet": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[MemoryElement, "ElementSet"]:
        if isinstance(index, slice):
            return ElementSet(self._elements[index])
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementSet):
            return NotImplemented
        return len(self) == len(other) and all(a is b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(id(element) for element in self._elements))

    def first(self) -> Optional[MemoryElement]:
        return self._elements[0] if self._elements else None

    def find(self, selector: str) -> "ElementSet":
        found: List[MemoryElement] = []
        for element in self._elements:
            for match in element.select(selector):
                if all(match is not seen for seen in found):
                    found.append(match)
        return ElementSet(found)

    def __repr__(self) -> str:
        return f"ElementSet({list(self._elements)!r})"


class MemoryDom(ElementPort):
    """In-memory element port used for tests, headless runs and offline development."""

    def __init__(self, document: Optional[MemoryElement] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.document = document or MemoryElement(DOCUMENT_TAG)

    # ---------- ElementPort ----------

    def create_container(self) -> ElementSet:
        return ElementSet([MemoryElement("div")])

    def query(self, selector: str) -> ElementSet:
        return ElementSet(self.document.select(selector))

    def first(self, wrapped: ElementSet) -> Optional[MemoryElement]:
        return wrapped.first()

    def on(self, wrapped: ElementSet, event_type: str, handler: EventHandler) -> None:
        for element in wrapped:
            element.listeners.append(_Listener(event_type, handler))

    def delegate(
        self,
        wrapped: ElementSet,
        event_type: str,
        selector: str,
        handler: EventHandler,
    ) -> None:
        compile_selector(selector)
        for element in wrapped:
            element.listeners.append(_Listener(event_type, handler, selector))

    def is_wrapped(self, value: Any) -> bool:
        return isinstance(value, ElementSet)

    # ---------- helpers ----------

    def wrap(self, *elements: MemoryElement) -> ElementSet:
        return ElementSet(elements)

    def dispatch(self, target: MemoryElement, event_type: str, **detail: Any) -> Event:
        """Bubble an event from ``target`` to the root of its tree.

        At each node, delegated listeners run first for every element between
        the target and that node (deepest first) matching their selector, then
        direct listeners. ``Event.stop_propagation`` lets the remaining handlers
        of the element being handled finish, then skips everything shallower.
        """
        event = Event(type=event_type, target=target, detail=dict(detail))
        path: List[MemoryElement] = []
        node: Optional[MemoryElement] = target
        while node is not None:
            listeners = [item for item in node.listeners if item.event_type == event_type]
            delegated = [item for item in listeners if item.selector]
            for current in path:
                if event.propagation_stopped:
                    break
                for listener in delegated:
                    if current.matches(listener.selector):
                        self._invoke(listener.handler, event, current, current)
            if not event.propagation_stopped:
                for listener in listeners:
                    if not listener.selector:
                        self._invoke(listener.handler, event, node, None)
            if event.propagation_stopped:
                break
            path.append(node)
            node = node.parent
        return event

    def _invoke(
        self,
        handler: Callable[[Event], Any],
        event: Event,
        current: MemoryElement,
        delegate_target: Optional[MemoryElement],
    ) -> None:
        event.current_target = current
        event.delegate_target = delegate_target
        self._log.debug("Dispatching %s on %r", event.type, current)
        handler(event)


__all__ = ["ElementSet", "Event", "MemoryDom", "MemoryElement"]
