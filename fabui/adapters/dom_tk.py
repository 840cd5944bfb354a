"""Element port over a tkinter widget tree.

Selectors see each widget as an element whose type is its lower-cased Tk
class (``button``), whose id is its Tk name (``#save`` for
``tk.Button(frame, name="save")``) and whose classes are its Tk class plus
any names added with :meth:`TkDom.add_class`. Friendly event names map to Tk
sequences; raw ``<...>`` sequences pass through and any other name becomes
a virtual event (``"refresh"`` -> ``"<<refresh>>"``).

Tk events do not bubble, so delegated listeners bind once per sequence on
the application root (``bind_all``) and filter by container ancestry and
selector.
"""

from __future__ import annotations

import logging
import tkinter as tk
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from fabui.domain.ports import ElementPort, EventHandler
from fabui.domain.selectors import NodeInfo, compile_selector

TK_SEQUENCES: Dict[str, str] = {
    "click": "<Button-1>",
    "dblclick": "<Double-Button-1>",
    "mousedown": "<ButtonPress-1>",
    "mouseup": "<ButtonRelease-1>",
    "mouseenter": "<Enter>",
    "mouseleave": "<Leave>",
    "keydown": "<KeyPress>",
    "keyup": "<KeyRelease>",
    "focus": "<FocusIn>",
    "blur": "<FocusOut>",
    "resize": "<Configure>",
}


def tk_sequence(event_type: str) -> str:
    """Translate an event-map event type into a Tk event sequence."""
    text = event_type.strip()
    if text.startswith("<"):
        return text
    return TK_SEQUENCES.get(text.lower(), f"<<{text}>>")


class TkWidgets(Sequence):
    """Wrapped, ordered collection of tkinter widgets."""

    def __init__(self, widgets: Iterable[tk.Misc] = ()) -> None:
        self._widgets = tuple(widgets)

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return TkWidgets(self._widgets[index])
        return self._widgets[index]

    def __len__(self) -> int:
        return len(self._widgets)

    def first(self) -> Optional[tk.Misc]:
        return self._widgets[0] if self._widgets else None

    def __repr__(self) -> str:
        return f"TkWidgets({[str(widget) for widget in self._widgets]!r})"


@dataclass(frozen=True)
class _Delegation:
    containers: tuple
    selector: str
    handler: EventHandler


class TkDom(ElementPort):
    """Element port bound to one Tk application root."""

    def __init__(self, root: tk.Misc) -> None:
        self._log = logging.getLogger(__name__)
        self.root = root
        self._classes: Dict[str, Set[str]] = {}
        self._delegations: Dict[str, List[_Delegation]] = {}

    # ---------- ElementPort ----------

    def create_container(self) -> TkWidgets:
        return TkWidgets([tk.Frame(self.root)])

    def query(self, selector: str) -> TkWidgets:
        return TkWidgets(compile_selector(selector).select(self.root, self))

    def first(self, wrapped: TkWidgets) -> Optional[tk.Misc]:
        return wrapped.first()

    def on(self, wrapped: TkWidgets, event_type: str, handler: EventHandler) -> None:
        sequence = tk_sequence(event_type)
        for widget in wrapped:
            widget.bind(sequence, handler, add="+")

    def delegate(
        self,
        wrapped: TkWidgets,
        event_type: str,
        selector: str,
        handler: EventHandler,
    ) -> None:
        compile_selector(selector)
        sequence = tk_sequence(event_type)
        if sequence not in self._delegations:
            self._delegations[sequence] = []
            self.root.bind_all(sequence, lambda event, seq=sequence: self._deliver(seq, event), add="+")
        self._delegations[sequence].append(_Delegation(tuple(wrapped), selector, handler))

    def is_wrapped(self, value: Any) -> bool:
        return isinstance(value, TkWidgets)

    # ---------- NodeView ----------

    def describe(self, node: tk.Misc) -> NodeInfo:
        widget_class = node.winfo_class()
        classes = {widget_class} | self._classes.get(str(node), set())
        return NodeInfo(tag=widget_class.lower(), id=node.winfo_name(), classes=frozenset(classes))

    def parent(self, node: tk.Misc) -> Optional[tk.Misc]:
        return node.master

    def children(self, node: tk.Misc) -> Iterable[tk.Misc]:
        return node.winfo_children()

    # ---------- helpers ----------

    def wrap(self, *widgets: tk.Misc) -> TkWidgets:
        return TkWidgets(widgets)

    def add_class(self, widget: tk.Misc, *names: str) -> None:
        self._classes.setdefault(str(widget), set()).update(names)

    def deliver(self, event_type: str, event: Any) -> None:
        """Run delegated listeners for ``event`` as if Tk had fired ``event_type``."""
        self._deliver(tk_sequence(event_type), event)

    def _deliver(self, sequence: str, event: Any) -> None:
        widget = event.widget
        if isinstance(widget, str):
            try:
                widget = self.root.nametowidget(widget)
            except KeyError:
                self._log.debug("Ignoring %s for unknown widget %r", sequence, widget)
                return
        for delegation in list(self._delegations.get(sequence, ())):
            selector = compile_selector(delegation.selector)
            for container in delegation.containers:
                path: List[tk.Misc] = []
                node = widget
                while node is not None and node is not container:
                    path.append(node)
                    node = node.master
                if node is None:
                    continue
                for current in path:
                    if selector.matches(current, self):
                        delegation.handler(event)


__all__ = ["TK_SEQUENCES", "TkDom", "TkWidgets", "tk_sequence"]
