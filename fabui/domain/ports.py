from __future__ import annotations
from typing import Any, Callable, Mapping, Optional, Protocol

RawElement = Any
WrappedElement = Any
EventHandler = Callable[..., Any]


# ---- Ports (Hexagonal boundaries) ----
class ElementPort(Protocol):
    """DOM-like element library used to resolve and wire controller elements.

    A "wrapped" value is a queryable collection of raw elements (the jQuery
    object of a browser runtime); ``first`` unwraps it.
    """

    def create_container(self) -> WrappedElement: ...  # new, empty, detached
    def query(self, selector: str) -> WrappedElement: ...
    def first(self, wrapped: WrappedElement) -> Optional[RawElement]: ...
    def on(self, wrapped: WrappedElement, event_type: str, handler: EventHandler) -> None: ...
    def delegate(
        self,
        wrapped: WrappedElement,
        event_type: str,
        selector: str,
        handler: EventHandler,
    ) -> None: ...
    def is_wrapped(self, value: Any) -> bool: ...


class ModelPort(Protocol):
    """Optional model subsystem: guid checks and model-class generation."""

    def validate_guid(self, value: Any) -> bool: ...
    def make(self, data: Mapping[str, Any], name: Optional[str] = None) -> type: ...
