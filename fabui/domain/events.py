"""Parsing for declarative event-map keys such as ``"click .btn"``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class EventKey:
    """Event type plus an optional delegation selector."""

    event_type: str
    selector: Optional[str] = None

    @property
    def delegated(self) -> bool:
        return bool(self.selector)

    def __str__(self) -> str:
        if self.selector:
            return f"{self.event_type} {self.selector}"
        return self.event_type


def parse_event_key(key: Any) -> Optional[EventKey]:
    """Split ``key`` on the first run of whitespace.

    The remainder after the event type is kept whole so descendant selectors
    survive. Returns ``None`` for blank keys.
    """
    parts = str(key).split(None, 1)
    if not parts:
        return None
    if len(parts) == 1:
        return EventKey(parts[0])
    return EventKey(parts[0], parts[1].strip())


def wiring_plan(events: Mapping[Any, Any]) -> Tuple[List[Tuple[EventKey, Callable[..., Any]]], List[Any]]:
    """Return ``(plan, skipped_keys)`` for the callable entries of ``events``."""
    plan: List[Tuple[EventKey, Callable[..., Any]]] = []
    skipped: List[Any] = []
    for key, callback in events.items():
        if not callable(callback):
            skipped.append(key)
            continue
        event_key = parse_event_key(key)
        if event_key is None:
            skipped.append(key)
            continue
        plan.append((event_key, callback))
    return plan, skipped


__all__ = ["EventKey", "parse_event_key", "wiring_plan"]
