"""Element specifications derived from a controller's ``el`` attribute.

The ``el`` value is classified once into one of three variants and the
factory resolves each variant explicitly. Values that fit none of them are
reported as ``None`` by :func:`element_spec_for`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union


@dataclass(frozen=True)
class Absent:
    """No element given: a fresh container is created."""


@dataclass(frozen=True)
class Selector:
    """Element given as a selector string resolved through the element port."""

    selector: str


@dataclass(frozen=True)
class PrebuiltHandle:
    """Element given as an already wrapped element collection."""

    handle: Any


ElementSpec = Union[Absent, Selector, PrebuiltHandle]


def is_blank(value: Any) -> bool:
    """Return True for values that mean "no element" (None, False, 0, '')."""
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def element_spec_for(value: Any, is_wrapped: Callable[[Any], bool]) -> Optional[ElementSpec]:
    """Classify ``value``; ``None`` means the shape is ambiguous."""
    if is_blank(value):
        return Absent()
    if isinstance(value, str):
        return Selector(value)
    if is_wrapped(value):
        return PrebuiltHandle(value)
    return None


__all__ = [
    "Absent",
    "ElementSpec",
    "PrebuiltHandle",
    "Selector",
    "element_spec_for",
    "is_blank",
]
