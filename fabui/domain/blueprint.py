"""Blueprint value object and registration-argument normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

INIT_ATTR = "init"
EVENTS_ATTR = "events"


@dataclass(frozen=True)
class Blueprint:
    """Named or anonymous template for controller instances.

    ``defaults`` is a read-only snapshot of the mapping given at registration
    time. Values are kept by reference, so functions and mutable objects are
    shared between all instances built from the blueprint.
    """

    name: Optional[str] = None
    defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def anonymous(self) -> bool:
        return self.name is None


def normalize_blueprint_args(name: Any = None, defaults: Any = None) -> Blueprint:
    """Normalize ``make`` arguments into a :class:`Blueprint`.

    Accepted shapes:
      - ``(name: str, defaults: Mapping)``: named blueprint.
      - ``(defaults: Mapping)``: anonymous blueprint; a second argument is ignored.
      - ``()`` or any other first argument: anonymous blueprint, empty defaults.

    An empty name is anonymous and a non-mapping ``defaults`` next to a
    string name becomes an empty mapping. Nothing here raises.
    """
    if isinstance(name, Mapping):
        return Blueprint(name=None, defaults=_snapshot(name))
    if not isinstance(name, str):
        return Blueprint()
    normalized = name if name else None
    if isinstance(defaults, Mapping):
        return Blueprint(name=normalized, defaults=_snapshot(defaults))
    return Blueprint(name=normalized)


def _snapshot(values: Mapping[Any, Any]) -> Mapping[str, Any]:
    return MappingProxyType({str(key): value for key, value in values.items()})


__all__ = ["Blueprint", "EVENTS_ATTR", "INIT_ATTR", "normalize_blueprint_args"]
