"""Registry of named blueprint constructors.

The factory stores every named constructor here. Registration is
last-write-wins; lookups of unknown names return ``None`` instead of raising
so callers can treat "unknown blueprint" as an ordinary outcome.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple


class BlueprintRegistry:
    """String-to-constructor registry owned by a controller factory."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self._constructors: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, constructor: Callable[..., Any]) -> None:
        """Store ``constructor`` under ``name``, replacing any earlier entry."""
        if name in self._constructors:
            self._log.debug("Replacing blueprint %r", name)
        else:
            self._log.debug("Registering blueprint %r", name)
        self._constructors[name] = constructor

    def get(self, name: Any) -> Optional[Callable[..., Any]]:
        """Return the constructor for ``name`` if one is registered and callable."""
        if not isinstance(name, str):
            return None
        candidate = self._constructors.get(name)
        if not callable(candidate):
            return None
        return candidate

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._constructors.keys()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)


__all__ = ["BlueprintRegistry"]
