"""Record of constructed controller instances.

``strong`` keeps instances alive (optionally bounded, oldest dropped first),
``weak`` keeps weak references only and ``off`` records nothing.
"""

from __future__ import annotations

import weakref
from collections import deque
from typing import Any, Deque, List, Optional, Union

TRACK_STRONG = "strong"
TRACK_WEAK = "weak"
TRACK_OFF = "off"
TRACK_MODES = (TRACK_STRONG, TRACK_WEAK, TRACK_OFF)


class InstanceTracker:
    def __init__(self, mode: str = TRACK_WEAK, limit: Optional[int] = None) -> None:
        if mode not in TRACK_MODES:
            raise ValueError(f"Unsupported tracking mode: {mode!r}")
        if limit is not None and limit <= 0:
            raise ValueError("Tracking limit must be positive.")
        self.mode = mode
        self.limit = limit
        self._entries: Deque[Union[Any, "weakref.ReferenceType[Any]"]] = deque(maxlen=limit)

    def record(self, instance: Any) -> None:
        if self.mode == TRACK_OFF:
            return
        if self.mode == TRACK_WEAK:
            self._prune()
            self._entries.append(weakref.ref(instance))
        else:
            self._entries.append(instance)

    def instances(self) -> List[Any]:
        """Return live tracked instances, oldest first."""
        if self.mode != TRACK_WEAK:
            return list(self._entries)
        self._prune()
        alive = (ref() for ref in self._entries)
        return [instance for instance in alive if instance is not None]

    def _prune(self) -> None:
        if any(ref() is None for ref in self._entries):
            live = [ref for ref in self._entries if ref() is not None]
            self._entries = deque(live, maxlen=self.limit)

    def __len__(self) -> int:
        return len(self.instances())

    def __repr__(self) -> str:
        return f"InstanceTracker(mode={self.mode!r}, limit={self.limit!r}, size={len(self)})"


__all__ = ["InstanceTracker", "TRACK_MODES", "TRACK_OFF", "TRACK_STRONG", "TRACK_WEAK"]
