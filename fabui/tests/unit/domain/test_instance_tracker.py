from __future__ import annotations

import gc

import pytest

from fabui.domain.tracking import InstanceTracker


class _Item:
    pass


def test_strong_tracking_keeps_order() -> None:
    tracker = InstanceTracker(mode="strong")
    first, second = _Item(), _Item()
    tracker.record(first)
    tracker.record(second)
    assert tracker.instances() == [first, second]
    assert len(tracker) == 2


def test_strong_tracking_limit_drops_oldest() -> None:
    tracker = InstanceTracker(mode="strong", limit=2)
    items = [_Item() for _ in range(3)]
    for item in items:
        tracker.record(item)
    assert tracker.instances() == items[1:]


def test_weak_tracking_forgets_collected_instances() -> None:
    tracker = InstanceTracker(mode="weak")
    kept = _Item()
    tracker.record(kept)
    tracker.record(_Item())
    gc.collect()
    assert tracker.instances() == [kept]


def test_off_records_nothing() -> None:
    tracker = InstanceTracker(mode="off")
    item = _Item()
    tracker.record(item)
    assert tracker.instances() == []


@pytest.mark.parametrize("mode,limit", [("sometimes", None), ("strong", 0), ("weak", -1)])
def test_invalid_settings_raise(mode, limit) -> None:
    with pytest.raises(ValueError):
        InstanceTracker(mode=mode, limit=limit)
