from __future__ import annotations

import numpy as np
import pytest

from fractal_terrain.bounds import RangeTracker, ValueRange
from fractal_terrain.errors import InvalidRangeError


def test_tracker_extends_monotonically() -> None:
    tracker = RangeTracker()
    tracker.observe(0.5)
    tracker.observe(np.array([[0.1, 0.7], [0.3, 0.2]]))
    tracker.observe(0.4)

    assert tracker.current() == ValueRange(0.1, 0.7)


def test_empty_tracker_has_no_range() -> None:
    tracker = RangeTracker()
    tracker.observe(np.array([]))

    assert tracker.is_empty
    with pytest.raises(InvalidRangeError):
        tracker.current()


def test_value_range_contains() -> None:
    value_range = ValueRange(-1.0, 2.0)

    assert value_range.span == 3.0
    assert value_range.contains(-1.0)
    assert value_range.contains(2.0)
    assert not value_range.contains(2.5)


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_non_finite_values_are_rejected(bad: float) -> None:
    tracker = RangeTracker()
    tracker.observe(0.5)

    with pytest.raises(InvalidRangeError, match="non-finite"):
        tracker.observe(np.array([0.0, bad, 1.0]))
    assert tracker.current() == ValueRange(0.5, 0.5)
