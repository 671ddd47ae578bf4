"""Observed value ranges of generated heightfields."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidRangeError


@dataclass(frozen=True)
class ValueRange:
    """Normalization domain ``[start, end]`` of a heightfield."""

    start: float
    end: float

    @property
    def span(self) -> float:
        return self.end - self.start

    def contains(self, value: float) -> bool:
        return self.start <= value <= self.end


class RangeTracker:
    """Accumulates the minimum and maximum of every value written to a grid."""

    def __init__(self) -> None:
        self._min = np.inf
        self._max = -np.inf

    @property
    def is_empty(self) -> bool:
        return self._min > self._max

    def observe(self, values: float | np.ndarray) -> None:
        """Extend the tracked range to include a scalar or every array element.

        NaN and infinite values are rejected and leave the range unchanged.
        """

        arr = np.asarray(values, dtype=np.float64)
        if arr.size == 0:
            return
        if not np.isfinite(arr).all():
            raise InvalidRangeError("cannot track a range over non-finite values")
        self._min = min(self._min, float(arr.min()))
        self._max = max(self._max, float(arr.max()))

    def current(self) -> ValueRange:
        if self.is_empty:
            raise InvalidRangeError("no values have been observed yet")
        return ValueRange(self._min, self._max)
