"""Terrain container wrapping a finished heightfield and its value range."""

from __future__ import annotations

import operator
from typing import Callable

import numpy as np

from .bounds import RangeTracker, ValueRange
from .derive import gray_preview_u8, normalize_to_range
from .errors import InvalidRangeError, OutOfBoundsError


class TerrainGrid:
    """Generated heightfield plus the range used to normalize it.

    Cells are stored row-major with shape ``(height, width)`` and addressed as
    ``(x, y)``. One-dimensional terrain is a grid of height 1.
    """

    def __init__(self, values: np.ndarray, value_range: ValueRange) -> None:
        grid = np.array(values, dtype=np.float64)
        if grid.ndim == 1:
            grid = grid[None, :]
        if grid.ndim != 2 or grid.size == 0:
            raise ValueError("values must be a non-empty 1D or 2D array")
        if value_range.start > value_range.end:
            raise InvalidRangeError(
                f"range start {value_range.start} is higher than range end {value_range.end}"
            )
        self._grid = grid
        self._range = value_range

    @classmethod
    def from_array(cls, values: np.ndarray) -> "TerrainGrid":
        """Wrap ``values`` using their true minimum and maximum as the range."""

        tracker = RangeTracker()
        tracker.observe(values)
        return cls(values, tracker.current())

    @property
    def width(self) -> int:
        return int(self._grid.shape[1])

    @property
    def height(self) -> int:
        return int(self._grid.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def range(self) -> ValueRange:
        return self._range

    def get(self, x: int, y: int = 0) -> float:
        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError:
            raise OutOfBoundsError(x, y, self.width, self.height) from None
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return float(self._grid[y, x])

    def __getitem__(self, index: tuple[int, int]) -> float:
        x, y = index
        return self.get(x, y)

    def normalize(self, value: float) -> float:
        """Map ``value`` linearly so the range start is 0 and the range end is 1."""

        span = self._range.end - self._range.start
        if span == 0:
            return float("nan")
        return (value - self._range.start) / span

    def normalized(self) -> np.ndarray:
        return normalize_to_range(self._grid, self._range.start, self._range.end)

    def set_min(self, value: float) -> None:
        if not value < self._range.end:
            raise InvalidRangeError(
                f"new minimum height {value} is not lower than the current maximum height {self._range.end}"
            )
        self._range = ValueRange(float(value), self._range.end)

    def set_max(self, value: float) -> None:
        if not value > self._range.start:
            raise InvalidRangeError(
                f"new maximum height {value} is not higher than the current minimum height {self._range.start}"
            )
        self._range = ValueRange(self._range.start, float(value))

    def map_height(self, func: Callable[[float], float]) -> None:
        """Apply ``func`` to every cell in place.

        The range is left untouched; call :meth:`recompute_range` when the
        mapped values should become the new normalization domain.
        """

        self._grid[...] = np.vectorize(func, otypes=[np.float64])(self._grid)

    def recompute_range(self) -> ValueRange:
        tracker = RangeTracker()
        tracker.observe(self._grid)
        self._range = tracker.current()
        return self._range

    def as_array(self) -> np.ndarray:
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def as_gray(self) -> np.ndarray:
        """Encode normalized heights as an 8-bit grayscale raster."""

        return gray_preview_u8(self._grid, self._range.start, self._range.end)

    def __repr__(self) -> str:
        return f"TerrainGrid(width={self.width}, height={self.height}, range={self._range})"
