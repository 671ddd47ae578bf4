"""Deterministic uniform sampling streams."""

from __future__ import annotations

from typing import Iterator

import numpy as np

UINT64_MAX = (1 << 64) - 1


class UniformSampler:
    """Seeded source of uniform draws over caller-supplied ``[lo, hi)`` intervals.

    All draws come from one PCG64 stream, so the same seed always yields the
    same sequence regardless of how draws are grouped into arrays.
    """

    def __init__(self, seed: int) -> None:
        self.seed = int(seed) & UINT64_MAX
        self._generator = np.random.Generator(np.random.PCG64(np.uint64(self.seed)))

    def sample(self, lo: float, hi: float) -> float:
        return float(self._generator.uniform(lo, hi))

    def sample_array(self, lo: float, hi: float, shape: int | tuple[int, ...]) -> np.ndarray:
        """Draw a float64 array of ``shape`` in row-major order."""

        return self._generator.uniform(lo, hi, size=shape)

    def stream(self, lo: float, hi: float) -> Iterator[float]:
        while True:
            yield self.sample(lo, hi)

    def uniform_area(self, width: int, height: int, interval: tuple[float, float]) -> np.ndarray:
        """Return a ``(height, width)`` block of draws over ``interval``."""

        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        lo, hi = interval
        return self.sample_array(lo, hi, (height, width))
