"""One-dimensional midpoint displacement."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .bounds import RangeTracker, ValueRange
from .config import LineConfig
from .diamond_square import PassHook, PassReport, jitter
from .errors import ConfigError
from .grid import TerrainGrid
from .rng import UniformSampler

logger = logging.getLogger(__name__)


class MidpointDisplacement:
    """Generates a single row of ``base_length * 2**n + 1`` heights.

    Each pass sets every midpoint between two computed points to their average
    scaled by a jitter factor from ``[1 / roughness, roughness)``.
    """

    def __init__(self, config: LineConfig, *, on_pass: Optional[PassHook] = None) -> None:
        self.config = config
        self.on_pass = on_pass

    def generate(self) -> TerrainGrid:
        line, value_range = self.generate_array()
        return TerrainGrid(line, value_range)

    def generate_array(self) -> tuple[np.ndarray, ValueRange]:
        cfg = self.config
        sampler = UniformSampler(cfg.seed)
        lo, hi = cfg.value_interval
        points = sampler.sample_array(lo, hi, cfg.base_length + 1)
        return self._subdivide(points, sampler)

    def enlarge(self, points: np.ndarray, sampler: Optional[UniformSampler] = None) -> TerrainGrid:
        """Refine a caller-supplied coarse row of ``base_length + 1`` values."""

        cfg = self.config
        coarse = np.asarray(points, dtype=np.float64)
        if coarse.shape != (cfg.base_length + 1,):
            raise ConfigError(f"points must have shape ({cfg.base_length + 1},), got {coarse.shape}")
        if not np.isfinite(coarse).all():
            raise ConfigError("points must be finite")
        if sampler is None:
            sampler = UniformSampler(cfg.seed)
        line, value_range = self._subdivide(coarse, sampler)
        return TerrainGrid(line, value_range)

    def _subdivide(self, points: np.ndarray, sampler: UniformSampler) -> tuple[np.ndarray, ValueRange]:
        cfg = self.config
        step = cfg.initial_step
        line = np.zeros(cfg.final_length, dtype=np.float64)
        tracker = RangeTracker()

        line[::step] = points
        tracker.observe(points)

        for iteration in range(cfg.iteration_count):
            half = step // 2
            known = line[::step]
            mids = jitter((known[:-1] + known[1:]) / 2.0, cfg.roughness, sampler)
            line[half::step] = mids
            tracker.observe(mids)

            value_range = tracker.current()
            logger.debug(
                "midpoint pass %d/%d: step=%d cells=%d range=[%g, %g]",
                iteration + 1,
                cfg.iteration_count,
                step,
                mids.size,
                value_range.start,
                value_range.end,
            )
            if self.on_pass is not None:
                self.on_pass(PassReport(iteration + 1, step, mids.size, value_range))
            step = half

        return line, tracker.current()
