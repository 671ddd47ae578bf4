"""Diamond-square subdivision over a non-wrapping rectangular grid.

The grid has ``base * 2**n + 1`` points per side so both edges land on lattice
points. Neighbors that fall outside the grid are dropped from the square-step
average instead of wrapping around, which yields landscape edges rather than a
tileable torus. Every derived cell is the neighbor average multiplied by a
jitter factor drawn from ``[1 / roughness, roughness)``.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Optional

import numpy as np

from .bounds import RangeTracker, ValueRange
from .config import GenerationConfig
from .errors import ConfigError
from .grid import TerrainGrid
from .rng import UniformSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassReport:
    """Progress record handed to ``on_pass`` after each subdivision pass."""

    iteration: int
    step: int
    cells_written: int
    value_range: ValueRange


PassHook = Callable[[PassReport], None]


def jitter(values: np.ndarray, roughness: float, sampler: UniformSampler) -> np.ndarray:
    """Scale ``values`` by per-cell factors drawn from ``[1 / roughness, roughness)``."""

    if roughness == 1.0:
        return values
    return values * sampler.sample_array(1.0 / roughness, roughness, values.shape)


class DiamondSquare:
    """Two-dimensional diamond-square terrain generator."""

    def __init__(self, config: GenerationConfig, *, on_pass: Optional[PassHook] = None) -> None:
        self.config = config
        self.on_pass = on_pass

    def generate(self) -> TerrainGrid:
        grid, value_range = self.generate_array()
        return TerrainGrid(grid, value_range)

    def generate_array(self) -> tuple[np.ndarray, ValueRange]:
        """Run the full subdivision and return the raw grid with its observed range."""

        cfg = self.config
        sampler = UniformSampler(cfg.seed)
        lattice = sampler.uniform_area(cfg.base_width + 1, cfg.base_height + 1, cfg.value_interval)
        return self._subdivide(lattice, sampler)

    def enlarge(self, lattice: np.ndarray, sampler: Optional[UniformSampler] = None) -> TerrainGrid:
        """Refine a caller-supplied coarse matrix instead of a sampled one.

        ``lattice`` must have shape ``(base_height + 1, base_width + 1)``; its
        values end up unchanged at every multiple of the initial step.
        """

        cfg = self.config
        coarse = np.asarray(lattice, dtype=np.float64)
        expected = (cfg.base_height + 1, cfg.base_width + 1)
        if coarse.shape != expected:
            raise ConfigError(f"lattice must have shape {expected}, got {coarse.shape}")
        if not np.isfinite(coarse).all():
            raise ConfigError("lattice values must be finite")
        if sampler is None:
            sampler = UniformSampler(cfg.seed)
        grid, value_range = self._subdivide(coarse, sampler)
        return TerrainGrid(grid, value_range)

    def _subdivide(self, lattice: np.ndarray, sampler: UniformSampler) -> tuple[np.ndarray, ValueRange]:
        cfg = self.config
        step = cfg.initial_step
        roughness = cfg.roughness
        grid = np.zeros((cfg.final_height, cfg.final_width), dtype=np.float64)
        tracker = RangeTracker()

        grid[::step, ::step] = lattice
        tracker.observe(lattice)

        for iteration in range(cfg.iteration_count):
            half = step // 2

            # Diamond step: centers of step x step squares from their corners.
            corners = grid[::step, ::step]
            centers = corners[:-1, :-1] + corners[:-1, 1:]
            centers += corners[1:, :-1]
            centers += corners[1:, 1:]
            centers = jitter(centers / 4.0, roughness, sampler)
            grid[half::step, half::step] = centers
            tracker.observe(centers)

            # Square step: vertical edge midpoints, then horizontal ones.
            columns = self._square_vertical(grid, step, half)
            columns = jitter(columns, roughness, sampler)
            grid[half::step, ::step] = columns
            tracker.observe(columns)

            rows = self._square_horizontal(grid, step, half)
            rows = jitter(rows, roughness, sampler)
            grid[::step, half::step] = rows
            tracker.observe(rows)

            written = centers.size + columns.size + rows.size
            value_range = tracker.current()
            logger.debug(
                "diamond-square pass %d/%d: step=%d cells=%d range=[%g, %g]",
                iteration + 1,
                cfg.iteration_count,
                step,
                written,
                value_range.start,
                value_range.end,
            )
            if self.on_pass is not None:
                self.on_pass(PassReport(iteration + 1, step, written, value_range))
            step = half

        value_range = tracker.current()
        logger.debug(
            "generated %dx%d diamond-square grid, range=[%g, %g]",
            cfg.final_width,
            cfg.final_height,
            value_range.start,
            value_range.end,
        )
        return grid, value_range

    @staticmethod
    def _square_vertical(grid: np.ndarray, step: int, half: int) -> np.ndarray:
        """Average around midpoints of vertical lattice edges (rows ``half::step``, columns ``::step``)."""

        lattice = grid[::step, ::step]
        centers = grid[half::step, half::step]
        up = lattice[:-1, :]
        down = lattice[1:, :]

        total = up + down
        total[:, 1:] += centers
        total[:, :-1] += centers
        counts = np.full(total.shape[1], 4.0)
        counts[0] -= 1.0
        counts[-1] -= 1.0
        return total / counts[None, :]

    @staticmethod
    def _square_horizontal(grid: np.ndarray, step: int, half: int) -> np.ndarray:
        """Average around midpoints of horizontal lattice edges (rows ``::step``, columns ``half::step``)."""

        lattice = grid[::step, ::step]
        centers = grid[half::step, half::step]
        left = lattice[:, :-1]
        right = lattice[:, 1:]

        total = left + right
        total[1:, :] += centers
        total[:-1, :] += centers
        counts = np.full(total.shape[0], 4.0)
        counts[0] -= 1.0
        counts[-1] -= 1.0
        return total / counts[:, None]
