"""Fractal heightfield generation by midpoint subdivision."""

from .bounds import RangeTracker, ValueRange
from .config import GenerationConfig, LineConfig
from .diamond_square import DiamondSquare, PassReport
from .errors import ConfigError, InvalidRangeError, OutOfBoundsError, TerrainError
from .grid import TerrainGrid
from .midpoint import MidpointDisplacement
from .rng import UniformSampler

__all__ = [
    "ConfigError",
    "DiamondSquare",
    "GenerationConfig",
    "InvalidRangeError",
    "LineConfig",
    "MidpointDisplacement",
    "OutOfBoundsError",
    "PassReport",
    "RangeTracker",
    "TerrainError",
    "TerrainGrid",
    "UniformSampler",
    "ValueRange",
]
