"""Error types raised by terrain configuration, generation and access."""

from __future__ import annotations


class TerrainError(Exception):
    """Base class for all terrain errors."""


class ConfigError(TerrainError, ValueError):
    """Raised when a generation config holds an invalid value."""


class InvalidRangeError(TerrainError, ValueError):
    """Raised when a value range would stop satisfying ``start < end``."""


class OutOfBoundsError(TerrainError, IndexError):
    """Raised on indexed access outside the grid dimensions."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"({x}, {y}) is out of bounds for a {width}x{height} grid")
