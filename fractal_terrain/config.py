"""Configuration models for fractal terrain generation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
import math
from numbers import Integral, Real
from typing import Any

from .errors import ConfigError
from .rng import UINT64_MAX

DEFAULT_BASE_WIDTH = 4
DEFAULT_BASE_HEIGHT = 4
DEFAULT_ITERATION_COUNT = 2
DEFAULT_ROUGHNESS = 1.1
DEFAULT_VALUE_INTERVAL = (-1.0, 1.0)
DEFAULT_SEED = 0

# Exclusive; every iteration doubles each side of the grid.
MAX_ITERATION_COUNT = 30


def _check_int(name: str, value: Any, *, minimum: int, maximum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ConfigError(f"{name} must be <= {maximum}, got {value}")
    return value


def _check_roughness(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise ConfigError(f"roughness must be a finite number, got {value!r}")
    if value < 1.0:
        raise ConfigError(f"roughness must be >= 1.0, got {value}")
    return float(value)


def _check_interval(value: Any) -> tuple[float, float]:
    try:
        lo, hi = value
    except (TypeError, ValueError):
        raise ConfigError(f"value_interval must be a (lo, hi) pair, got {value!r}") from None
    for bound in (lo, hi):
        if isinstance(bound, bool) or not isinstance(bound, Real) or not math.isfinite(bound):
            raise ConfigError(f"value_interval bounds must be finite numbers, got {value!r}")
    if lo >= hi:
        raise ConfigError(f"value_interval must satisfy lo < hi, got ({lo}, {hi})")
    return float(lo), float(hi)


@dataclass(frozen=True)
class GenerationConfig:
    """Diamond-square generation parameters, validated on construction."""

    base_width: int = DEFAULT_BASE_WIDTH
    base_height: int = DEFAULT_BASE_HEIGHT
    iteration_count: int = DEFAULT_ITERATION_COUNT
    roughness: float = DEFAULT_ROUGHNESS
    value_interval: tuple[float, float] = DEFAULT_VALUE_INTERVAL
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_width", _check_int("base_width", self.base_width, minimum=1))
        object.__setattr__(self, "base_height", _check_int("base_height", self.base_height, minimum=1))
        object.__setattr__(
            self,
            "iteration_count",
            _check_int("iteration_count", self.iteration_count, minimum=0, maximum=MAX_ITERATION_COUNT - 1),
        )
        object.__setattr__(self, "roughness", _check_roughness(self.roughness))
        object.__setattr__(self, "value_interval", _check_interval(self.value_interval))
        object.__setattr__(self, "seed", _check_int("seed", self.seed, minimum=0, maximum=UINT64_MAX))

    @property
    def initial_step(self) -> int:
        return 2**self.iteration_count

    @property
    def final_width(self) -> int:
        return self.base_width * self.initial_step + 1

    @property
    def final_height(self) -> int:
        return self.base_height * self.initial_step + 1

    def with_overrides(self, **changes: Any) -> "GenerationConfig":
        """Return a re-validated copy with ``changes`` applied."""

        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LineConfig:
    """Midpoint-displacement parameters for a single row of values."""

    base_length: int = DEFAULT_BASE_WIDTH
    iteration_count: int = DEFAULT_ITERATION_COUNT
    roughness: float = DEFAULT_ROUGHNESS
    value_interval: tuple[float, float] = DEFAULT_VALUE_INTERVAL
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_length", _check_int("base_length", self.base_length, minimum=1))
        object.__setattr__(
            self,
            "iteration_count",
            _check_int("iteration_count", self.iteration_count, minimum=0, maximum=MAX_ITERATION_COUNT - 1),
        )
        object.__setattr__(self, "roughness", _check_roughness(self.roughness))
        object.__setattr__(self, "value_interval", _check_interval(self.value_interval))
        object.__setattr__(self, "seed", _check_int("seed", self.seed, minimum=0, maximum=UINT64_MAX))

    @property
    def initial_step(self) -> int:
        return 2**self.iteration_count

    @property
    def final_length(self) -> int:
        return self.base_length * self.initial_step + 1

    def with_overrides(self, **changes: Any) -> "LineConfig":
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
