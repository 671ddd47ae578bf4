"""Derived raster products from heightfields."""

from __future__ import annotations

import numpy as np


def normalize_to_range(values: np.ndarray, start: float, end: float) -> np.ndarray:
    """Remap ``values`` so ``start`` maps to 0 and ``end`` maps to 1; NaN when ``start == end``."""

    span = end - start
    if span == 0:
        return np.full(np.shape(values), np.nan)
    return (np.asarray(values, dtype=np.float64) - start) / span


def gray_preview_u8(values: np.ndarray, start: float, end: float) -> np.ndarray:
    """Map float heights to 8-bit grayscale over the ``[start, end]`` domain.

    Values outside the domain saturate at 0 or 255, and a degenerate domain
    renders black.
    """

    norm = np.nan_to_num(normalize_to_range(values, start, end), nan=0.0)
    return np.clip(norm * 255.0, 0.0, 255.0).astype(np.uint8)
