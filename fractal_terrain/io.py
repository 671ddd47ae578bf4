"""Image export for generated terrain."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image


def prepare_output_path(path: str | Path, *, overwrite: bool) -> Path:
    """Create the parent directory of ``path`` and refuse to clobber files."""

    target = Path(path)
    if target.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {target}. Use --overwrite to replace it.")
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def write_png_u8(path: str | Path, raster_u8: np.ndarray) -> None:
    image = Image.fromarray(np.ascontiguousarray(raster_u8, dtype=np.uint8))
    image.save(Path(path))
