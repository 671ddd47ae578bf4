from __future__ import annotations

from PIL import Image
import numpy as np
import pytest

from fractal_terrain.config import GenerationConfig
from fractal_terrain.diamond_square import DiamondSquare
from fractal_terrain.io import prepare_output_path, write_png_u8


def test_png_round_trips_gray_raster(tmp_path) -> None:
    terrain = DiamondSquare(GenerationConfig(iteration_count=3, seed=42)).generate()
    gray = terrain.as_gray()

    out_path = tmp_path / "gray.png"
    write_png_u8(out_path, gray)

    with Image.open(out_path) as image:
        assert image.mode == "L"
        assert image.size == (terrain.width, terrain.height)
        assert np.array_equal(np.asarray(image), gray)


def test_prepare_output_path_creates_parents(tmp_path) -> None:
    target = prepare_output_path(tmp_path / "a" / "b" / "out.png", overwrite=False)

    assert target.parent.is_dir()


def test_prepare_output_path_refuses_existing_file(tmp_path) -> None:
    existing = tmp_path / "out.png"
    existing.write_bytes(b"")

    with pytest.raises(FileExistsError):
        prepare_output_path(existing, overwrite=False)
    assert prepare_output_path(existing, overwrite=True) == existing
