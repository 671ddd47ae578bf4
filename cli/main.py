"""CLI entry point for fractal terrain generation."""

from __future__ import annotations

import argparse
import logging
import time

from fractal_terrain.config import (
    DEFAULT_BASE_HEIGHT,
    DEFAULT_BASE_WIDTH,
    DEFAULT_ITERATION_COUNT,
    DEFAULT_ROUGHNESS,
    DEFAULT_SEED,
    DEFAULT_VALUE_INTERVAL,
    GenerationConfig,
    LineConfig,
)
from fractal_terrain.diamond_square import DiamondSquare
from fractal_terrain.errors import ConfigError
from fractal_terrain.grid import TerrainGrid
from fractal_terrain.io import prepare_output_path, write_png_u8
from fractal_terrain.midpoint import MidpointDisplacement

MODES = ("diamond-square", "midpoint")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic fractal heightfield generator")
    parser.add_argument("--mode", choices=MODES, default="diamond-square", help="Subdivision algorithm")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Unsigned 64-bit seed")
    parser.add_argument("--out", default="terrain.png", help="Output PNG path")
    parser.add_argument("--w", type=int, default=DEFAULT_BASE_WIDTH, help="Base lattice width (cells)")
    parser.add_argument(
        "--h",
        type=int,
        default=DEFAULT_BASE_HEIGHT,
        help="Base lattice height (cells); ignored by midpoint mode",
    )
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATION_COUNT, help="Subdivision passes")
    parser.add_argument("--roughness", type=float, default=DEFAULT_ROUGHNESS, help="Jitter bound, >= 1.0")
    parser.add_argument("--lo", type=float, default=DEFAULT_VALUE_INTERVAL[0], help="Seed interval lower bound")
    parser.add_argument("--hi", type=float, default=DEFAULT_VALUE_INTERVAL[1], help="Seed interval upper bound")
    parser.add_argument("--overwrite", action="store_true", help="Overwrite an existing output file")
    parser.add_argument("--verbose", action="store_true", help="Log each subdivision pass")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        generator = _build_generator(args)
    except ConfigError as exc:
        parser.error(str(exc))

    out_path = prepare_output_path(args.out, overwrite=args.overwrite)

    generation_start = time.perf_counter()
    terrain = generator.generate()
    generation_seconds = time.perf_counter() - generation_start

    write_png_u8(out_path, terrain.as_gray())

    print(f"Generated terrain: {out_path}")
    _print_summary(terrain, generation_seconds)
    return 0


def _build_generator(args: argparse.Namespace) -> DiamondSquare | MidpointDisplacement:
    interval = (args.lo, args.hi)
    if args.mode == "midpoint":
        line_config = LineConfig(
            base_length=args.w,
            iteration_count=args.iterations,
            roughness=args.roughness,
            value_interval=interval,
            seed=args.seed,
        )
        return MidpointDisplacement(line_config)
    config = GenerationConfig(
        base_width=args.w,
        base_height=args.h,
        iteration_count=args.iterations,
        roughness=args.roughness,
        value_interval=interval,
        seed=args.seed,
    )
    return DiamondSquare(config)


def _print_summary(terrain: TerrainGrid, generation_seconds: float) -> None:
    value_range = terrain.range
    print(f"Size: {terrain.width}x{terrain.height}")
    print(f"Range: [{value_range.start:.6f}, {value_range.end:.6f}]")
    print(f"Generation time: {generation_seconds:.3f} s")


if __name__ == "__main__":
    raise SystemExit(main())
