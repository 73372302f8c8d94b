"""Command-line entry point rendering the standard scene to a BMP file."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time

from raytracer.bmp import BMPError, write_bmp
from raytracer.render import ParallelStrategy, default_camera, render
from raytracer.scene import Scene
from raytracer.scene_loader import SceneFormatError, load_scene, random_scene

DEFAULT_OUTPUT = "imgMPI_hibrido.bmp"
STANDALONE_OUTPUT = "imgCPU_f0.bmp"


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raytracer", description="Render a scene of spheres to a BMP image.")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["render"],
        help="also render a standalone image to " + STANDALONE_OUTPUT,
    )
    parser.add_argument("--width", type=_positive, default=256)
    parser.add_argument("--height", type=_positive, default=256)
    parser.add_argument("--samples", type=_positive, default=10, help="samples per pixel")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ParallelStrategy],
        default=ParallelStrategy.ROWS.value,
    )
    parser.add_argument("--workers", type=_positive, default=os.cpu_count() or 1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--scene", help="scene description file; a random scene by default")
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    return parser


def _make_scene(scene_path: str | None, seed: int) -> Scene:
    if scene_path is not None:
        return load_scene(scene_path)
    return random_scene(random.Random(seed))


def _render_to(path: str, args: argparse.Namespace, strategy: ParallelStrategy, seed: int) -> None:
    scene = _make_scene(args.scene, seed)
    camera = default_camera(args.width, args.height)
    print(f"Worker processes: {args.workers}")
    start = time.perf_counter()
    data = render(args.width, args.height, args.samples, camera, scene, strategy, args.workers, seed)
    print(f"Rendering time: {time.perf_counter() - start:.3f} seconds.")
    write_bmp(path, data, args.width, args.height)
    print(f"Image written: {path}")


def main(argv: list[str] | None = None) -> int:
    """Run the renderer; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    strategy = ParallelStrategy(args.strategy)
    seed = args.seed if args.seed is not None else random.randrange(2**63)

    try:
        if args.mode == "render":
            print(strategy.description)
            _render_to(STANDALONE_OUTPUT, args, strategy, seed)
        print(strategy.description)
        _render_to(args.output, args, strategy, seed)
    except BMPError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (OSError, SceneFormatError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())