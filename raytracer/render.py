"""Rendering images pixel by pixel, optionally spread over worker processes."""

from __future__ import annotations

import enum
import math
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterator, Union

from raytracer.camera import Camera
from raytracer.sampling import random_float
from raytracer.scene import Scene
from raytracer.vec3 import Vec3

Seed = Union[int, str, None]

BLOCKS_X = 4
BLOCKS_Y = 4


class ParallelStrategy(enum.Enum):
    """How the image is cut into independent pieces of work."""

    ROWS = "rows"
    COLUMNS = "columns"
    BLOCKS = "blocks"

    @property
    def description(self) -> str:
        return {
            ParallelStrategy.ROWS: "parallel by rows",
            ParallelStrategy.COLUMNS: "parallel by columns",
            ParallelStrategy.BLOCKS: "parallel by rectangular blocks",
        }[self]


@dataclass(frozen=True)
class RenderRegion:
    """Pixels with ``x0 <= x < x1`` and ``y0 <= y < y1``."""

    x0: int
    y0: int
    x1: int
    y1: int

    def __post_init__(self) -> None:
        if not (0 <= self.x0 <= self.x1 and 0 <= self.y0 <= self.y1):
            raise ValueError(f"invalid region {self}")

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    def pixels(self) -> Iterator[tuple[int, int]]:
        """Pixel coordinates, row by row from the bottom."""
        for y in range(self.y0, self.y1):
            for x in range(self.x0, self.x1):
                yield x, y


def default_camera(width: int, height: int) -> Camera:
    """The camera used for the standard scene."""
    return Camera(
        Vec3(13, 2, 3),
        Vec3(0, 0, 0),
        Vec3(0, 1, 0),
        20,
        width / height,
        0.1,
        10.0,
    )


def row_partition(height: int, parts: int) -> list[tuple[int, int]]:
    """Split ``height`` rows into ``parts`` contiguous ``(start, end)`` ranges.

    The first ``height % parts`` ranges get one extra row.
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")
    per_part, remainder = divmod(height, parts)
    ranges = []
    start = 0
    for index in range(parts):
        end = start + per_part + (1 if index < remainder else 0)
        ranges.append((start, end))
        start = end
    return ranges


def block_regions(width: int, height: int, blocks_x: int, blocks_y: int) -> list[RenderRegion]:
    """Cut the image into a grid; the last column and row of blocks take the remainder."""
    if blocks_x < 1 or blocks_y < 1:
        raise ValueError("block counts must be at least 1")
    block_width = width // blocks_x
    block_height = height // blocks_y
    regions = []
    for block_y in range(blocks_y):
        y0 = block_y * block_height
        y1 = height if block_y == blocks_y - 1 else y0 + block_height
        for block_x in range(blocks_x):
            x0 = block_x * block_width
            x1 = width if block_x == blocks_x - 1 else x0 + block_width
            regions.append(RenderRegion(x0, y0, x1, y1))
    return regions


def _to_byte(component: float) -> int:
    return max(0, min(255, int(255.99 * math.sqrt(max(component, 0.0)))))


def render_pixel(
    x: int,
    y: int,
    width: int,
    height: int,
    samples: int,
    camera: Camera,
    scene: Scene,
    rng: random.Random,
) -> bytes:
    """Gamma-corrected colour of one pixel as three bytes in BGR order."""
    if samples < 1:
        raise ValueError("samples must be at least 1")
    col = Vec3()
    for _ in range(samples):
        u = (x + random_float(rng)) / width
        v = (y + random_float(rng)) / height
        col = col + scene.color(camera.get_ray(u, v, rng), rng)
    col = col / samples
    return bytes(_to_byte(c) for c in (col.b, col.g, col.r))


def render_region(
    width: int,
    height: int,
    samples: int,
    region: RenderRegion,
    camera: Camera,
    scene: Scene,
    seed: Seed,
) -> bytes:
    """BGR bytes of ``region``, row by row, rendered with a generator seeded by ``seed``."""
    if region.x1 > width or region.y1 > height:
        raise ValueError(f"region {region} lies outside a {width}x{height} image")
    rng = random.Random(seed)
    out = bytearray()
    for x, y in region.pixels():
        out += render_pixel(x, y, width, height, samples, camera, scene, rng)
    return bytes(out)


def _regions_for(strategy: ParallelStrategy, width: int, height: int) -> list[RenderRegion]:
    if strategy is ParallelStrategy.ROWS:
        return [RenderRegion(0, y, width, y + 1) for y in range(height)]
    if strategy is ParallelStrategy.COLUMNS:
        return [RenderRegion(x, 0, x + 1, height) for x in range(width)]
    return block_regions(width, height, BLOCKS_X, BLOCKS_Y)


def _render_task(task: tuple) -> bytes:
    return render_region(*task)


def render(
    width: int,
    height: int,
    samples: int,
    camera: Camera,
    scene: Scene,
    strategy: ParallelStrategy = ParallelStrategy.ROWS,
    workers: int = 1,
    seed: int | None = None,
) -> bytes:
    """Render the whole image as BGR bytes, bottom row first.

    Work is cut according to ``strategy``; each piece gets its own generator
    derived from ``seed``, so the result does not depend on ``workers``.
    """
    if width < 1 or height < 1:
        raise ValueError("image dimensions must be positive")
    if samples < 1:
        raise ValueError("samples must be at least 1")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    strategy = ParallelStrategy(strategy)
    base = seed if seed is not None else random.randrange(2**63)

    regions = _regions_for(strategy, width, height)
    tasks = [
        (width, height, samples, region, camera, scene, f"{base}:{index}")
        for index, region in enumerate(regions)
    ]

    if workers == 1 or len(tasks) <= 1:
        results = [_render_task(task) for task in tasks]
    else:
        chunksize = max(1, len(tasks) // (workers * 4))
        with ProcessPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(_render_task, tasks, chunksize=chunksize))

    image = bytearray(width * height * 3)
    for region, data in zip(regions, results):
        row_bytes = region.width * 3
        for row, y in enumerate(range(region.y0, region.y1)):
            start = (y * width + region.x0) * 3
            image[start:start + row_bytes] = data[row * row_bytes:(row + 1) * row_bytes]
    return bytes(image)