"""Scene objects and the recursive colour computation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator

from raytracer.geometry import Collision, Shape
from raytracer.materials import Material, Scatter
from raytracer.ray import Ray
from raytracer.vec3 import Vec3, unit_vector

_T_MIN = 0.001
_FLOAT_MAX = 3.4028234663852886e38
_BLACK = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SceneObject:
    """A shape paired with the material covering it."""

    shape: Shape
    material: Material

    def check_collision(self, ray: Ray, t_min: float, t_max: float) -> Collision | None:
        return self.shape.collide(ray, t_min, t_max)

    def scatter(self, ray: Ray, collision: Collision, rng: random.Random) -> Scatter | None:
        return self.material.scatter(ray, collision, rng)


@dataclass
class Scene:
    """A collection of objects lit by a sky gradient.

    ``depth`` is the maximum number of bounces followed per ray.
    """

    depth: int = 50
    sky: Vec3 = Vec3(0.5, 0.7, 1.0)
    horizon: Vec3 = Vec3(1.0, 1.0, 1.0)
    objects: list[SceneObject] = field(default_factory=list)

    def add(self, obj: SceneObject) -> None:
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self.objects)

    def _closest_hit(self, ray: Ray) -> tuple[SceneObject, Collision] | None:
        best = None
        closest = _FLOAT_MAX
        for obj in self.objects:
            collision = obj.check_collision(ray, _T_MIN, closest)
            if collision is not None:
                best = (obj, collision)
                closest = collision.time
        return best

    def _background(self, ray: Ray) -> Vec3:
        unit_direction = unit_vector(ray.direction)
        t = 0.5 * (unit_direction.y + 1.0)
        return (1.0 - t) * self.horizon + t * self.sky

    def color(self, ray: Ray, rng: random.Random) -> Vec3:
        """Colour seen along ``ray``."""
        attenuation = Vec3(1.0, 1.0, 1.0)
        bounce = 0
        while True:
            hit = self._closest_hit(ray)
            if hit is None:
                return attenuation * self._background(ray)
            obj, collision = hit
            if bounce >= self.depth:
                return _BLACK
            scattered = obj.scatter(ray, collision, rng)
            if scattered is None:
                return _BLACK
            attenuation = attenuation * scattered.attenuation
            ray = scattered.ray
            bounce += 1