"""Half-lines with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.vec3 import Vec3


@dataclass(frozen=True)
class Ray:
    """A ray ``origin + t * direction``."""

    origin: Vec3 = Vec3()
    direction: Vec3 = Vec3()

    def point_at_parameter(self, t: float) -> Vec3:
        return self.origin + t * self.direction