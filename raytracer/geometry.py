"""Shapes that rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from raytracer.ray import Ray
from raytracer.vec3 import Vec3, dot


@dataclass(frozen=True)
class Collision:
    """Where a ray hit a surface: parameter, point and outward normal."""

    time: float
    point: Vec3
    normal: Vec3


class Shape(ABC):
    """A surface that can be intersected by rays."""

    @abstractmethod
    def collide(self, ray: Ray, t_min: float, t_max: float) -> Collision | None:
        """Nearest hit with ``t_min < t < t_max``, or None."""


@dataclass(frozen=True)
class Sphere(Shape):
    """A sphere given by centre and radius."""

    center: Vec3 = Vec3()
    radius: float = 0.0

    def collide(self, ray: Ray, t_min: float, t_max: float) -> Collision | None:
        oc = ray.origin - self.center
        a = dot(ray.direction, ray.direction)
        b = dot(oc, ray.direction)
        c = dot(oc, oc) - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant <= 0:
            return None
        root = math.sqrt(discriminant)
        for t in ((-b - root) / a, (-b + root) / a):
            if t_min < t < t_max:
                point = ray.point_at_parameter(t)
                return Collision(t, point, (point - self.center) / self.radius)
        return None