"""Surface materials deciding how rays bounce."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from raytracer.geometry import Collision
from raytracer.optics import reflect, refract, schlick
from raytracer.ray import Ray
from raytracer.sampling import random_float, random_in_unit_sphere
from raytracer.vec3 import Vec3, dot, unit_vector


@dataclass(frozen=True)
class Scatter:
    """A bounced ray and the colour it is attenuated by."""

    attenuation: Vec3
    ray: Ray


class Material(ABC):
    """How a surface scatters incoming light."""

    @abstractmethod
    def scatter(self, ray: Ray, collision: Collision, rng: random.Random) -> Scatter | None:
        """Scattered ray, or None when the ray is absorbed."""


@dataclass(frozen=True)
class Diffuse(Material):
    """Lambertian surface of a given colour."""

    color: Vec3

    def scatter(self, ray: Ray, collision: Collision, rng: random.Random) -> Scatter | None:
        target = collision.point + collision.normal + random_in_unit_sphere(rng)
        return Scatter(self.color, Ray(collision.point, target - collision.point))


@dataclass
class Metallic(Material):
    """Reflective surface; ``fuzz`` is capped at 1."""

    albedo: Vec3
    fuzz: float

    def __post_init__(self) -> None:
        if not self.fuzz < 1:
            self.fuzz = 1.0

    def scatter(self, ray: Ray, collision: Collision, rng: random.Random) -> Scatter | None:
        reflected = reflect(unit_vector(ray.direction), collision.normal)
        scattered = Ray(collision.point, reflected + self.fuzz * random_in_unit_sphere(rng))
        if dot(scattered.direction, collision.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None


@dataclass(frozen=True)
class Crystalline(Material):
    """Dielectric (glass-like) surface with refractive index ``ref_idx``."""

    ref_idx: float

    def scatter(self, ray: Ray, collision: Collision, rng: random.Random) -> Scatter | None:
        direction = ray.direction
        normal = collision.normal
        reflected = reflect(direction, normal)
        incidence = dot(direction, normal) / direction.length()

        if dot(direction, normal) > 0:
            outward_normal = -normal
            ni_over_nt = self.ref_idx
            inner = 1 - self.ref_idx * self.ref_idx * (1 - incidence * incidence)
            cosine = math.sqrt(max(inner, 0.0))
        else:
            outward_normal = normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -incidence

        refracted = refract(direction, outward_normal, ni_over_nt)
        reflect_prob = schlick(cosine, self.ref_idx) if refracted is not None else 1.0

        if refracted is None or random_float(rng) < reflect_prob:
            out = reflected
        else:
            out = refracted
        return Scatter(Vec3(1.0, 1.0, 1.0), Ray(collision.point, out))