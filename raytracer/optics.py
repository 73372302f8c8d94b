"""Reflection, refraction and Fresnel approximation."""

from __future__ import annotations

import math

from raytracer.vec3 import Vec3, dot, unit_vector


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the reflection coefficient."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


def refract(v: Vec3, n: Vec3, ni_over_nt: float) -> Vec3 | None:
    """Refracted direction of ``v`` through a surface with normal ``n``.

    Returns None on total internal reflection.
    """
    uv = unit_vector(v)
    dt = dot(uv, n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1 - dt * dt)
    if discriminant > 0:
        return ni_over_nt * (uv - n * dt) - n * math.sqrt(discriminant)
    return None


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface with normal ``n``."""
    return v - 2 * dot(v, n) * n