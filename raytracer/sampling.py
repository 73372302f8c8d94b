"""Random sampling helpers driven by an explicit random generator."""

from __future__ import annotations

import random

from raytracer.vec3 import Vec3, dot


def random_float(rng: random.Random) -> float:
    """Uniform float in [0, 1)."""
    return rng.random()


def random_in_unit_sphere(rng: random.Random) -> Vec3:
    """Uniform point strictly inside the unit sphere, by rejection."""
    while True:
        p = 2.0 * Vec3(random_float(rng), random_float(rng), random_float(rng)) - Vec3(1, 1, 1)
        if p.squared_length() < 1.0:
            return p


def random_in_unit_disk(rng: random.Random) -> Vec3:
    """Uniform point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = 2.0 * Vec3(random_float(rng), random_float(rng), 0.0) - Vec3(1, 1, 0)
        if dot(p, p) < 1.0:
            return p