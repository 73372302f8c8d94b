import random

import pytest

from raytracer.sampling import random_float, random_in_unit_disk, random_in_unit_sphere
from raytracer.vec3 import Vec3


class _SequenceRandom:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


def test_random_float_in_unit_interval():
    rng = random.Random(7)
    values = [random_float(rng) for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_float_is_reproducible_with_seed():
    a = [random_float(random.Random(42)) for _ in range(3)]
    b = [random_float(random.Random(42)) for _ in range(3)]
    assert a == b


def test_sphere_samples_lie_inside():
    rng = random.Random(1)
    for _ in range(500):
        assert random_in_unit_sphere(rng).squared_length() < 1.0


def test_disk_samples_lie_inside_plane():
    rng = random.Random(2)
    for _ in range(500):
        p = random_in_unit_disk(rng)
        assert p.z == 0.0
        assert p.squared_length() < 1.0


def test_sphere_rejects_points_outside():
    rng = _SequenceRandom([0.99, 0.99, 0.99, 0.5, 0.5, 0.5])
    assert tuple(random_in_unit_sphere(rng)) == pytest.approx(tuple(Vec3()))


def test_disk_rejects_points_outside():
    rng = _SequenceRandom([0.0, 0.0, 0.5, 0.5])
    assert tuple(random_in_unit_disk(rng)) == pytest.approx(tuple(Vec3()))