import math
import random

import pytest

from raytracer.camera import Camera
from raytracer.vec3 import Vec3, dot, unit_vector


def _pinhole(vfov=90.0, aspect=1.0, focus=10.0):
    return Camera(Vec3(13, 2, 3), Vec3(0, 0, 0), Vec3(0, 1, 0), vfov, aspect, 0.0, focus)


def _close(a, b, tol=1e-9):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def test_centre_ray_points_at_target():
    cam = _pinhole()
    ray = cam.get_ray(0.5, 0.5, random.Random(0))
    assert ray.origin == Vec3(13, 2, 3)
    expected = unit_vector(Vec3(0, 0, 0) - Vec3(13, 2, 3))
    assert _close(unit_vector(ray.direction), expected)


def test_centre_ray_reaches_focus_plane():
    cam = _pinhole(focus=7.0)
    ray = cam.get_ray(0.5, 0.5, random.Random(0))
    assert ray.direction.length() == pytest.approx(7.0)


def test_vertical_field_of_view():
    cam = _pinhole(vfov=90.0)
    rng = random.Random(1)
    bottom = unit_vector(cam.get_ray(0.5, 0.0, rng).direction)
    top = unit_vector(cam.get_ray(0.5, 1.0, rng).direction)
    angle = math.degrees(math.acos(dot(bottom, top)))
    assert angle == pytest.approx(90.0)


def test_basis_is_orthonormal():
    cam = _pinhole()
    for a in (cam.u, cam.v, cam.w):
        assert a.length() == pytest.approx(1.0)
    assert dot(cam.u, cam.v) == pytest.approx(0.0, abs=1e-12)
    assert dot(cam.u, cam.w) == pytest.approx(0.0, abs=1e-12)
    assert dot(cam.v, cam.w) == pytest.approx(0.0, abs=1e-12)


def test_lower_left_corner_ray():
    cam = _pinhole()
    ray = cam.get_ray(0.0, 0.0, random.Random(2))
    expected = cam.lower_left_corner - cam.origin
    assert list(ray.direction) == pytest.approx(list(expected), abs=1e-9)


def test_aperture_rays_converge_on_focus_plane():
    cam = Camera(Vec3(13, 2, 3), Vec3(0, 0, 0), Vec3(0, 1, 0), 20.0, 1.5, 0.5, 10.0)
    rng = random.Random(3)
    targets = []
    for _ in range(20):
        ray = cam.get_ray(0.3, 0.7, rng)
        assert (ray.origin - cam.origin).length() < cam.lens_radius
        targets.append(ray.origin + ray.direction)
    first = targets[0]
    assert all(_close(t, first, 1e-9) for t in targets)


def test_lens_radius_is_half_aperture():
    cam = Camera(Vec3(0, 0, 0), Vec3(0, 0, -1), Vec3(0, 1, 0), 45.0, 1.0, 0.4, 1.0)
    assert cam.lens_radius == pytest.approx(0.2)