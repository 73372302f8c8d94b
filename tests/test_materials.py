import random

import pytest

from raytracer.geometry import Collision
from raytracer.materials import Crystalline, Diffuse, Material, Metallic, Scatter
from raytracer.optics import reflect
from raytracer.ray import Ray
from raytracer.vec3 import Vec3, dot, unit_vector

UP = Vec3(0.0, 1.0, 0.0)
POINT = Vec3(1.0, 0.0, 2.0)
HIT = Collision(1.0, POINT, UP)


class _FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material()


def test_diffuse_keeps_color_and_bounces_from_hit_point():
    color = Vec3(0.2, 0.4, 0.6)
    result = Diffuse(color).scatter(Ray(Vec3(0, 5, 0), Vec3(0, -1, 0)), HIT, random.Random(3))
    assert result.attenuation == color
    assert result.ray.origin == POINT
    assert (result.ray.direction - UP).squared_length() < 1.0


def test_diffuse_with_centre_sample_goes_along_normal():
    result = Diffuse(Vec3(1, 1, 1)).scatter(Ray(Vec3(0, 5, 0), Vec3(0, -1, 0)), HIT, _FixedRandom(0.5))
    assert tuple(result.ray.direction) == pytest.approx(tuple(UP))


def test_metallic_without_fuzz_is_mirror():
    albedo = Vec3(0.7, 0.6, 0.5)
    incoming = Ray(Vec3(0, 1, 0), Vec3(1, -1, 0))
    result = Metallic(albedo, 0.0).scatter(incoming, HIT, random.Random(0))
    assert isinstance(result, Scatter)
    assert result.attenuation == albedo
    expected = reflect(unit_vector(incoming.direction), UP)
    assert tuple(result.ray.direction) == pytest.approx(tuple(expected))


def test_metallic_absorbs_rays_reflected_into_surface():
    incoming = Ray(Vec3(0, -1, 0), Vec3(0, 1, 0))
    assert Metallic(Vec3(1, 1, 1), 0.0).scatter(incoming, HIT, random.Random(0)) is None


def test_metallic_fuzz_is_capped():
    assert Metallic(Vec3(1, 1, 1), 5.0).fuzz == 1.0
    assert Metallic(Vec3(1, 1, 1), 0.3).fuzz == 0.3


def test_crystalline_reflects_when_sample_is_low():
    incoming = Ray(Vec3(0, 1, 0), Vec3(0.5, -1, 0))
    result = Crystalline(1.5).scatter(incoming, HIT, _FixedRandom(0.0))
    assert result.attenuation == Vec3(1.0, 1.0, 1.0)
    assert tuple(result.ray.direction) == pytest.approx(tuple(reflect(incoming.direction, UP)))


def test_crystalline_refracts_straight_at_normal_incidence():
    incoming = Ray(Vec3(0, 1, 0), Vec3(0, -2, 0))
    result = Crystalline(1.5).scatter(incoming, HIT, _FixedRandom(0.999))
    assert result.ray.origin == POINT
    assert tuple(result.ray.direction) == pytest.approx(tuple(unit_vector(incoming.direction)))


def test_crystalline_total_internal_reflection_from_inside():
    incoming = Ray(Vec3(0, -1, 0), Vec3(1, 0.05, 0))
    result = Crystalline(1.5).scatter(incoming, HIT, _FixedRandom(0.999))
    assert tuple(result.ray.direction) == pytest.approx(tuple(reflect(incoming.direction, UP)))
    assert dot(result.ray.direction, UP) < 0