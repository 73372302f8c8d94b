"""Building scenes from text descriptions or at random."""

from __future__ import annotations

import logging
import os
import random
import re

from raytracer.geometry import Sphere
from raytracer.materials import Crystalline, Diffuse, Metallic
from raytracer.sampling import random_float
from raytracer.scene import Scene, SceneObject
from raytracer.vec3 import Vec3

logger = logging.getLogger(__name__)

_FLOAT_MAX = 3.4028234663852886e38
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class SceneFormatError(ValueError):
    """Raised for a scene line that cannot be understood."""


def _to_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring what follows it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise SceneFormatError(f"invalid number: {text!r}")
    value = float(match.group(1))
    if value == value and abs(value) != float("inf") and abs(value) > _FLOAT_MAX:
        raise SceneFormatError(f"number out of range: {text!r}")
    return value


def _first_component(token: str) -> float:
    """Number between an opening parenthesis and the first comma."""
    start = token.find("(") + 1
    end = token.find(",")
    if end < start:
        end = len(token)
    return _to_float(token[start:end])


def _component(token: str) -> float:
    """Number before the first comma."""
    end = token.find(",")
    return _to_float(token if end == -1 else token[:end])


def parse_scene_line(line: str) -> SceneObject | None:
    """Parse one scene line; blank lines give None.

    The expected form is
    ``Object Sphere ( (x, y, z, r ) <Material> ( ... )``.
    """
    tokens = line.split()
    if not tokens:
        return None
    if tokens[0] != "Object" or len(tokens) < 12:
        raise SceneFormatError(f"malformed object line: {line}")
    if tokens[1] != "Sphere" or tokens[2] != "(" or tokens[7] != ")":
        raise SceneFormatError(f"malformed sphere in line: {line}")

    center = Vec3(_first_component(tokens[3]), _component(tokens[4]), _component(tokens[5]))
    sphere = Sphere(center, _to_float(tokens[6]))

    kind = tokens[8]
    if kind == "Crystalline" and tokens[9] == "(" and tokens[11].endswith(")"):
        material = Crystalline(_to_float(tokens[10]))
    elif kind == "Metallic" and len(tokens) == 15 and tokens[9] == "(" and tokens[14] == ")":
        albedo = Vec3(
            _first_component(tokens[10]), _component(tokens[11]), _component(tokens[12])
        )
        material = Metallic(albedo, _to_float(tokens[13][:-1]))
    elif kind == "Diffuse" and len(tokens) == 14 and tokens[9] == "(" and tokens[13].endswith(")"):
        color = Vec3(
            _first_component(tokens[10]), _component(tokens[11]), _component(tokens[12])
        )
        material = Diffuse(color)
    else:
        raise SceneFormatError(f"unknown material or malformed line: {line}")
    return SceneObject(sphere, material)


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read a scene file; lines that cannot be parsed are logged and skipped."""
    scene = Scene()
    with open(path, encoding="utf-8") as fh:
        for line in fh:
            line = line.rstrip("\n")
            try:
                obj = parse_scene_line(line)
            except SceneFormatError as exc:
                logger.warning("%s", exc)
                continue
            if obj is not None:
                logger.info("loaded %s on %s", obj.material, obj.shape)
                scene.add(obj)
    return scene


def random_scene(rng: random.Random) -> Scene:
    """The classic field of small random spheres around three large ones."""
    scene = Scene()
    scene.add(SceneObject(Sphere(Vec3(0, -1000, 0), 1000), Diffuse(Vec3(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_float(rng)
            center = Vec3(a + 0.9 * random_float(rng), 0.2, b + 0.9 * random_float(rng))
            if (center - Vec3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Diffuse(
                    Vec3(
                        random_float(rng) * random_float(rng),
                        random_float(rng) * random_float(rng),
                        random_float(rng) * random_float(rng),
                    )
                )
            elif choose_mat < 0.95:
                material = Metallic(
                    Vec3(
                        0.5 * (1 + random_float(rng)),
                        0.5 * (1 + random_float(rng)),
                        0.5 * (1 + random_float(rng)),
                    ),
                    0.5 * random_float(rng),
                )
            else:
                material = Crystalline(1.5)
            scene.add(SceneObject(Sphere(center, 0.2), material))

    scene.add(SceneObject(Sphere(Vec3(0, 1, 0), 1.0), Crystalline(1.5)))
    scene.add(SceneObject(Sphere(Vec3(-4, 1, 0), 1.0), Diffuse(Vec3(0.4, 0.2, 0.1))))
    scene.add(SceneObject(Sphere(Vec3(4, 1, 0), 1.0), Metallic(Vec3(0.7, 0.6, 0.5), 0.0)))
    return scene