"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector; also used as an RGB colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            k = 1.0 / other
            return Vec3(self.x * k, self.y * k, self.z * k)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"


def dot(v1: Vec3, v2: Vec3) -> float:
    """Scalar product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross(v1: Vec3, v2: Vec3) -> Vec3:
    """Vector product of two vectors."""
    return Vec3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Return ``v`` scaled to length one."""
    return v / v.length()