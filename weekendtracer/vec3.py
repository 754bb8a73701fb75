"""Three-component vectors, rays and the shared random source."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


class Vec3:
    """A 3D vector used for points, directions and colours.

    Instances are treated as immutable: every operation returns a new vector.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: Number = 0.0, y: Number = 0.0, z: Number = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __pos__(self) -> Vec3:
        return self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, Number]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: Number) -> Vec3:
        return Vec3(other * self.x, other * self.y, other * self.z)

    def __truediv__(self, other: Union[Vec3, Number]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vec3(self.x / other, self.y / other, self.z / other)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def unit(self) -> Vec3:
        """Return this vector scaled to length one; a zero vector raises."""
        return self / self.length()


@dataclass(frozen=True)
class Ray:
    """A half-line from ``origin`` along ``direction`` at a moment ``time``."""

    origin: Vec3
    direction: Vec3
    time: float = 0.0

    def point_at(self, t: float) -> Vec3:
        return self.origin + t * self.direction


_rng = random.Random(5489)


def random_double() -> float:
    """Return a uniform number in [0, 1) from the shared generator."""
    return _rng.random()


def seed(value: object) -> None:
    """Reset the shared generator so that later draws repeat."""
    _rng.seed(value)


def random_in_unit_sphere() -> Vec3:
    """Pick a point strictly inside the unit sphere by rejection."""
    while True:
        p = 2.0 * Vec3(random_double(), random_double(), random_double()) - Vec3(1, 1, 1)
        if p.squared_length() < 1.0:
            return p


def random_in_unit_disk() -> Vec3:
    """Pick a point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = 2.0 * Vec3(random_double(), random_double(), 0.0) - Vec3(1, 1, 0)
        if p.dot(p) < 1.0:
            return p