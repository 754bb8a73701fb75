"""Orthonormal bases and direction sampling in local frames."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vec3 import Vec3, random_double


@dataclass(frozen=True)
class ONB:
    """Three mutually orthogonal unit axes u, v and w."""

    u: Vec3
    v: Vec3
    w: Vec3

    def __getitem__(self, index: int) -> Vec3:
        return (self.u, self.v, self.w)[index]

    @classmethod
    def from_w(cls, n: Vec3) -> ONB:
        """Build a basis whose w axis points along ``n``."""
        w = n.unit()
        helper = Vec3(0, 1, 0) if abs(w.x) > 0.9 else Vec3(1, 0, 0)
        v = w.cross(helper).unit()
        u = w.cross(v)
        return cls(u, v, w)

    def local(self, a: Vec3) -> Vec3:
        """Express local coordinates ``a`` in world space."""
        return a.x * self.u + a.y * self.v + a.z * self.w


def random_cosine_direction() -> Vec3:
    """Sample a unit direction about +z with cosine-weighted density."""
    r1 = random_double()
    r2 = random_double()
    z = math.sqrt(1 - r2)
    phi = 2 * math.pi * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)
    return Vec3(x, y, z)


def random_to_sphere(radius: float, distance_squared: float) -> Vec3:
    """Sample a unit direction about +z within the cone subtended by a sphere."""
    r1 = random_double()
    r2 = random_double()
    z = 1 + r2 * (math.sqrt(1 - radius * radius / distance_squared) - 1)
    phi = 2 * math.pi * r1
    s = math.sqrt(1 - z * z)
    return Vec3(math.cos(phi) * s, math.sin(phi) * s, z)