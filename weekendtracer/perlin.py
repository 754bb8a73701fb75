"""Gradient noise with turbulence."""

from __future__ import annotations

import math
from typing import List, Sequence

from .vec3 import Vec3, random_double

_SIZE = 256


def perlin_interp(c: Sequence[Sequence[Sequence[Vec3]]], u: float, v: float, w: float) -> float:
    """Blend a 2x2x2 cube of gradients at the fractional position (u, v, w)."""
    uu = u * u * (3 - 2 * u)
    vv = v * v * (3 - 2 * v)
    ww = w * w * (3 - 2 * w)
    accum = 0.0
    for i, plane in enumerate(c):
        wi = i * uu + (1 - i) * (1 - uu)
        for j, row in enumerate(plane):
            wj = j * vv + (1 - j) * (1 - vv)
            for k, gradient in enumerate(row):
                wk = k * ww + (1 - k) * (1 - ww)
                accum += wi * wj * wk * gradient.dot(Vec3(u - i, v - j, w - k))
    return accum


def _generate_vectors() -> List[Vec3]:
    return [
        Vec3(2 * random_double() - 1, 2 * random_double() - 1, 2 * random_double() - 1).unit()
        for _ in range(_SIZE)
    ]


def _generate_perm() -> List[int]:
    perm = list(range(_SIZE))
    for i in range(_SIZE - 1, 0, -1):
        target = int(random_double() * (i + 1))
        perm[i], perm[target] = perm[target], perm[i]
    return perm


class Perlin:
    """Perlin noise drawing its gradient and permutation tables from the shared generator."""

    def __init__(self) -> None:
        self._ranvec = _generate_vectors()
        self._perm_x = _generate_perm()
        self._perm_y = _generate_perm()
        self._perm_z = _generate_perm()

    def noise(self, p: Vec3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)
        c = [
            [
                [
                    self._ranvec[
                        self._perm_x[(i + di) & 255]
                        ^ self._perm_y[(j + dj) & 255]
                        ^ self._perm_z[(k + dk) & 255]
                    ]
                    for dk in (0, 1)
                ]
                for dj in (0, 1)
            ]
            for di in (0, 1)
        ]
        return perlin_interp(c, u, v, w)

    def turb(self, p: Vec3, depth: int = 7) -> float:
        """Sum ``depth`` octaves of noise and return the magnitude."""
        accum = 0.0
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(p)
            weight *= 0.5
            p = p * 2
        return abs(accum)