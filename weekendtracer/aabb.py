"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vec3 import Ray, Vec3


@dataclass(frozen=True)
class AABB:
    """A box spanning ``minimum`` to ``maximum`` along every axis."""

    minimum: Vec3
    maximum: Vec3

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Tell whether the ray meets the box for some t in (t_min, t_max)."""
        for lo, hi, origin, direction in zip(
            self.minimum, self.maximum, ray.origin, ray.direction
        ):
            inv_d = 1.0 / direction if direction else math.copysign(math.inf, direction)
            t0 = (lo - origin) * inv_d
            t1 = (hi - origin) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True


def surrounding_box(box0: AABB, box1: AABB) -> AABB:
    """Return the smallest box holding both boxes."""
    small = Vec3(*(min(a, b) for a, b in zip(box0.minimum, box1.minimum)))
    big = Vec3(*(max(a, b) for a, b in zip(box0.maximum, box1.maximum)))
    return AABB(small, big)