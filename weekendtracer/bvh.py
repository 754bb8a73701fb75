"""Bounding volume hierarchy for faster ray queries."""

from __future__ import annotations

from typing import Optional, Sequence

from .aabb import AABB, surrounding_box
from .hittable import HitRecord, Hittable
from .vec3 import Ray, random_double

_MISSING_BOX = "no bounding box in bvh_node constructor"


def _box_of(obj: Hittable, t0: float, t1: float) -> AABB:
    box = obj.bounding_box(t0, t1)
    if box is None:
        raise ValueError(_MISSING_BOX)
    return box


class BVHNode(Hittable):
    """A binary tree of objects, split along a randomly chosen axis."""

    def __init__(self, objects: Sequence[Hittable], time0: float, time1: float) -> None:
        if not objects:
            raise ValueError("a BVH node needs at least one object")
        axis = int(3 * random_double())
        ordered = sorted(objects, key=lambda obj: _box_of(obj, 0, 0).minimum[axis])
        n = len(ordered)
        if n == 1:
            self.left = self.right = ordered[0]
        elif n == 2:
            self.left, self.right = ordered
        else:
            half = n // 2
            self.left = BVHNode(ordered[:half], time0, time1)
            self.right = BVHNode(ordered[half:], time0, time1)
        self.box = surrounding_box(
            _box_of(self.left, time0, time1), _box_of(self.right, time0, time1)
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None
        left_rec = self.left.hit(ray, t_min, t_max)
        right_rec = self.right.hit(ray, t_min, t_max)
        if left_rec is not None and right_rec is not None:
            return left_rec if left_rec.t < right_rec.t else right_rec
        return left_rec if left_rec is not None else right_rec

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return self.box