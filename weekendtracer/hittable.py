"""Things a ray can hit, plus wrappers that move, turn or flip them."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .aabb import AABB, surrounding_box
from .vec3 import Ray, Vec3, random_double


def get_sphere_uv(p: Vec3) -> Tuple[float, float]:
    """Map a point on the unit sphere to texture coordinates (u, v)."""
    phi = math.atan2(p.z, p.x)
    theta = math.asin(p.y)
    u = 1 - (phi + math.pi) / (2 * math.pi)
    v = (theta + math.pi / 2) / math.pi
    return u, v


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    t: float
    p: Vec3
    normal: Vec3
    material: Any = None
    u: float = 0.0
    v: float = 0.0


class Hittable(ABC):
    """A surface or volume that can be intersected by a ray."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the hit with t in (t_min, t_max), or None."""

    @abstractmethod
    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        """Return a box holding the object over the time span, or None."""

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        """Density of sampling ``direction`` from ``origin`` towards this object."""
        return 0.0

    def random(self, origin: Vec3) -> Vec3:
        """Pick a direction from ``origin`` towards this object."""
        return Vec3(1, 0, 0)


class FlipNormals(Hittable):
    """Presents the wrapped object with its normals reversed."""

    def __init__(self, inner: Hittable) -> None:
        self.inner = inner

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.inner.hit(ray, t_min, t_max)
        if rec is None:
            return None
        return replace(rec, normal=-rec.normal)

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return self.inner.bounding_box(t0, t1)


class Translate(Hittable):
    """Moves the wrapped object by ``offset``."""

    def __init__(self, inner: Hittable, offset: Vec3) -> None:
        self.inner = inner
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.inner.hit(moved, t_min, t_max)
        if rec is None:
            return None
        return replace(rec, p=rec.p + self.offset)

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        box = self.inner.bounding_box(t0, t1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)


class RotateY(Hittable):
    """Turns the wrapped object by ``angle`` degrees about the y axis."""

    def __init__(self, inner: Hittable, angle: float) -> None:
        self.inner = inner
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        box = inner.bounding_box(0, 1)
        self._bbox: Optional[AABB] = None if box is None else self._rotated_box(box)

    def _rotated_box(self, box: AABB) -> AABB:
        xs = (box.minimum.x, box.maximum.x)
        ys = (box.minimum.y, box.maximum.y)
        zs = (box.minimum.z, box.maximum.z)
        corners = [
            Vec3(
                self.cos_theta * x + self.sin_theta * z,
                y,
                -self.sin_theta * x + self.cos_theta * z,
            )
            for x, y, z in itertools.product(xs, ys, zs)
        ]
        low = Vec3(*(min(c[axis] for c in corners) for axis in range(3)))
        high = Vec3(*(max(c[axis] for c in corners) for axis in range(3)))
        return AABB(low, high)

    def _to_local(self, a: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * a.x - self.sin_theta * a.z,
            a.y,
            self.sin_theta * a.x + self.cos_theta * a.z,
        )

    def _to_world(self, a: Vec3) -> Vec3:
        return Vec3(
            self.cos_theta * a.x + self.sin_theta * a.z,
            a.y,
            -self.sin_theta * a.x + self.cos_theta * a.z,
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated = Ray(self._to_local(ray.origin), self._to_local(ray.direction), ray.time)
        rec = self.inner.hit(rotated, t_min, t_max)
        if rec is None:
            return None
        return replace(rec, p=self._to_world(rec.p), normal=self._to_world(rec.normal))

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return self._bbox


class HittableList(Hittable):
    """A group of objects hit as one; the closest hit wins."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: List[Hittable] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        closest: Optional[HitRecord] = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        box: Optional[AABB] = None
        for obj in self.objects:
            obj_box = obj.bounding_box(t0, t1)
            if obj_box is None:
                return None
            box = obj_box if box is None else surrounding_box(box, obj_box)
        return box

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Vec3) -> Vec3:
        if not self.objects:
            raise IndexError("cannot sample a direction towards an empty list")
        index = int(random_double() * len(self.objects))
        return self.objects[index].random(origin)