"""Axis-aligned rectangles and boxes built from them."""

from __future__ import annotations

import math
from typing import Any, List, Optional, Tuple

from .aabb import AABB
from .hittable import FlipNormals, HitRecord, Hittable, HittableList
from .vec3 import Ray, Vec3, random_double

_THICKNESS = 0.0001


class _AxisAlignedRect(Hittable):
    """A rectangle spanning [a0, a1] x [b0, b1] in the plane where the third axis is ``k``.

    ``_axes`` names the two in-plane axes and the axis normal to the plane.
    """

    _axes: Tuple[int, int, int]

    def __init__(
        self, a0: float, a1: float, b0: float, b1: float, k: float, material: Any
    ) -> None:
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    @property
    def normal(self) -> Vec3:
        coords = [0.0, 0.0, 0.0]
        coords[self._axes[2]] = 1.0
        return Vec3(*coords)

    def _point(self, a: float, b: float, c: float) -> Vec3:
        coords = [0.0, 0.0, 0.0]
        axis_a, axis_b, axis_c = self._axes
        coords[axis_a] = a
        coords[axis_b] = b
        coords[axis_c] = c
        return Vec3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        axis_a, axis_b, axis_c = self._axes
        speed = ray.direction[axis_c]
        if speed == 0:
            return None
        t = (self.k - ray.origin[axis_c]) / speed
        if t < t_min or t > t_max:
            return None
        a = ray.origin[axis_a] + t * ray.direction[axis_a]
        b = ray.origin[axis_b] + t * ray.direction[axis_b]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None
        return HitRecord(
            t=t,
            p=ray.point_at(t),
            normal=self.normal,
            material=self.material,
            u=(a - self.a0) / (self.a1 - self.a0),
            v=(b - self.b0) / (self.b1 - self.b0),
        )

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return AABB(
            self._point(self.a0, self.b0, self.k - _THICKNESS),
            self._point(self.a1, self.b1, self.k + _THICKNESS),
        )


class XYRect(_AxisAlignedRect):
    """Rectangle x0..x1 by y0..y1 in the plane z = k, facing +z."""

    _axes = (0, 1, 2)

    def __init__(
        self, x0: float, x1: float, y0: float, y1: float, k: float, material: Any = None
    ) -> None:
        super().__init__(x0, x1, y0, y1, k, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return super().hit(ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return super().bounding_box(t0, t1)


class XZRect(_AxisAlignedRect):
    """Rectangle x0..x1 by z0..z1 in the plane y = k, facing +y; usable as a light to sample."""

    _axes = (0, 2, 1)

    def __init__(
        self, x0: float, x1: float, z0: float, z1: float, k: float, material: Any = None
    ) -> None:
        super().__init__(x0, x1, z0, z1, k, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return super().hit(ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return super().bounding_box(t0, t1)

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        """Density, per solid angle, of sampling ``direction`` uniformly over the area."""
        rec = self.hit(Ray(origin, direction), 0.001, math.inf)
        if rec is None:
            return 0.0
        area = (self.a1 - self.a0) * (self.b1 - self.b0)
        distance_squared = rec.t * rec.t * direction.squared_length()
        cosine = abs(direction.dot(rec.normal) / direction.length())
        return distance_squared / (cosine * area)

    def random(self, origin: Vec3) -> Vec3:
        """Return the vector from ``origin`` to a uniformly chosen point on the rectangle."""
        x = self.a0 + random_double() * (self.a1 - self.a0)
        z = self.b0 + random_double() * (self.b1 - self.b0)
        return Vec3(x, self.k, z) - origin


class YZRect(_AxisAlignedRect):
    """Rectangle y0..y1 by z0..z1 in the plane x = k, facing +x."""

    _axes = (1, 2, 0)

    def __init__(
        self, y0: float, y1: float, z0: float, z1: float, k: float, material: Any = None
    ) -> None:
        super().__init__(y0, y1, z0, z1, k, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return super().hit(ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return super().bounding_box(t0, t1)


class Box(Hittable):
    """An axis-aligned box from ``p0`` to ``p1`` made of six outward-facing rectangles."""

    def __init__(self, p0: Vec3, p1: Vec3, material: Any = None) -> None:
        self.pmin = p0
        self.pmax = p1
        faces: List[Hittable] = [
            XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
            FlipNormals(XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material)),
            XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
            FlipNormals(XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material)),
            YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
            FlipNormals(YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material)),
        ]
        self.faces = HittableList(faces)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.faces.hit(ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return AABB(self.pmin, self.pmax)