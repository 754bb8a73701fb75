"""Spheres, fixed or moving linearly between two centres over a time span."""

from __future__ import annotations

import math
from typing import Any, Optional

from .aabb import AABB, surrounding_box
from .hittable import HitRecord, Hittable, get_sphere_uv
from .onb import ONB, random_to_sphere
from .vec3 import Ray, Vec3


def _hit_sphere(
    center: Vec3,
    radius: float,
    material: Any,
    ray: Ray,
    t_min: float,
    t_max: float,
) -> Optional[HitRecord]:
    """Intersect a ray with a sphere; the nearer root inside the range wins.

    A negative radius keeps the same surface but turns the normals inwards.
    """
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = b * b - a * c
    if discriminant <= 0:
        return None
    root = math.sqrt(discriminant)
    for t in ((-b - root) / a, (-b + root) / a):
        if t_min < t < t_max:
            p = ray.point_at(t)
            outward = (p - center) / radius
            u, v = get_sphere_uv(outward)
            return HitRecord(t=t, p=p, normal=outward, material=material, u=u, v=v)
    return None


def _box_around(center: Vec3, radius: float) -> AABB:
    extent = Vec3(radius, radius, radius)
    return AABB(center - extent, center + extent)


class Sphere(Hittable):
    """A sphere at ``center`` with ``radius`` and a surface ``material``."""

    def __init__(self, center: Vec3, radius: float, material: Any = None) -> None:
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return _box_around(self.center, self.radius)

    def pdf_value(self, origin: Vec3, direction: Vec3) -> float:
        """Density of uniform sampling over the cone of directions to the sphere."""
        if self.hit(Ray(origin, direction), 0.001, math.inf) is None:
            return 0.0
        distance_squared = (self.center - origin).squared_length()
        cos_theta_max = math.sqrt(1 - self.radius * self.radius / distance_squared)
        solid_angle = 2 * math.pi * (1 - cos_theta_max)
        return 1 / solid_angle

    def random(self, origin: Vec3) -> Vec3:
        """Pick a direction from ``origin`` uniformly within the sphere's cone."""
        direction = self.center - origin
        uvw = ONB.from_w(direction)
        return uvw.local(random_to_sphere(self.radius, direction.squared_length()))


class MovingSphere(Hittable):
    """A sphere whose centre moves from ``center0`` at ``time0`` to ``center1`` at ``time1``."""

    def __init__(
        self,
        center0: Vec3,
        center1: Vec3,
        time0: float,
        time1: float,
        radius: float,
        material: Any = None,
    ) -> None:
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vec3:
        """Return the centre at ``time``, interpolated linearly."""
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + fraction * (self.center1 - self.center0)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(
            self.center(ray.time), self.radius, self.material, ray, t_min, t_max
        )

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return surrounding_box(
            _box_around(self.center(t0), self.radius),
            _box_around(self.center(t1), self.radius),
        )