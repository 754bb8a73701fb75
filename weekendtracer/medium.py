"""Participating media of constant density, such as smoke or fog."""

from __future__ import annotations

import math
from typing import Optional, Union

from .aabb import AABB
from .hittable import HitRecord, Hittable
from .material import Isotropic
from .texture import Texture
from .vec3 import Ray, Vec3, random_double


class ConstantMedium(Hittable):
    """A volume filling ``boundary`` that scatters rays at random depths.

    The chance of scattering per unit length is set by ``density``.
    """

    def __init__(
        self, boundary: Hittable, density: float, albedo: Union[Texture, Vec3]
    ) -> None:
        self.boundary = boundary
        self.density = density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -math.inf, math.inf)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, math.inf)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        speed = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * speed
        sample = random_double()
        if sample == 0.0:
            return None
        hit_distance = -(1 / self.density) * math.log(sample)
        if hit_distance >= distance_inside_boundary:
            return None

        t = t_enter + hit_distance / speed
        return HitRecord(
            t=t,
            p=ray.point_at(t),
            normal=Vec3(1, 0, 0),
            material=self.phase_function,
        )

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(t0, t1)