"""A thin-lens camera with a shutter interval."""

from __future__ import annotations

import math

from .vec3 import Ray, Vec3, random_double, random_in_unit_disk


class Camera:
    """Positionable camera producing rays through normalised screen coordinates.

    ``vfov`` is the vertical field of view in degrees, top to bottom.
    """

    def __init__(
        self,
        lookfrom: Vec3 = Vec3(0, 0, -1),
        lookat: Vec3 = Vec3(0, 0, 0),
        vup: Vec3 = Vec3(0, 1, 0),
        vfov: float = 40.0,
        aspect: float = 1.0,
        aperture: float = 0.0,
        focus_dist: float = 10.0,
        t0: float = 0.0,
        t1: float = 0.0,
    ) -> None:
        self.time0 = t0
        self.time1 = t1
        self.lens_radius = aperture / 2
        theta = math.radians(vfov)
        half_height = math.tan(theta / 2)
        half_width = aspect * half_height
        self.origin = lookfrom
        self.w = (lookfrom - lookat).unit()
        self.u = vup.cross(self.w).unit()
        self.v = self.w.cross(self.u)
        self.lower_left_corner = (
            self.origin
            - half_width * focus_dist * self.u
            - half_height * focus_dist * self.v
            - focus_dist * self.w
        )
        self.horizontal = 2 * half_width * focus_dist * self.u
        self.vertical = 2 * half_height * focus_dist * self.v

    def get_ray(self, s: float, t: float) -> Ray:
        """Return a ray through screen point (s, t), each in [0, 1]."""
        rd = self.lens_radius * random_in_unit_disk()
        offset = self.u * rd.x + self.v * rd.y
        time = self.time0 + random_double() * (self.time1 - self.time0)
        return Ray(
            self.origin + offset,
            self.lower_left_corner
            + s * self.horizontal
            + t * self.vertical
            - self.origin
            - offset,
            time,
        )