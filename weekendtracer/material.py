"""Surface materials: how light scatters from, or is emitted by, a hit point."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from .hittable import HitRecord
from .pdf import CosinePdf, Pdf
from .texture import ConstantTexture, Texture
from .vec3 import Ray, Vec3, random_double, random_in_unit_sphere

ColorSource = Union[Texture, Vec3]

_BLACK = Vec3(0, 0, 0)


def _as_texture(albedo: ColorSource) -> Texture:
    return ConstantTexture(albedo) if isinstance(albedo, Vec3) else albedo


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the unit normal ``n``."""
    return v - 2 * v.dot(n) * n


def refract(v: Vec3, n: Vec3, ni_over_nt: float) -> Optional[Vec3]:
    """Bend ``v`` through a surface with unit normal ``n`` by Snell's law.

    Returns None on total internal reflection.
    """
    uv = v.unit()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1 - dt * dt)
    if discriminant > 0:
        return ni_over_nt * (uv - n * dt) - n * math.sqrt(discriminant)
    return None


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance at a given incidence cosine."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


@dataclass
class ScatterRecord:
    """Outcome of a scatter event.

    ``ray`` is the scattered ray. For a non-specular scatter, ``pdf`` is the
    density the material prefers for sampling new directions.
    """

    attenuation: Vec3
    ray: Ray
    is_specular: bool
    pdf: Optional[Pdf] = None


class Material:
    """Base material: absorbs everything and emits nothing."""

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """Return how the incoming ray scatters, or None if it is absorbed."""
        return None

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        """Density with which this material scatters into ``scattered``."""
        return 0.0

    def emitted(self, ray_in: Ray, rec: HitRecord) -> Vec3:
        """Light given off at the hit point towards the incoming ray."""
        return _BLACK


class Lambertian(Material):
    """Ideal diffuse surface."""

    def __init__(self, albedo: ColorSource) -> None:
        self.albedo = _as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        target = rec.p + rec.normal + random_in_unit_sphere()
        return ScatterRecord(
            attenuation=self.albedo.value(rec.u, rec.v, rec.p),
            ray=Ray(rec.p, target - rec.p, ray_in.time),
            is_specular=False,
            pdf=CosinePdf(rec.normal),
        )

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        cosine = rec.normal.dot(scattered.direction.unit())
        if cosine < 0:
            return 0.0
        return cosine / math.pi


class Metal(Material):
    """Reflective surface; ``fuzz`` (capped at 1) blurs the reflection."""

    def __init__(self, albedo: Vec3, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.unit(), rec.normal)
        scattered = Ray(rec.p, reflected + self.fuzz * random_in_unit_sphere(), ray_in.time)
        if scattered.direction.dot(rec.normal) <= 0:
            return None
        return ScatterRecord(attenuation=self.albedo, ray=scattered, is_specular=True)


class Dielectric(Material):
    """Clear material such as glass with refractive index ``ref_idx``."""

    def __init__(self, ref_idx: float) -> None:
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)
        d_dot_n = direction.dot(rec.normal)
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        reflect_prob = 1.0 if refracted is None else schlick(cosine, self.ref_idx)

        if refracted is None or random_double() < reflect_prob:
            out = reflected
        else:
            out = refracted
        return ScatterRecord(
            attenuation=Vec3(1.0, 1.0, 1.0),
            ray=Ray(rec.p, out, ray_in.time),
            is_specular=True,
        )


class DiffuseLight(Material):
    """Emissive surface that does not scatter.

    When ``one_sided`` is set, light leaves only the side the normal faces.
    """

    def __init__(self, emit: ColorSource, one_sided: bool = False) -> None:
        self.emit = _as_texture(emit)
        self.one_sided = one_sided

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        return None

    def emitted(self, ray_in: Ray, rec: HitRecord) -> Vec3:
        if self.one_sided and rec.normal.dot(ray_in.direction) >= 0.0:
            return _BLACK
        return self.emit.value(rec.u, rec.v, rec.p)


class Isotropic(Material):
    """Scatters uniformly in every direction; the phase function of a medium."""

    def __init__(self, albedo: ColorSource) -> None:
        self.albedo = _as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        return ScatterRecord(
            attenuation=self.albedo.value(rec.u, rec.v, rec.p),
            ray=Ray(rec.p, random_in_unit_sphere()),
            is_specular=True,
        )