"""Probability densities over directions, used for importance sampling."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .hittable import Hittable
from .onb import ONB, random_cosine_direction
from .vec3 import Vec3, random_double


class Pdf(ABC):
    """A density over directions that can also draw samples from itself."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """Return the density of ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """Draw a direction distributed by this density."""


class CosinePdf(Pdf):
    """Cosine-weighted density about the axis ``w``."""

    def __init__(self, w: Vec3) -> None:
        self.uvw = ONB.from_w(w)

    def value(self, direction: Vec3) -> float:
        cosine = direction.unit().dot(self.uvw.w)
        if cosine > 0:
            return cosine / math.pi
        return 0.0

    def generate(self) -> Vec3:
        return self.uvw.local(random_cosine_direction())


class HittablePdf(Pdf):
    """Density of directions from ``origin`` towards a hittable object."""

    def __init__(self, hittable: Hittable, origin: Vec3) -> None:
        self.hittable = hittable
        self.origin = origin

    def value(self, direction: Vec3) -> float:
        return self.hittable.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.hittable.random(self.origin)


class MixturePdf(Pdf):
    """An even blend of two densities."""

    def __init__(self, p0: Pdf, p1: Pdf) -> None:
        self.p0 = p0
        self.p1 = p1

    def value(self, direction: Vec3) -> float:
        return 0.5 * self.p0.value(direction) + 0.5 * self.p1.value(direction)

    def generate(self) -> Vec3:
        if random_double() < 0.5:
            return self.p0.generate()
        return self.p1.generate()