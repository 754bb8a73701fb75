"""Textures that give a colour for surface coordinates and a point."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from os import PathLike
from typing import Optional, Union

from PIL import Image

from .perlin import Perlin
from .vec3 import Vec3


class Texture(ABC):
    """A colour source sampled at (u, v) and point ``p``."""

    @abstractmethod
    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        """Return the colour at the given coordinates."""


class ConstantTexture(Texture):
    """A single colour everywhere."""

    def __init__(self, color: Vec3) -> None:
        self.color = color

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.color


class CheckerTexture(Texture):
    """Alternates between two textures in a 3D checker pattern."""

    def __init__(self, even: Texture, odd: Texture) -> None:
        self.even = even
        self.odd = odd

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        sines = math.sin(10 * p.x) * math.sin(10 * p.y) * math.sin(10 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """Marble-like grey pattern driven by Perlin turbulence."""

    def __init__(self, scale: float, noise: Optional[Perlin] = None) -> None:
        self.scale = scale
        self.noise = noise if noise is not None else Perlin()

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        return Vec3(1, 1, 1) * 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))


class ImageTexture(Texture):
    """An RGB image, 8 bits per channel, rows stored top to bottom."""

    def __init__(self, data: bytes, nx: int, ny: int) -> None:
        if nx <= 0 or ny <= 0:
            raise ValueError("image dimensions must be positive")
        if len(data) < 3 * nx * ny:
            raise ValueError("image data is shorter than 3 * nx * ny bytes")
        self.data = bytes(data)
        self.nx = nx
        self.ny = ny

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> ImageTexture:
        """Load an image file and convert it to RGB."""
        with Image.open(path) as image:
            rgb = image.convert("RGB")
            return cls(rgb.tobytes(), rgb.width, rgb.height)

    def value(self, u: float, v: float, p: Vec3) -> Vec3:
        i = int(u * self.nx)
        j = int((1 - v) * self.ny - 0.001)
        i = min(max(i, 0), self.nx - 1)
        j = min(max(j, 0), self.ny - 1)
        offset = 3 * i + 3 * self.nx * j
        r, g, b = self.data[offset:offset + 3]
        return Vec3(r / 255.0, g / 255.0, b / 255.0)