"""Path-tracing integrators, image output and the rendering command."""

from __future__ import annotations

import argparse
import contextlib
import math
import sys
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple

from .hittable import Hittable
from .pdf import HittablePdf, MixturePdf
from .scenes import (
    DEFAULT_EARTH_IMAGE,
    Scene,
    cornell_balls,
    cornell_box,
    cornell_box_blocks,
    cornell_final,
    cornell_glass,
    cornell_smoke,
    final_scene,
    globe,
    random_scene,
    simple_light,
    two_perlin_spheres,
    two_spheres,
    weekend_scene,
)
from .vec3 import Ray, Vec3, random_double

MAX_DEPTH = 50

RGB = Tuple[int, int, int]
Shade = Callable[[Ray, Scene], Vec3]

_BLACK = Vec3(0, 0, 0)


def sky_color(ray: Ray, world: Hittable, depth: int = 0) -> Vec3:
    """Trace ``ray`` through ``world`` lit by a white-to-blue sky."""
    rec = world.hit(ray, 0.0001, math.inf)
    if rec is None:
        unit = ray.direction.unit()
        t = 0.5 * (unit.y + 1.0)
        return (1.0 - t) * Vec3(1.0, 1.0, 1.0) + t * Vec3(0.5, 0.7, 1.0)
    if depth < MAX_DEPTH:
        srec = rec.material.scatter(ray, rec)
        if srec is not None:
            return srec.attenuation * sky_color(srec.ray, world, depth + 1)
    return _BLACK


def color(ray: Ray, world: Hittable, depth: int = 0) -> Vec3:
    """Trace ``ray`` through ``world`` against a black background, adding emitted light."""
    rec = world.hit(ray, 0.0001, math.inf)
    if rec is None:
        return _BLACK
    emitted = rec.material.emitted(ray, rec)
    if depth < MAX_DEPTH:
        srec = rec.material.scatter(ray, rec)
        if srec is not None:
            return emitted + srec.attenuation * color(srec.ray, world, depth + 1)
    return emitted


def color_with_lights(ray: Ray, world: Hittable, lights: Hittable, depth: int = 0) -> Vec3:
    """Trace ``ray`` sampling diffuse bounces half towards ``lights``, half by the material."""
    rec = world.hit(ray, 0.001, math.inf)
    if rec is None:
        return _BLACK
    material = rec.material
    emitted = material.emitted(ray, rec)
    if depth >= MAX_DEPTH:
        return emitted
    srec = material.scatter(ray, rec)
    if srec is None:
        return emitted
    if srec.is_specular:
        return srec.attenuation * color_with_lights(srec.ray, world, lights, depth + 1)
    mixture = MixturePdf(HittablePdf(lights, rec.p), srec.pdf)
    scattered = Ray(rec.p, mixture.generate(), ray.time)
    pdf_val = mixture.value(scattered.direction)
    if pdf_val <= 0:
        return emitted
    incoming = color_with_lights(scattered, world, lights, depth + 1)
    weight = material.scattering_pdf(ray, rec, scattered)
    return emitted + srec.attenuation * weight * incoming / pdf_val


def de_nan(c: Vec3) -> Vec3:
    """Replace every NaN component of ``c`` with zero."""
    return Vec3(*(0.0 if math.isnan(x) else x for x in c))


def to_rgb8(c: Vec3) -> RGB:
    """Gamma-correct (gamma 2) a linear colour and scale it to 0..255."""
    r, g, b = (int(255.99 * math.sqrt(x)) for x in c)
    return r, g, b


def _default_shade(scene: Scene) -> Tuple[Shade, float]:
    if scene.lights is not None:
        lights = scene.lights
        return (lambda r, s: de_nan(color_with_lights(r, s.world, lights, 0))), 0.0
    return (lambda r, s: color(r, s.world, 0)), 0.5


def _scanlines(
    scene: Scene, width: int, height: int, samples: int, shade: Shade, jitter: float
) -> Iterator[Tuple[int, List[RGB]]]:
    """Yield (row index, pixels) from the top row down."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if samples <= 0:
        raise ValueError("samples per pixel must be positive")
    cam = scene.camera(width / height)
    for j in range(height - 1, -1, -1):
        row = []
        for i in range(width):
            total = Vec3()
            for _ in range(samples):
                u = (i + random_double() - jitter) / width
                v = (j + random_double() - jitter) / height
                total = total + shade(cam.get_ray(u, v), scene)
            row.append(to_rgb8(total / samples))
        yield j, row


def render(scene: Scene, width: int, height: int, samples: int) -> List[RGB]:
    """Render ``scene`` and return its pixels, top row first, left to right."""
    shade, jitter = _default_shade(scene)
    return [
        pixel
        for _, row in _scanlines(scene, width, height, samples, shade, jitter)
        for pixel in row
    ]


def write_ppm(stream: TextIO, width: int, height: int, pixels: Iterable[RGB]) -> None:
    """Write pixels as a plain-text (P3) PPM image."""
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in pixels:
        stream.write(f"{r} {g} {b}\n")


_PRESETS: Dict[str, Dict[Optional[str], Tuple[int, int, int]]] = {
    "weekend": {None: (1200, 800, 10)},
    "next_week": {
        None: (200, 200, 10),
        "MQ": (400, 400, 24),
        "HQ": (500, 500, 100),
        "SH": (500, 500, 10000),
    },
    "rest_of_life": {
        None: (500, 500, 10),
        "MQ": (400, 400, 24),
        "HQ": (500, 500, 1000),
        "SH": (1000, 1000, 500),
    },
}

_SCENES: Dict[str, Tuple[Callable[[str], Scene], str]] = {
    "weekend": (lambda image: weekend_scene(), "weekend"),
    "random": (lambda image: random_scene(), "next_week"),
    "two_spheres": (lambda image: two_spheres(), "next_week"),
    "two_perlin_spheres": (lambda image: two_perlin_spheres(), "next_week"),
    "globe": (globe, "next_week"),
    "simple_light": (lambda image: simple_light(), "next_week"),
    "cornell_box": (lambda image: cornell_box(), "next_week"),
    "cornell_box_blocks": (lambda image: cornell_box_blocks(), "next_week"),
    "cornell_balls": (lambda image: cornell_balls(), "next_week"),
    "cornell_smoke": (lambda image: cornell_smoke(), "next_week"),
    "cornell_final": (lambda image: cornell_final(), "next_week"),
    "final": (final_scene, "next_week"),
    "cornell_glass": (lambda image: cornell_glass(), "rest_of_life"),
}


def _shade_for(book: str, scene: Scene) -> Tuple[Shade, float]:
    if book == "weekend":
        return (lambda r, s: sky_color(r, s.world, 0)), 0.5
    return _default_shade(scene)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render a chosen scene to a PPM image."""
    parser = argparse.ArgumentParser(description="Render a scene as a PPM image.")
    parser.add_argument(
        "quality", nargs="?", default=None, help="MQ, HQ or SH for larger, finer renders"
    )
    parser.add_argument("--scene", choices=sorted(_SCENES), default="final")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--samples", type=int, default=None)
    parser.add_argument("--image", default=DEFAULT_EARTH_IMAGE, help="texture for the globe")
    parser.add_argument("--output", default=None, help="file to write; standard output if absent")
    args = parser.parse_args(argv)

    factory, book = _SCENES[args.scene]
    presets = _PRESETS[book]
    width, height, samples = presets.get(args.quality, presets[None])
    width = args.width if args.width is not None else width
    height = args.height if args.height is not None else height
    samples = args.samples if args.samples is not None else samples

    err = sys.stderr
    if book == "rest_of_life":
        err.write(f"Samples per point: {samples}\n")
    err.write(f"Total Scanlines: {height}\n")

    scene = factory(args.image)
    shade, jitter = _shade_for(book, scene)

    def pixels() -> Iterator[RGB]:
        for j, row in _scanlines(scene, width, height, samples, shade, jitter):
            err.write(f"\rScanlines remaining: {j} ")
            err.flush()
            yield from row

    target = (
        open(args.output, "w", encoding="ascii")
        if args.output
        else contextlib.nullcontext(sys.stdout)
    )
    with target as out:
        write_ppm(out, width, height, pixels())
    err.write("\nDone.\n")
    return 0