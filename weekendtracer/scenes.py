"""Ready-made worlds, each with the camera placement it was composed for."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import List, Optional, Union

from .aarect import Box, XYRect, XZRect, YZRect
from .bvh import BVHNode
from .camera import Camera
from .hittable import FlipNormals, Hittable, HittableList, RotateY, Translate
from .material import Dielectric, DiffuseLight, Lambertian, Material, Metal
from .medium import ConstantMedium
from .sphere import MovingSphere, Sphere
from .texture import CheckerTexture, ConstantTexture, ImageTexture, NoiseTexture
from .vec3 import Vec3, random_double

PathType = Union[str, PathLike]

DEFAULT_EARTH_IMAGE = "assets/earthmap.jpg"


@dataclass
class Scene:
    """A world to render, how to look at it and, optionally, shapes to sample as lights."""

    world: Hittable
    lookfrom: Vec3
    lookat: Vec3
    vfov: float
    aperture: float = 0.0
    focus_dist: float = 10.0
    vup: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))
    time0: float = 0.0
    time1: float = 0.0
    lights: Optional[Hittable] = None

    def camera(self, aspect: float) -> Camera:
        """Build the scene's camera for an image of the given width/height ratio."""
        return Camera(
            self.lookfrom,
            self.lookat,
            self.vup,
            self.vfov,
            aspect,
            self.aperture,
            self.focus_dist,
            self.time0,
            self.time1,
        )


def _outdoor(world: Hittable) -> Scene:
    return Scene(world, Vec3(13, 2, 3), Vec3(0, 0, 0), 20.0, time0=0.0, time1=1.0)


def _cornell(world: Hittable) -> Scene:
    return Scene(
        world, Vec3(278, 278, -800), Vec3(278, 278, 0), 40.0, time0=0.0, time1=1.0
    )


def _solid(r: float, g: float, b: float) -> Lambertian:
    return Lambertian(ConstantTexture(Vec3(r, g, b)))


def _random_product_color() -> Vec3:
    return Vec3(
        random_double() * random_double(),
        random_double() * random_double(),
        random_double() * random_double(),
    )


def _random_metal() -> Metal:
    albedo = Vec3(
        0.5 * (1 + random_double()),
        0.5 * (1 + random_double()),
        0.5 * (1 + random_double()),
    )
    return Metal(albedo, 0.5 * random_double())


def _cornell_walls(
    red: Material, white: Material, green: Material
) -> List[Hittable]:
    """Left, right, ceiling, floor and back walls of a 555-unit room, in that order."""
    return [
        FlipNormals(YZRect(0, 555, 0, 555, 555, green)),
        YZRect(0, 555, 0, 555, 0, red),
    ], [
        FlipNormals(XZRect(0, 555, 0, 555, 555, white)),
        XZRect(0, 555, 0, 555, 0, white),
        FlipNormals(XYRect(0, 555, 0, 555, 555, white)),
    ]


def _cornell_room(light: Hittable) -> tuple:
    red = _solid(0.65, 0.05, 0.05)
    white = _solid(0.73, 0.73, 0.73)
    green = _solid(0.12, 0.45, 0.15)
    sides, rest = _cornell_walls(red, white, green)
    return sides + [light] + rest, white


def weekend_scene() -> Scene:
    """Many small spheres and bubbles around three large ones on a grey ground."""
    objects: List[Hittable] = [
        Sphere(Vec3(0, -1000, 0), 1000, Lambertian(Vec3(0.5, 0.5, 0.5)))
    ]
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double()
            center = Vec3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Vec3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.65:
                objects.append(Sphere(center, 0.2, Lambertian(_random_product_color())))
            elif choose_mat < 0.80:
                objects.append(Sphere(center, 0.2, _random_metal()))
            else:
                objects.append(Sphere(center, 0.22, Dielectric(1.5)))
                objects.append(Sphere(center, -0.20, Dielectric(1.5)))
    objects.append(Sphere(Vec3(0, 1, 0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vec3(-4, 1, 0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vec3(4, 1, 0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return Scene(
        HittableList(objects), Vec3(13, 2, 3), Vec3(0, 0, 0), 20.0,
        aperture=0.1, focus_dist=10.0,
    )


def random_scene() -> Scene:
    """Bouncing diffuse spheres, metal and glass on a checkered ground, in a BVH."""
    checkered = CheckerTexture(
        ConstantTexture(Vec3(0.2, 0.3, 0.4)), ConstantTexture(Vec3(0.9, 0.9, 0.9))
    )
    objects: List[Hittable] = [Sphere(Vec3(0, -1000, 0), 1000, Lambertian(checkered))]
    for a in range(-10, 10):
        for b in range(-10, 10):
            choose_mat = random_double()
            center = Vec3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - Vec3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                end = center + Vec3(0, 0.5 * random_double(), 0)
                albedo = ConstantTexture(_random_product_color())
                objects.append(
                    MovingSphere(center, end, 0.0, 1.0, 0.2, Lambertian(albedo))
                )
            elif choose_mat < 0.95:
                objects.append(Sphere(center, 0.2, _random_metal()))
            else:
                objects.append(Sphere(center, 0.2, Dielectric(1.5)))
    objects.append(Sphere(Vec3(0, 1, 0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vec3(-4, 1, 0), 1.0, _solid(0.4, 0.2, 0.1)))
    objects.append(Sphere(Vec3(4, 1, 0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return _outdoor(BVHNode(objects, 0.0, 1.0))


def two_spheres() -> Scene:
    """Two large checkered spheres, one above the other."""
    checker = CheckerTexture(
        ConstantTexture(Vec3(0.2, 0.3, 0.4)), ConstantTexture(Vec3(0.9, 0.9, 0.9))
    )
    return _outdoor(
        HittableList(
            [
                Sphere(Vec3(0, -10, 0), 10, Lambertian(checker)),
                Sphere(Vec3(0, 10, 0), 10, Lambertian(checker)),
            ]
        )
    )


def two_perlin_spheres() -> Scene:
    """A marble sphere resting on a marble ground."""
    pertext = NoiseTexture(4.0)
    return _outdoor(
        HittableList(
            [
                Sphere(Vec3(0, -1000, 0), 1000, Lambertian(pertext)),
                Sphere(Vec3(0, 2, 0), 2, Lambertian(pertext)),
            ]
        )
    )


def globe(image_path: PathType = DEFAULT_EARTH_IMAGE) -> Scene:
    """A single sphere wrapped in the image at ``image_path``."""
    material = Lambertian(ImageTexture.from_file(image_path))
    return _outdoor(Sphere(Vec3(0, 0, 0), 2, material))


def simple_light() -> Scene:
    """Marble spheres lit by a glowing sphere and a glowing rectangle."""
    pertext = NoiseTexture(4)
    return _outdoor(
        HittableList(
            [
                Sphere(Vec3(0, -1000, 0), 1000, Lambertian(pertext)),
                Sphere(Vec3(0, 2, 0), 2, Lambertian(pertext)),
                Sphere(Vec3(0, 7, 0), 2, DiffuseLight(ConstantTexture(Vec3(4, 4, 4)))),
                XYRect(3, 5, 1, 3, -2, DiffuseLight(ConstantTexture(Vec3(4, 4, 4)))),
            ]
        )
    )


def cornell_box() -> Scene:
    """The empty Cornell room with a small bright ceiling light."""
    light = DiffuseLight(ConstantTexture(Vec3(15, 15, 15)))
    objects, _ = _cornell_room(XZRect(213, 343, 227, 332, 554, light))
    return _cornell(HittableList(objects))


def cornell_box_blocks() -> Scene:
    """The Cornell room with a short and a tall block, each turned about y."""
    light = DiffuseLight(ConstantTexture(Vec3(15, 15, 15)))
    objects, white = _cornell_room(XZRect(213, 343, 227, 332, 554, light))
    objects.append(
        Translate(RotateY(Box(Vec3(0, 0, 0), Vec3(165, 165, 165), white), -18), Vec3(130, 0, 65))
    )
    objects.append(
        Translate(RotateY(Box(Vec3(0, 0, 0), Vec3(165, 330, 165), white), 15), Vec3(265, 0, 295))
    )
    return _cornell(HittableList(objects))


def cornell_balls() -> Scene:
    """The Cornell room with a fog-filled glass ball and a tall block."""
    light = DiffuseLight(ConstantTexture(Vec3(5, 5, 5)))
    objects, white = _cornell_room(XZRect(113, 443, 127, 432, 554, light))
    boundary = Sphere(Vec3(160, 100, 145), 100, Dielectric(1.5))
    objects.append(boundary)
    objects.append(ConstantMedium(boundary, 0.1, ConstantTexture(Vec3(1.0, 1.0, 1.0))))
    objects.append(
        Translate(RotateY(Box(Vec3(0, 0, 0), Vec3(165, 330, 165), white), 15), Vec3(265, 0, 295))
    )
    return _cornell(HittableList(objects))


def cornell_smoke() -> Scene:
    """The Cornell room with a block of white smoke and a block of dark smoke."""
    light = DiffuseLight(ConstantTexture(Vec3(7, 7, 7)))
    objects, white = _cornell_room(XZRect(113, 443, 127, 432, 554, light))
    b1 = Translate(
        RotateY(Box(Vec3(0, 0, 0), Vec3(165, 165, 165), white), -18), Vec3(130, 0, 65)
    )
    b2 = Translate(
        RotateY(Box(Vec3(0, 0, 0), Vec3(165, 330, 165), white), 15), Vec3(265, 0, 295)
    )
    objects.append(ConstantMedium(b1, 0.01, ConstantTexture(Vec3(1.0, 1.0, 1.0))))
    objects.append(ConstantMedium(b2, 0.01, ConstantTexture(Vec3(0.0, 0.0, 0.0))))
    return _cornell(HittableList(objects))


def cornell_final() -> Scene:
    """The Cornell room with a glass block holding a light mist."""
    light = DiffuseLight(ConstantTexture(Vec3(7, 7, 7)))
    objects, _ = _cornell_room(XZRect(123, 423, 147, 412, 554, light))
    boundary = Translate(
        RotateY(Box(Vec3(0, 0, 0), Vec3(165, 165, 165), Dielectric(1.5)), -18),
        Vec3(130, 0, 65),
    )
    objects.append(boundary)
    objects.append(ConstantMedium(boundary, 0.2, ConstantTexture(Vec3(0.9, 0.9, 0.9))))
    return _cornell(HittableList(objects))


def final_scene(image_path: PathType = DEFAULT_EARTH_IMAGE) -> Scene:
    """The closing showcase: a field of boxes, media, glass, metal and a textured globe."""
    white = _solid(0.73, 0.73, 0.73)
    ground = _solid(0.48, 0.83, 0.53)
    ball_moving = _solid(0.83, 0.15, 0.3)

    boxes: List[Hittable] = []
    nb = 23
    w = 100.0
    for i in range(nb):
        for j in range(nb):
            x0 = -1000 + i * w
            z0 = -1000 + j * w
            y1 = 100 * (random_double() + 0.01)
            boxes.append(Box(Vec3(x0, 0, z0), Vec3(x0 + w, y1, z0 + w), ground))

    objects: List[Hittable] = [BVHNode(boxes, 0, 1)]
    light = DiffuseLight(ConstantTexture(Vec3(7, 7, 7)))
    objects.append(XZRect(123, 423, 147, 412, 554, light))
    center = Vec3(400, 400, 200)
    objects.append(MovingSphere(center, center + Vec3(30, 0, 0), 0, 1, 50, ball_moving))
    objects.append(Sphere(Vec3(260, 150, 45), 50, Dielectric(1.5)))
    objects.append(Sphere(Vec3(0, 150, 145), 50, Metal(Vec3(0.8, 0.8, 0.9), 10.0)))

    glassy = Sphere(Vec3(360, 150, 145), 70, Dielectric(1.5))
    objects.append(glassy)
    objects.append(
        ConstantMedium(glassy, 0.20, ConstantTexture(Vec3(254 / 255.0, 254 / 255.0, 56 / 255.0)))
    )
    boundary = Sphere(Vec3(0, 0, 0), 5000, Dielectric(1.5))
    objects.append(ConstantMedium(boundary, 0.00008, ConstantTexture(Vec3(0.95, 0.95, 0.95))))

    earth = Lambertian(ImageTexture.from_file(image_path))
    objects.append(Sphere(Vec3(400, 200, 400), 100, earth))
    objects.append(Sphere(Vec3(220, 280, 300), 80, Dielectric(1.5)))
    objects.append(Sphere(Vec3(220, 280, 300), -(80 - 0.005), Dielectric(1.5)))

    cluster = [
        Sphere(
            Vec3(165 * random_double(), 165 * random_double(), 165 * random_double()),
            10,
            white,
        )
        for _ in range(800)
    ]
    objects.append(
        Translate(RotateY(BVHNode(cluster, 0.0, 1.0), 15), Vec3(-100, 270, 395))
    )
    return Scene(
        HittableList(objects), Vec3(478, 278, -600), Vec3(290, 278, 0), 40.0,
        time0=0.0, time1=1.0,
    )


def cornell_glass() -> Scene:
    """The Cornell room with a glass sphere and an aluminium block, sampling the light and sphere."""
    light = DiffuseLight(ConstantTexture(Vec3(15, 15, 15)), one_sided=True)
    objects, _ = _cornell_room(FlipNormals(XZRect(213, 343, 227, 332, 554, light)))
    objects.append(Sphere(Vec3(190, 90, 190), 90, Dielectric(1.5)))
    aluminum = Metal(Vec3(0.91, 0.92, 0.92), 0.008)
    objects.append(
        Translate(RotateY(Box(Vec3(0, 0, 0), Vec3(165, 330, 165), aluminum), 23), Vec3(265, 0, 295))
    )
    lights = HittableList(
        [
            XZRect(213, 343, 227, 332, 554, None),
            Sphere(Vec3(190, 90, 190), 90, None),
        ]
    )
    return Scene(
        HittableList(objects), Vec3(278, 278, -800), Vec3(278, 278, 0), 40.0,
        time0=0.0, time1=1.0, lights=lights,
    )