import math

import pytest

from weekendtracer.aabb import AABB
from weekendtracer.hittable import (
    FlipNormals,
    HitRecord,
    Hittable,
    HittableList,
    RotateY,
    Translate,
    get_sphere_uv,
)
from weekendtracer.vec3 import Ray, Vec3, seed


class _Fixed(Hittable):
    """Hits every ray at a set parameter t."""

    def __init__(self, t, box=None, pdf=0.0, direction=Vec3(1, 0, 0), normal=Vec3(0, 0, 1)):
        self.t = t
        self.box = box
        self.pdf = pdf
        self.direction = direction
        self.normal = normal

    def hit(self, ray, t_min, t_max):
        if t_min < self.t < t_max:
            return HitRecord(self.t, ray.point_at(self.t), self.normal)
        return None

    def bounding_box(self, t0, t1):
        return self.box

    def pdf_value(self, origin, direction):
        return self.pdf

    def random(self, origin):
        return self.direction


class _Plain(Hittable):
    def hit(self, ray, t_min, t_max):
        return None

    def bounding_box(self, t0, t1):
        return None


def _close(a, b):
    return tuple(a) == pytest.approx(tuple(b), abs=1e-9)


RAY = Ray(Vec3(1, 2, 3), Vec3(0.5, -1, 2))


def test_sphere_uv_on_equator():
    assert get_sphere_uv(Vec3(1, 0, 0)) == pytest.approx((0.5, 0.5))


def test_sphere_uv_poles_and_range():
    _, v_top = get_sphere_uv(Vec3(0, 1, 0))
    _, v_bottom = get_sphere_uv(Vec3(0, -1, 0))
    assert v_top == pytest.approx(1.0)
    assert v_bottom == pytest.approx(0.0)
    for p in (Vec3(0, 0, 1), Vec3(-1, 0, 0), Vec3(0.6, 0.0, -0.8)):
        u, v = get_sphere_uv(p)
        assert 0.0 <= u <= 1.0 and 0.0 <= v <= 1.0


def test_default_pdf_and_random():
    plain = _Plain()
    assert plain.pdf_value(Vec3(0, 0, 0), Vec3(0, 0, 1)) == 0.0
    assert plain.random(Vec3(0, 0, 0)) == Vec3(1, 0, 0)


def test_list_returns_closest_hit():
    world = HittableList([_Fixed(5.0), _Fixed(2.0), _Fixed(7.0)])
    rec = world.hit(RAY, 0.001, math.inf)
    assert rec.t == 2.0


def test_list_respects_interval():
    world = HittableList([_Fixed(5.0)])
    assert world.hit(RAY, 0.001, 3.0) is None
    assert world.hit(RAY, 6.0, 10.0) is None
    assert world.hit(RAY, 4.0, 6.0).t == 5.0


def test_empty_list():
    world = HittableList()
    assert world.hit(RAY, 0.0, math.inf) is None
    assert world.bounding_box(0, 1) is None
    assert world.pdf_value(Vec3(0, 0, 0), Vec3(1, 0, 0)) == 0.0
    with pytest.raises(IndexError):
        world.random(Vec3(0, 0, 0))


def test_list_bounding_box_surrounds_members():
    a = AABB(Vec3(0, 1, 2), Vec3(3, 4, 5))
    b = AABB(Vec3(-1, 2, 0), Vec3(2, 6, 4))
    box = HittableList([_Fixed(1.0, a), _Fixed(1.0, b)]).bounding_box(0, 1)
    assert box.minimum == Vec3(-1, 1, 0)
    assert box.maximum == Vec3(3, 6, 5)


def test_list_bounding_box_missing_member():
    a = AABB(Vec3(0, 0, 0), Vec3(1, 1, 1))
    assert HittableList([_Fixed(1.0, a), _Fixed(1.0)]).bounding_box(0, 1) is None


def test_list_pdf_value_averages():
    world = HittableList([_Fixed(1.0, pdf=2.0), _Fixed(1.0, pdf=2.0)])
    assert world.pdf_value(Vec3(0, 0, 0), Vec3(1, 0, 0)) == pytest.approx(2.0)


def test_list_random_picks_members():
    seed(11)
    a, b = Vec3(1, 0, 0), Vec3(0, 1, 0)
    world = HittableList([_Fixed(1.0, direction=a), _Fixed(1.0, direction=b)])
    picks = {world.random(Vec3(0, 0, 0)) for _ in range(200)}
    assert picks == {a, b}


def test_flip_normals():
    inner = _Fixed(3.0, normal=Vec3(0, 1, 0))
    rec = FlipNormals(inner).hit(RAY, 0.0, 10.0)
    assert rec.normal == Vec3(0, -1, 0)
    assert rec.t == 3.0
    assert FlipNormals(inner).hit(RAY, 4.0, 10.0) is None


def test_flip_normals_box_passthrough():
    box = AABB(Vec3(0, 0, 0), Vec3(1, 2, 3))
    assert FlipNormals(_Fixed(1.0, box)).bounding_box(0, 1) == box


def test_translate_box():
    box = AABB(Vec3(0, 0, 0), Vec3(1, 2, 3))
    offset = Vec3(10, -5, 2)
    moved = Translate(_Fixed(1.0, box), offset).bounding_box(0, 1)
    assert moved.minimum == box.minimum + offset
    assert moved.maximum == box.maximum + offset
    assert Translate(_Fixed(1.0), offset).bounding_box(0, 1) is None


def test_translate_hit_point_lies_on_original_ray():
    rec = Translate(_Fixed(4.0), Vec3(3, -2, 7)).hit(RAY, 0.0, 10.0)
    assert rec.t == 4.0
    assert _close(rec.p, RAY.point_at(4.0))


def test_rotate_hit_point_lies_on_original_ray():
    rec = RotateY(_Fixed(2.5), 37.0).hit(RAY, 0.0, 10.0)
    assert rec.t == 2.5
    assert _close(rec.p, RAY.point_at(2.5))


def test_rotate_round_trip_keeps_normal():
    inner = _Fixed(1.5, normal=Vec3(0.6, 0.0, 0.8))
    rec = RotateY(RotateY(inner, 30.0), -30.0).hit(RAY, 0.0, 10.0)
    assert rec.t == 1.5
    assert list(rec.normal) == pytest.approx([0.6, 0.0, 0.8], abs=1e-9)


def test_rotate_miss():
    assert RotateY(_Fixed(5.0), 45.0).hit(RAY, 0.0, 1.0) is None


def test_rotate_box_without_inner_box():
    assert RotateY(_Fixed(1.0), 20.0).bounding_box(0, 1) is None


def test_rotate_full_turn_box_unchanged():
    box = AABB(Vec3(0, 0, 0), Vec3(1, 2, 3))
    rotated = RotateY(_Fixed(1.0, box), 360.0).bounding_box(0, 1)
    assert list(rotated.minimum) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
    assert list(rotated.maximum) == pytest.approx([1.0, 2.0, 3.0], abs=1e-9)


def test_rotate_quarter_turn_swaps_extents():
    box = AABB(Vec3(0, 0, 0), Vec3(1, 2, 3))
    rotated = RotateY(_Fixed(1.0, box), 90.0).bounding_box(0, 1)
    extent = rotated.maximum - rotated.minimum
    original = box.maximum - box.minimum
    assert extent.x == pytest.approx(original.z)
    assert extent.z == pytest.approx(original.x)
    assert rotated.minimum.y == box.minimum.y
    assert rotated.maximum.y == box.maximum.y