import pytest

from weekendtracer.material import Isotropic
from weekendtracer.medium import ConstantMedium
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Ray, Vec3, seed

INF = float("inf")


def _unit_ball():
    return Sphere(Vec3(0, 0, 0), 1.0)


def _ray():
    return Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))


def test_bounding_box_is_boundary_box():
    ball = _unit_ball()
    medium = ConstantMedium(ball, 0.5, Vec3(1, 1, 1))
    assert medium.bounding_box(0, 1) == ball.bounding_box(0, 1)


def test_ray_missing_boundary_does_not_hit():
    medium = ConstantMedium(_unit_ball(), 1.0, Vec3(1, 1, 1))
    assert medium.hit(Ray(Vec3(5, 5, -5), Vec3(0, 0, 1)), 0.001, INF) is None


def test_dense_medium_scatters_at_entry():
    seed(2)
    color = Vec3(0.2, 0.4, 0.9)
    medium = ConstantMedium(_unit_ball(), 1e9, color)
    rec = medium.hit(_ray(), 0.001, INF)
    entry = _unit_ball().hit(_ray(), 0.001, INF).t
    assert rec.t == pytest.approx(entry, abs=1e-6)
    assert rec.normal == Vec3(1, 0, 0)
    assert isinstance(rec.material, Isotropic)
    assert rec.p == _ray().point_at(rec.t)


def test_thin_medium_lets_ray_through():
    seed(4)
    medium = ConstantMedium(_unit_ball(), 1e-12, Vec3(1, 1, 1))
    assert medium.hit(_ray(), 0.001, INF) is None


def test_range_ending_before_entry_misses():
    medium = ConstantMedium(_unit_ball(), 1e9, Vec3(1, 1, 1))
    assert medium.hit(_ray(), 0.001, 3.0) is None


def test_hits_fall_inside_boundary():
    ball = _unit_ball()
    medium = ConstantMedium(ball, 1.0, Vec3(1, 1, 1))
    entry = ball.hit(_ray(), 0.001, INF).t
    exit_t = ball.hit(_ray(), entry + 0.0001, INF).t
    hits = 0
    for s in range(100):
        seed(s)
        rec = medium.hit(_ray(), 0.001, INF)
        if rec is not None:
            hits += 1
            assert entry <= rec.t <= exit_t
    assert 0 < hits < 100


def test_ray_starting_inside_scatters_ahead():
    seed(9)
    medium = ConstantMedium(_unit_ball(), 1e9, Vec3(1, 1, 1))
    rec = medium.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, 1)), 0.001, INF)
    assert rec.t >= 0.001
    assert rec.t == pytest.approx(0.001, abs=1e-6)