import math

import pytest

from weekendtracer.vec3 import (
    Ray,
    Vec3,
    random_double,
    random_in_unit_disk,
    random_in_unit_sphere,
    seed,
)


def close(a, b):
    return list(a) == pytest.approx(list(b))


A = Vec3(1.5, -2.0, 3.25)
B = Vec3(-0.5, 4.0, 2.0)


def test_add_then_subtract_round_trips():
    result = (A + B) - B
    assert list(result) == pytest.approx([1.5, -2.0, 3.25])


def test_negation_cancels():
    assert A + (-A) == Vec3()


def test_scalar_multiplication_commutes_and_matches_addition():
    assert 2 * A == A * 2
    assert close(A * 2, A + A)


def test_scalar_division_inverts_multiplication():
    result = (A * 4) / 4
    assert list(result) == pytest.approx([1.5, -2.0, 3.25])


def test_elementwise_division_inverts_multiplication():
    result = (A * B) / B
    assert list(result) == pytest.approx([1.5, -2.0, 3.25])


def test_length_matches_squared_length():
    assert A.length() ** 2 == pytest.approx(A.squared_length())


def test_dot_with_self_is_squared_length():
    assert A.dot(A) == pytest.approx(A.squared_length())


def test_cross_is_orthogonal_to_inputs():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-9)


def test_cross_of_x_and_y_is_z():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_unit_has_length_one_and_keeps_direction():
    u = A.unit()
    assert math.isclose(u.length(), 1.0)
    assert close(u * A.length(), A)


def test_unit_of_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().unit()


def test_indexing_and_iteration_agree():
    assert list(A) == [A.x, A.y, A.z]
    assert [A[0], A[1], A[2]] == [A.r, A.g, A.b]


def test_str_uses_space_separated_components():
    assert str(Vec3(1, 2, 3.5)) == "1 2 3.5"


def test_ray_point_at():
    ray = Ray(A, B)
    assert ray.point_at(0.0) == A
    assert close(ray.point_at(1.0), A + B)
    assert ray.time == 0.0


def test_seed_makes_draws_repeat():
    seed(42)
    first = [random_double() for _ in range(10)]
    seed(42)
    second = [random_double() for _ in range(10)]
    assert first == second
    assert all(0.0 <= x < 1.0 for x in first)


def test_random_in_unit_sphere_stays_inside():
    assert all(random_in_unit_sphere().squared_length() < 1.0 for _ in range(500))


def test_random_in_unit_disk_stays_in_plane():
    points = [random_in_unit_disk() for _ in range(500)]
    assert all(p.z == 0.0 and p.dot(p) < 1.0 for p in points)