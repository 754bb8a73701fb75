import math

import pytest

from weekendtracer.hittable import HitRecord
from weekendtracer.material import (
    Dielectric,
    DiffuseLight,
    Isotropic,
    Lambertian,
    Material,
    Metal,
    reflect,
    refract,
    schlick,
)
from weekendtracer.pdf import CosinePdf
from weekendtracer.texture import ConstantTexture
from weekendtracer.vec3 import Ray, Vec3, seed

UP = Vec3(0, 1, 0)


def _record(normal=UP, p=Vec3(0, 0, 0)):
    return HitRecord(t=1.0, p=p, normal=normal)


def test_reflect_mirrors_about_normal():
    assert reflect(Vec3(1, -1, 0), UP) == Vec3(1, 1, 0)


def test_refract_with_equal_indices_goes_straight():
    v = Vec3(1, -2, 0.5)
    out = refract(v, UP, 1.0)
    expected = v.unit()
    assert out.x == pytest.approx(expected.x)
    assert out.y == pytest.approx(expected.y)
    assert out.z == pytest.approx(expected.z)


def test_refract_total_internal_reflection():
    assert refract(Vec3(1, -0.01, 0), UP, 1.5) is None


def test_schlick_grazing_and_matched_index():
    assert schlick(0.0, 1.5) == pytest.approx(1.0)
    assert schlick(1.0, 1.0) == pytest.approx(0.0)


def test_base_material_absorbs_and_is_dark():
    m = Material()
    ray = Ray(Vec3(0, 1, 0), Vec3(0, -1, 0))
    assert m.scatter(ray, _record()) is None
    assert m.emitted(ray, _record()) == Vec3(0, 0, 0)
    assert m.scattering_pdf(ray, _record(), ray) == 0.0


def test_lambertian_scatter():
    seed(1)
    albedo = Vec3(0.5, 0.25, 0.125)
    rec = _record(p=Vec3(1, 2, 3))
    srec = Lambertian(albedo).scatter(Ray(Vec3(1, 5, 3), Vec3(0, -1, 0), 0.5), rec)
    assert srec.attenuation == albedo
    assert srec.is_specular is False
    assert isinstance(srec.pdf, CosinePdf)
    assert srec.ray.origin == rec.p
    assert srec.ray.time == 0.5
    assert (srec.ray.direction - UP).length() < 1.0


def test_lambertian_accepts_texture():
    color = Vec3(0.1, 0.2, 0.3)
    srec = Lambertian(ConstantTexture(color)).scatter(Ray(UP, -UP), _record())
    assert srec.attenuation == color


def test_lambertian_scattering_pdf():
    mat = Lambertian(Vec3(1, 1, 1))
    rec = _record()
    ray = Ray(UP, -UP)
    assert mat.scattering_pdf(ray, rec, Ray(rec.p, Vec3(0, 3, 0))) == pytest.approx(1 / math.pi)
    assert mat.scattering_pdf(ray, rec, Ray(rec.p, Vec3(0, -1, 0))) == 0.0


def test_metal_fuzz_is_capped():
    assert Metal(Vec3(1, 1, 1), 5.0).fuzz == 1.0
    assert Metal(Vec3(1, 1, 1), 0.3).fuzz == 0.3


def test_metal_mirror_reflection():
    albedo = Vec3(0.7, 0.6, 0.5)
    direction = Vec3(1, -1, 0)
    srec = Metal(albedo, 0.0).scatter(Ray(Vec3(-1, 1, 0), direction), _record())
    expected = reflect(direction.unit(), UP)
    assert srec.is_specular is True
    assert srec.attenuation == albedo
    assert srec.ray.direction.x == pytest.approx(expected.x)
    assert srec.ray.direction.y == pytest.approx(expected.y)


def test_metal_absorbs_reflection_into_surface():
    assert Metal(Vec3(1, 1, 1), 0.0).scatter(Ray(Vec3(0, -1, 0), UP), _record()) is None


def test_dielectric_head_on_reflects_or_refracts():
    mat = Dielectric(1.5)
    incoming = Ray(Vec3(0, 1, 0), Vec3(0, -1, 0))
    seen = set()
    for s in range(60):
        seed(s)
        srec = mat.scatter(incoming, _record())
        assert srec.attenuation == Vec3(1, 1, 1)
        assert srec.is_specular is True
        d = srec.ray.direction
        assert d.x == pytest.approx(0.0) and d.z == pytest.approx(0.0)
        assert abs(d.y) == pytest.approx(1.0)
        seen.add(d.y > 0)
    assert seen == {True, False}


def test_dielectric_total_internal_reflection_always_reflects():
    mat = Dielectric(1.5)
    direction = Vec3(1, 0.01, 0)
    expected = reflect(direction, UP)
    for s in range(10):
        seed(s)
        srec = mat.scatter(Ray(Vec3(0, -1, 0), direction), _record())
        assert srec.ray.direction == expected


def test_diffuse_light_emits_and_absorbs():
    color = Vec3(4, 4, 4)
    light = DiffuseLight(color)
    ray = Ray(Vec3(0, -1, 0), UP)
    assert light.scatter(ray, _record()) is None
    assert light.emitted(ray, _record()) == color


def test_one_sided_light_emits_only_in_front():
    color = Vec3(15, 15, 15)
    light = DiffuseLight(ConstantTexture(color), one_sided=True)
    rec = _record()
    assert light.emitted(Ray(Vec3(0, 1, 0), Vec3(0, -1, 0)), rec) == color
    assert light.emitted(Ray(Vec3(0, -1, 0), Vec3(0, 1, 0)), rec) == Vec3(0, 0, 0)


def test_isotropic_scatter():
    seed(5)
    color = Vec3(0.9, 0.9, 0.9)
    rec = _record(p=Vec3(2, 2, 2))
    srec = Isotropic(color).scatter(Ray(Vec3(0, 0, 0), Vec3(1, 1, 1)), rec)
    assert srec.attenuation == color
    assert srec.ray.origin == rec.p
    assert srec.ray.direction.length() < 1.0