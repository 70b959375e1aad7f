import math
import random

import pytest

from raytracer.color import Color
from raytracer.hittable import HitRecord
from raytracer.material import (
    Dielectric,
    DiffuseLight,
    Isotropic,
    Lambertian,
    Material,
    Metal,
    reflectance,
)
from raytracer.texture import SolidColor
from raytracer.vec3 import PI, Ray, Vec3, dot, reflect, unit_vector

UP = Vec3(0, 1, 0)
GREY = Color(0.5, 0.5, 0.5)


def _record(front_face=True):
    return HitRecord(p=Vec3(1, 2, 3), normal=UP, front_face=front_face, u=0.25, v=0.75)


def test_base_material_is_inert():
    m = Material()
    rec = _record()
    r = Ray(Vec3(), Vec3(0, -1, 0))
    assert m.scatter(r, rec) is None
    assert m.emitted(0, 0, Vec3()) == Color(0, 0, 0)
    assert m.scatter_pdf(r, rec, r) == 0.0


def test_lambertian_scatters_into_hemisphere():
    random.seed(2)
    m = Lambertian(GREY)
    rec = _record()
    r = Ray(Vec3(0, 5, 0), Vec3(0, -1, 0), 0.4)
    for _ in range(50):
        res = m.scatter(r, rec)
        d = res.scattered.direction
        assert d.length() == pytest.approx(1.0)
        assert dot(d, UP) >= 0
        assert res.attenuation == GREY
        assert res.scattered.origin == rec.p
        assert res.scattered.time == 0.4
        assert res.pdf == pytest.approx(dot(UP, d) / PI)


def test_lambertian_scatter_pdf_constant():
    m = Lambertian(SolidColor(GREY))
    r = Ray(Vec3(), UP)
    assert m.scatter_pdf(r, _record(), r) == pytest.approx(1 / (2 * PI))


def test_metal_mirror_reflection():
    m = Metal(GREY, 0.0)
    res = m.scatter(Ray(Vec3(-1, 1, 0), Vec3(1, -1, 0)), _record())
    expected = unit_vector(Vec3(1, 1, 0))
    assert res.scattered.direction.x == pytest.approx(expected.x)
    assert res.scattered.direction.y == pytest.approx(expected.y)
    assert res.attenuation == GREY


def test_metal_fuzz_is_capped():
    assert Metal(GREY, 5.0).fuzz == 1.0
    assert Metal(GREY, 0.3).fuzz == 0.3


def test_metal_absorbs_below_surface():
    m = Metal(GREY, 0.0)
    assert m.scatter(Ray(Vec3(), Vec3(0, 1, 0)), _record()) is None


def test_dielectric_straight_through():
    m = Dielectric(1.5)
    res = m.scatter(Ray(Vec3(0, 5, 0), Vec3(0, -1, 0)), _record(front_face=True))
    d = res.scattered.direction
    assert d.x == pytest.approx(0.0, abs=1e-12)
    assert d.y == pytest.approx(-1.0)
    assert res.attenuation == Color(1.0, 1.0, 1.0)


def test_dielectric_total_internal_reflection():
    m = Dielectric(1.5)
    incoming = Vec3(1, -0.1, 0)
    res = m.scatter(Ray(Vec3(), incoming), _record(front_face=False))
    expected = reflect(unit_vector(incoming), UP)
    d = res.scattered.direction
    assert d.y > 0
    assert d.x == pytest.approx(expected.x)
    assert d.y == pytest.approx(expected.y)


def test_reflectance_at_normal_incidence():
    assert reflectance(1.0, 1.5) == pytest.approx(0.04)


def test_reflectance_index_one_divides_by_zero():
    with pytest.raises(ZeroDivisionError):
        reflectance(0.5, 1.0)


def test_diffuse_light_emits_and_does_not_scatter():
    light = DiffuseLight(Color(15, 15, 15))
    assert light.emitted(0.1, 0.2, Vec3()) == Color(15, 15, 15)
    assert light.scatter(Ray(Vec3(), UP), _record()) is None


def test_isotropic_scatters_uniformly():
    random.seed(8)
    m = Isotropic(GREY)
    rec = _record()
    r = Ray(Vec3(), UP, 0.7)
    res = m.scatter(r, rec)
    assert res.scattered.direction.length() == pytest.approx(1.0)
    assert res.scattered.origin == rec.p
    assert res.scattered.time == 0.7
    assert res.attenuation == GREY
    assert res.pdf == pytest.approx(1 / (4 * PI))
    assert m.scatter_pdf(r, rec, res.scattered) == pytest.approx(1 / (4 * math.pi), rel=1e-6)