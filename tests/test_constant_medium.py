from unittest.mock import patch

import pytest

from raytracer.constant_medium import ConstantMedium
from raytracer.interval import Interval
from raytracer.material import Isotropic
from raytracer.sphere import Sphere
from raytracer.vec3 import Ray, Vec3

INF = float("inf")


@pytest.fixture
def boundary():
    return Sphere(Vec3(0, 0, 0), 1.0, None)


@patch("random.random", return_value=0.5)
def test_dense_medium_scatters_inside(_rand, boundary):
    medium = ConstantMedium(boundary, 1.0, Vec3(1, 1, 1))
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    rec = medium.hit(r, Interval(0.001, INF))
    entry = boundary.hit(r, Interval(0.001, INF)).t
    assert entry < rec.t < entry + 2.0
    assert rec.p.z == pytest.approx(r.at(rec.t).z)
    assert rec.front_face is True
    assert rec.normal.x == 1.0
    assert isinstance(rec.mat, Isotropic)


@patch("random.random", return_value=0.5)
def test_thin_medium_lets_ray_through(_rand, boundary):
    medium = ConstantMedium(boundary, 0.1, Vec3(1, 1, 1))
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    assert medium.hit(r, Interval(0.001, INF)) is None


@patch("random.random", return_value=0.0)
def test_zero_sample_never_scatters(_rand, boundary):
    medium = ConstantMedium(boundary, 100.0, Vec3(1, 1, 1))
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    assert medium.hit(r, Interval(0.001, INF)) is None


def test_ray_missing_boundary(boundary):
    medium = ConstantMedium(boundary, 1.0, Vec3(1, 1, 1))
    r = Ray(Vec3(0, 5, -5), Vec3(0, 0, 1))
    assert medium.hit(r, Interval(0.001, INF)) is None


def test_interval_ending_before_boundary(boundary):
    medium = ConstantMedium(boundary, 1000.0, Vec3(1, 1, 1))
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    assert medium.hit(r, Interval(0.001, 3.0)) is None


@patch("random.random", return_value=0.9)
def test_ray_starting_inside(_rand, boundary):
    medium = ConstantMedium(boundary, 1.0, Vec3(1, 1, 1))
    r = Ray(Vec3(0, 0, 0), Vec3(0, 0, 1))
    rec = medium.hit(r, Interval(0.001, INF))
    assert 0.001 <= rec.t <= 1.0


def test_bounding_box_is_boundary_box(boundary):
    medium = ConstantMedium(boundary, 1.0, Vec3(1, 1, 1))
    assert medium.bounding_box() == boundary.bounding_box()