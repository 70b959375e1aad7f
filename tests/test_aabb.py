import math

from raytracer.aabb import AABB, box_from_points
from raytracer.interval import Interval
from raytracer.vec3 import Ray, Vec3

P = Vec3(0, 0, 0)
Q = Vec3(2, 3, 4)
POSITIVE = Interval(0.0, math.inf)


def test_box_from_points_is_order_independent():
    assert box_from_points(P, Q) == box_from_points(Q, P)
    box = box_from_points(Q, P)
    assert box.x == Interval(P.x, Q.x)
    assert box.z == Interval(P.z, Q.z)


def test_flat_box_is_padded():
    box = box_from_points(Vec3(0, 1, 0), Vec3(2, 1, 2))
    assert box.y.size() >= AABB.DELTA * 0.999
    assert box.y.contains(1.0)


def test_axis_interval_mapping():
    box = box_from_points(P, Q)
    assert box.axis_interval(0) == box.x
    assert box.axis_interval(1) == box.y
    assert box.axis_interval(2) == box.z
    assert box.axis_interval(7) == box.x


def test_longest_axis():
    assert box_from_points(P, Vec3(5, 1, 1)).longest_axis() == 0
    assert box_from_points(P, Vec3(1, 5, 1)).longest_axis() == 1
    assert box_from_points(P, Q).longest_axis() == 2


def test_miss():
    box = box_from_points(P, Q)
    r = Ray(Vec3(-5, 10, 0), Vec3(1, 0, 0))
    assert not box.hit(r, POSITIVE)


def test_axis_aligned_ray_hits():
    box = box_from_points(P, Q)
    r = Ray(Vec3(1, 1, -10), Vec3(0, 0, 1))
    assert box.hit(r, POSITIVE)


def test_ray_pointing_away_misses():
    box = box_from_points(P, Q)
    r = Ray(Vec3(1, 1, -10), Vec3(0, 0, -1))
    assert not box.hit(r, POSITIVE)


def test_hit_respects_interval():
    box = box_from_points(P, Q)
    r = Ray(Vec3(1, 1, -10), Vec3(0, 0, 1))
    assert not box.hit(r, Interval(0.0, 5.0))


def test_union_encloses_both():
    a = box_from_points(P, Vec3(1, 1, 1))
    b = box_from_points(Vec3(2, 2, 2), Q)
    u = a.union(b)
    assert u == b.union(a)
    for box in (a, b):
        for axis in range(3):
            iv = box.axis_interval(axis)
            assert u.axis_interval(axis).contains(iv.min)
            assert u.axis_interval(axis).contains(iv.max)


def test_empty_union_is_identity():
    box = box_from_points(P, Q)
    assert AABB.EMPTY.union(box) == box
    assert AABB() == AABB.EMPTY


def test_offset_moves_box():
    box = box_from_points(P, Q)
    offset = Vec3(1, -2, 3)
    moved = box + offset
    assert moved == offset + box
    assert moved == box_from_points(P + offset, Q + offset)


def test_universe_is_always_hit():
    r = Ray(Vec3(100, 100, 100), Vec3(1, 2, 3))
    assert AABB.UNIVERSE.hit(r, POSITIVE)