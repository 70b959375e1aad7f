import math

import pytest

from raytracer.interval import Interval


def test_default_is_empty():
    assert Interval() == Interval.EMPTY
    assert Interval.EMPTY.size() == -math.inf
    assert not Interval.EMPTY.contains(0.0)


def test_universe_contains_everything():
    assert Interval.UNIVERSE.contains(1e300)
    assert Interval.UNIVERSE.contains(-1e300)
    assert Interval.UNIVERSE.size() == math.inf


def test_size():
    iv = Interval(2.0, 7.5)
    assert iv.size() == 5.5


def test_contains_includes_endpoints():
    iv = Interval(1.0, 3.0)
    assert iv.contains(1.0)
    assert iv.contains(3.0)
    assert iv.contains(2.0)
    assert not iv.contains(3.5)


def test_surrounds_excludes_endpoints():
    iv = Interval(1.0, 3.0)
    assert not iv.surrounds(1.0)
    assert not iv.surrounds(3.0)
    assert iv.surrounds(2.0)


@pytest.mark.parametrize("x", [-5.0, 0.5, 10.0])
def test_clamp_stays_inside(x):
    iv = Interval(0.0, 1.0)
    c = iv.clamp(x)
    assert iv.contains(c)
    if iv.contains(x):
        assert c == x


def test_clamp_ends():
    iv = Interval(0.0, 1.0)
    assert iv.clamp(-3.0) == 0.0
    assert iv.clamp(4.0) == 1.0


def test_expand_grows_by_delta():
    iv = Interval(1.0, 2.0)
    grown = iv.expand(0.5)
    assert grown.size() == pytest.approx(iv.size() + 0.5)
    assert grown.contains(iv.min) and grown.contains(iv.max)
    assert (grown.min + grown.max) / 2 == pytest.approx((iv.min + iv.max) / 2)


def test_union_encloses_both():
    a = Interval(0.0, 2.0)
    b = Interval(1.0, 5.0)
    u = a.union(b)
    assert u == b.union(a)
    assert u.min == a.min and u.max == b.max


def test_union_with_empty_is_identity():
    a = Interval(-1.0, 4.0)
    assert a.union(Interval.EMPTY) == a


def test_displacement():
    iv = Interval(1.0, 3.0)
    moved = iv + 2.0
    assert moved == Interval(3.0, 5.0)
    assert 2.0 + iv == moved
    assert moved + -2.0 == iv


def test_frozen():
    iv = Interval(0.0, 1.0)
    with pytest.raises(AttributeError):
        iv.min = 5.0
    assert iv.min == 0.0