"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from typing import ClassVar

from raytracer.interval import Interval
from raytracer.vec3 import Ray, Vec3


class AABB:
    """An axis-aligned box; no side is thinner than ``DELTA`` when built from intervals."""

    DELTA: ClassVar[float] = 0.00001
    EMPTY: ClassVar[AABB]
    UNIVERSE: ClassVar[AABB]

    __slots__ = ("x", "y", "z")

    def __init__(
        self,
        x: Interval = Interval.EMPTY,
        y: Interval = Interval.EMPTY,
        z: Interval = Interval.EMPTY,
    ) -> None:
        self.x = self._pad(x)
        self.y = self._pad(y)
        self.z = self._pad(z)

    @classmethod
    def _pad(cls, iv: Interval) -> Interval:
        return iv.expand(cls.DELTA) if iv.size() < cls.DELTA else iv

    @classmethod
    def _unpadded(cls, x: Interval, y: Interval, z: Interval) -> AABB:
        box = cls.__new__(cls)
        box.x, box.y, box.z = x, y, z
        return box

    def union(self, other: AABB) -> AABB:
        """The smallest box enclosing both boxes."""
        return AABB._unpadded(self.x.union(other.x), self.y.union(other.y), self.z.union(other.z))

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def longest_axis(self) -> int:
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def hit(self, r: Ray, ray_t: Interval) -> bool:
        t_min, t_max = ray_t.min, ray_t.max
        for axis in range(3):
            ax = self.axis_interval(axis)
            d = r.direction[axis]
            adinv = math.copysign(math.inf, d) if d == 0 else 1.0 / d
            origin = r.origin[axis]
            t0 = (ax.min - origin) * adinv
            t1 = (ax.max - origin) * adinv
            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0
            if t_max <= t_min:
                return False
        return True

    def __add__(self, offset: Vec3) -> AABB:
        if not isinstance(offset, Vec3):
            return NotImplemented
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __radd__(self, offset: Vec3) -> AABB:
        return self.__add__(offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"AABB(x={self.x!r}, y={self.y!r}, z={self.z!r})"


def box_from_points(a: Vec3, b: Vec3) -> AABB:
    """The box with ``a`` and ``b`` as opposite corners."""
    return AABB(
        *(Interval(p, q) if p <= q else Interval(q, p) for p, q in zip(a, b))
    )


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)