"""Bounding volume hierarchies."""

from __future__ import annotations

from typing import Iterable, Optional

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.interval import Interval
from raytracer.vec3 import Ray


def _axis_min(obj: Hittable, axis: int) -> float:
    return obj.bounding_box().axis_interval(axis).min


def box_compare(a: Hittable, b: Hittable, axis: int) -> bool:
    """True when ``a``'s box starts before ``b``'s along ``axis``."""
    return _axis_min(a, axis) < _axis_min(b, axis)


class BVHNode(Hittable):
    """A binary tree of boxes, split along the longest axis of each node's box."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        items = list(objects)
        if not items:
            raise ValueError("a BVH needs at least one object")

        bbox = AABB.EMPTY
        for obj in items:
            bbox = bbox.union(obj.bounding_box())
        self._bbox = bbox
        axis = bbox.longest_axis()

        if len(items) == 1:
            self.left = self.right = items[0]
        elif len(items) == 2:
            self.left, self.right = items
        else:
            items.sort(key=lambda obj: _axis_min(obj, axis))
            mid = len(items) // 2
            self.left = BVHNode(items[:mid])
            self.right = BVHNode(items[mid:])

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self._bbox.hit(r, ray_t):
            return None
        left = self.left.hit(r, ray_t)
        limit = left.t if left is not None else ray_t.max
        right = self.right.hit(r, Interval(ray_t.min, limit))
        return right if right is not None else left

    def bounding_box(self) -> AABB:
        return self._bbox