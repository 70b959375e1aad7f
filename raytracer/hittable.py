"""Ray-intersectable objects, hit records, instancing transforms and object lists."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional

from raytracer.aabb import AABB, box_from_points
from raytracer.interval import Interval
from raytracer.vec3 import INFINITY, Ray, Vec3, degrees_to_radians, dot

if TYPE_CHECKING:
    from raytracer.material import Material


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    mat: Optional[Material] = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Store a normal that always opposes the ray; ``outward_normal`` must be unit length."""
        self.front_face = dot(r.direction, outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Return the hit within ``ray_t``, or None when the ray misses."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """Return a box enclosing the object."""


class Translate(Hittable):
    """An object displaced by a fixed offset."""

    def __init__(self, obj: Hittable, offset: Vec3) -> None:
        self.object = obj
        self.offset = offset
        self._bbox = obj.bounding_box() + offset

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        offset_r = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.object.hit(offset_r, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox


class RotateY(Hittable):
    """An object rotated about the y axis by an angle in degrees."""

    def __init__(self, obj: Hittable, angle: float) -> None:
        self.object = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        bbox = obj.bounding_box()

        low = [INFINITY, INFINITY, INFINITY]
        high = [-INFINITY, -INFINITY, -INFINITY]
        for x in (bbox.x.min, bbox.x.max):
            for y in (bbox.y.min, bbox.y.max):
                for z in (bbox.z.min, bbox.z.max):
                    newx = self.cos_theta * x + self.sin_theta * z
                    newz = -self.sin_theta * x + self.cos_theta * z
                    for c, value in enumerate((newx, y, newz)):
                        low[c] = _fmin(low[c], value)
                        high[c] = _fmax(high[c], value)
        self._bbox = box_from_points(Vec3(*low), Vec3(*high))

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        cos_t, sin_t = self.cos_theta, self.sin_theta
        o, d = r.origin, r.direction
        origin = Vec3(cos_t * o.x - sin_t * o.z, o.y, sin_t * o.x + cos_t * o.z)
        direction = Vec3(cos_t * d.x - sin_t * d.z, d.y, sin_t * d.x + cos_t * d.z)

        rec = self.object.hit(Ray(origin, direction, r.time), ray_t)
        if rec is None:
            return None

        p, n = rec.p, rec.normal
        rec.p = Vec3(cos_t * p.x + sin_t * p.z, p.y, -sin_t * p.x + cos_t * p.z)
        rec.normal = Vec3(cos_t * n.x + sin_t * n.z, n.y, -sin_t * n.x + cos_t * n.z)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox


class HittableList(Hittable):
    """A collection of objects hit as one; the nearest hit wins."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = []
        self._bbox = AABB.EMPTY
        for obj in objects:
            self.add(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)
        self._bbox = self._bbox.union(obj.bounding_box())

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        closest: Optional[HitRecord] = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest

    def bounding_box(self) -> AABB:
        return self._bbox


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)