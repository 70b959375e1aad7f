"""Planar parallelograms and boxes built from them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from raytracer.aabb import AABB, box_from_points
from raytracer.hittable import HitRecord, Hittable, HittableList
from raytracer.interval import Interval
from raytracer.vec3 import Ray, Vec3, cross, dot, unit_vector

if TYPE_CHECKING:
    from raytracer.material import Material

_UNIT = Interval(0.0, 1.0)


class Quad(Hittable):
    """The parallelogram with corner ``q`` spanned by edges ``u`` and ``v``."""

    def __init__(self, q: Vec3, u: Vec3, v: Vec3, mat: Optional[Material]) -> None:
        self.q = q
        self.u = u
        self.v = v
        self.mat = mat
        n = cross(u, v)
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / dot(n, n)
        diagonal1 = box_from_points(q, q + u + v)
        diagonal2 = box_from_points(q + u, q + v)
        self._bbox = diagonal1.union(diagonal2)

    def is_interior(self, a: float, b: float) -> Optional[tuple[float, float]]:
        """Return the (u, v) coordinates if the planar point lies inside, else None."""
        if not _UNIT.contains(a) or not _UNIT.contains(b):
            return None
        return a, b

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = dot(self.normal, r.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar = intersection - self.q
        alpha = dot(self.w, cross(planar, self.v))
        beta = dot(self.w, cross(self.u, planar))
        uv = self.is_interior(alpha, beta)
        if uv is None:
            return None

        rec = HitRecord(p=intersection, mat=self.mat, t=t, u=uv[0], v=uv[1])
        rec.set_face_normal(r, self.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox


def box(a: Vec3, b: Vec3, mat: Optional[Material]) -> HittableList:
    """The six faces of the box with opposite corners ``a`` and ``b``."""
    lo = Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(hi.x - lo.x, 0, 0)
    dy = Vec3(0, hi.y - lo.y, 0)
    dz = Vec3(0, 0, hi.z - lo.z)

    return HittableList(
        [
            Quad(Vec3(lo.x, lo.y, hi.z), dx, dy, mat),  # front
            Quad(Vec3(hi.x, lo.y, hi.z), -dz, dy, mat),  # right
            Quad(Vec3(hi.x, lo.y, lo.z), -dx, dy, mat),  # back
            Quad(Vec3(lo.x, lo.y, lo.z), dz, dy, mat),  # left
            Quad(Vec3(lo.x, hi.y, hi.z), dx, -dz, mat),  # top
            Quad(Vec3(lo.x, lo.y, lo.z), dx, dz, mat),  # bottom
        ]
    )