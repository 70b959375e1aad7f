"""Spheres, static or moving linearly over the shutter interval."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from raytracer.aabb import AABB, box_from_points
from raytracer.hittable import HitRecord, Hittable
from raytracer.interval import Interval
from raytracer.vec3 import PI, Ray, Vec3, dot

if TYPE_CHECKING:
    from raytracer.material import Material


def get_sphere_uv(p: Vec3) -> tuple[float, float]:
    """Texture coordinates of a point on the unit sphere centred at the origin.

    ``u`` is the angle around the y axis from x = -1, ``v`` the angle from
    y = -1 to y = +1, both scaled to [0, 1].
    """
    phi = math.atan2(-p.z, p.x) + PI
    theta = math.acos(-p.y)
    return phi / (2.0 * PI), theta / PI


class Sphere(Hittable):
    """A sphere; given ``end_center`` it moves from ``center`` at time 0 to it at time 1."""

    def __init__(
        self,
        center: Vec3,
        radius: float,
        mat: Optional[Material],
        end_center: Optional[Vec3] = None,
    ) -> None:
        target = center if end_center is None else end_center
        self._motion = Ray(center, target - center)
        self.radius = max(0.0, radius)
        self.mat = mat
        rvec = Vec3(radius, radius, radius)
        start_box = box_from_points(self._motion.at(0) - rvec, self._motion.at(0) + rvec)
        if end_center is None:
            self._bbox = start_box
        else:
            end_box = box_from_points(self._motion.at(1) - rvec, self._motion.at(1) + rvec)
            self._bbox = start_box.union(end_box)

    def center_at(self, time: float) -> Vec3:
        """Centre of the sphere at the given time."""
        return self._motion.at(time)

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        current_center = self._motion.at(r.time)
        oc = current_center - r.origin
        a = r.direction.length_squared()
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrt_d = math.sqrt(discriminant)
        root = (h - sqrt_d) / a
        if not ray_t.surrounds(root):
            root = (h + sqrt_d) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        outward_normal = (p - current_center) / self.radius
        u, v = get_sphere_uv(outward_normal)
        rec = HitRecord(p=p, mat=self.mat, t=root, u=u, v=v)
        rec.set_face_normal(r, outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox