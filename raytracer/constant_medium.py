"""Volumes of constant density, such as smoke or fog."""

from __future__ import annotations

import math
from typing import Optional, Union

from raytracer.aabb import AABB
from raytracer.color import Color
from raytracer.hittable import HitRecord, Hittable
from raytracer.interval import Interval
from raytracer.material import Isotropic
from raytracer.texture import Texture
from raytracer.vec3 import INFINITY, Ray, Vec3, random_float


class ConstantMedium(Hittable):
    """A participating medium filling a convex boundary, scattering isotropically."""

    def __init__(
        self,
        boundary: Hittable,
        density: float,
        albedo: Union[Texture, Color],
    ) -> None:
        self.boundary = boundary
        self.neg_inv_density = -1 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, r: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(r, Interval.UNIVERSE)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(r, Interval(rec1.t + 0.0001, INFINITY))
        if rec2 is None:
            return None

        t1 = max(rec1.t, ray_t.min)
        t2 = min(rec2.t, ray_t.max)
        if t1 >= t2:
            return None
        t1 = max(t1, 0.0)

        ray_length = r.direction.length()
        distance_inside = (t2 - t1) * ray_length
        sample = random_float()
        hit_distance = (
            math.copysign(INFINITY, -self.neg_inv_density)
            if sample == 0.0
            else self.neg_inv_density * math.log(sample)
        )
        if hit_distance > distance_inside:
            return None

        t = t1 + hit_distance / ray_length
        return HitRecord(
            p=r.at(t),
            normal=Vec3(1, 0, 0),
            mat=self.phase_function,
            t=t,
            front_face=True,
        )

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()