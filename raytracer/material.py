"""Surface materials: how light scatters from and is emitted by a hit point."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

from raytracer.color import Color
from raytracer.hittable import HitRecord
from raytracer.onb import ONB
from raytracer.texture import SolidColor, Texture
from raytracer.vec3 import (
    PI,
    Ray,
    Vec3,
    dot,
    random_cosine_direction,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


@dataclass
class ScatterResult:
    """A scattered ray with its colour attenuation and sampling density."""

    attenuation: Color
    scattered: Ray
    pdf: float = field(default=0.0)


def _texture_of(source: Union[Texture, Color]) -> Texture:
    return source if isinstance(source, Texture) else SolidColor(source)


class Material:
    """A material that neither scatters nor emits."""

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        """Return the scattered ray, or None when the ray is absorbed."""
        return None

    def emitted(self, u: float, v: float, p: Vec3) -> Color:
        return Color(0, 0, 0)

    def scatter_pdf(self, r_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0


class Lambertian(Material):
    """Diffuse surface with cosine-weighted scattering."""

    def __init__(self, albedo: Union[Texture, Color]) -> None:
        self.tex = _texture_of(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        uvw = ONB(rec.normal)
        direction = uvw.transform(random_cosine_direction())
        scattered = Ray(rec.p, unit_vector(direction), r_in.time)
        return ScatterResult(
            attenuation=self.tex.value(rec.u, rec.v, rec.p),
            scattered=scattered,
            pdf=dot(uvw.w, scattered.direction) / PI,
        )

    def scatter_pdf(self, r_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 1 / (2.0 * PI)


class Metal(Material):
    """Mirror-like surface with optional fuzz, capped at 1."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        reflected = reflect(r_in.direction, rec.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        scattered = Ray(rec.p, reflected, r_in.time)
        if dot(scattered.direction, rec.normal) > 0:
            return ScatterResult(attenuation=self.albedo, scattered=scattered)
        return None


def reflectance(cosine: float, refraction_index: float) -> float:
    """Schlick-style reflectance term as used by the dielectric material."""
    r0 = (1 - refraction_index) / (1 + refraction_index)
    r0 = r0 * r0
    return r0 + (1 / r0) * (1 - cosine) ** 5


class Dielectric(Material):
    """Clear refracting material such as glass."""

    def __init__(self, refract_index: float) -> None:
        self.refract_index = refract_index

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        ri = (1.0 / self.refract_index) if rec.front_face else self.refract_index
        unit_direction = unit_vector(r_in.direction)
        cos_theta = min(dot(-unit_direction, rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        if ri * sin_theta > 1.0:
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return ScatterResult(
            attenuation=Color(1.0, 1.0, 1.0),
            scattered=Ray(rec.p, direction, r_in.time),
        )


class DiffuseLight(Material):
    """A light source that emits its texture's colour."""

    def __init__(self, emit: Union[Texture, Color]) -> None:
        self.tex = _texture_of(emit)

    def emitted(self, u: float, v: float, p: Vec3) -> Color:
        return self.tex.value(u, v, p)


class Isotropic(Material):
    """Scatters uniformly in every direction, for participating media."""

    def __init__(self, albedo: Union[Texture, Color]) -> None:
        self.tex = _texture_of(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        return ScatterResult(
            attenuation=self.tex.value(rec.u, rec.v, rec.p),
            scattered=Ray(rec.p, random_unit_vector(), r_in.time),
            pdf=1.0 / (4.0 * PI),
        )

    def scatter_pdf(self, r_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 1.0 / (4.0 * PI)