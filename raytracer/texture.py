"""Surface textures."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Union

from raytracer.color import Color
from raytracer.perlin import Perlin
from raytracer.vec3 import Vec3


class Texture(ABC):
    """Maps surface coordinates and a point to a colour."""

    @abstractmethod
    def value(self, u: float, v: float, p: Vec3) -> Color:
        """Colour at texture coordinates (u, v) and point p."""


class SolidColor(Texture):
    """A single colour everywhere."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> SolidColor:
        return cls(Color(red, green, blue))

    def value(self, u: float, v: float, p: Vec3) -> Color:
        return self.albedo


def _texture_of(source: Union[Texture, Color]) -> Texture:
    return source if isinstance(source, Texture) else SolidColor(source)


class CheckerTexture(Texture):
    """A 3D checkerboard alternating between two textures or colours."""

    def __init__(
        self,
        scale: float,
        even: Union[Texture, Color],
        odd: Union[Texture, Color],
    ) -> None:
        self.inv_scale = 1.0 / scale
        self.even = _texture_of(even)
        self.odd = _texture_of(odd)

    def value(self, u: float, v: float, p: Vec3) -> Color:
        x = math.floor(p.x * self.inv_scale)
        y = math.floor(p.y * self.inv_scale)
        z = math.floor(p.z * self.inv_scale)
        chosen = self.even if (x + y + z) % 2 == 0 else self.odd
        return chosen.value(u, v, p)


class PerlinTexture(Texture):
    """Marble-like grey bands driven by turbulent noise."""

    def __init__(self, scale: float) -> None:
        self.noise = Perlin()
        self.scale = scale

    def value(self, u: float, v: float, p: Vec3) -> Color:
        return Color(0.5, 0.5, 0.5) * (
            1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p, 7))
        )