"""Colour conversion and PPM pixel output."""

from __future__ import annotations

import math
from typing import TextIO

from raytracer.interval import Interval
from raytracer.vec3 import Vec3, random_float

Color = Vec3

_INTENSITY = Interval(0.0, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Gamma-2 transform; non-positive values map to zero."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def color_to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """Gamma-correct a linear colour and scale it to the byte range [0, 255]."""
    r, g, b = (int(256 * _INTENSITY.clamp(linear_to_gamma(c))) for c in pixel_color)
    return r, g, b


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as a PPM P3 text line."""
    r, g, b = color_to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")


def random_albedo(low: float = 0.0, high: float = 1.0) -> Color:
    return Color(random_float(low, high), random_float(low, high), random_float(low, high))