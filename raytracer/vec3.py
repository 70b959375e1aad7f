"""Three-component vectors, rays and the random sampling helpers built on them."""

from __future__ import annotations

import math
import random
import struct
from dataclasses import dataclass, field
from typing import Iterator, Union

INFINITY = math.inf
PI = 3.1415927
FLT_MIN = 1.1754943508222875e-38

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, Scalar]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vec3:
        return self.__mul__(other)

    def __truediv__(self, t: Scalar) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return (1.0 / t) * self

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def len_approx(self) -> float:
        """Bit-trick approximation seeded from the squared length, with one Newton step."""
        x = self.length_squared()
        xhalf = 0.5 * x
        (bits,) = struct.unpack("<i", struct.pack("<f", x))
        bits = (0x1FBC0000 + (bits >> 1)) & 0xFFFFFFFF
        (y,) = struct.unpack("<f", struct.pack("<I", bits))
        return y * (1.5 - xhalf * y * y)

    def near_zero(self) -> bool:
        eps = 1e-8
        return abs(self.x) < eps and abs(self.y) < eps and abs(self.z) < eps


Point3 = Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin, a direction and a time stamp."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Vec3:
        return self.origin + t * self.direction


def degrees_to_radians(degrees: float) -> float:
    return degrees * PI / 180.0


def random_float(low: float = 0.0, high: float = 1.0) -> float:
    """Uniform value in [low, high)."""
    return low + (high - low) * random.random()


def random_int(low: int, high: int) -> int:
    """Uniform integer in [low, high]."""
    return int(random_float(low, high + 1))


def dot(u: Vec3, v: Vec3) -> float:
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    return v / v.length()


def random_vector(low: float = 0.0, high: float = 1.0) -> Vec3:
    return Vec3(random_float(low, high), random_float(low, high), random_float(low, high))


def random_unit_vector() -> Vec3:
    while True:
        v = random_vector(-1.0, 1.0)
        len_sq = v.length_squared()
        if FLT_MIN < len_sq <= 1.0:
            return v / math.sqrt(len_sq)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    on_unit_sphere = random_unit_vector()
    if dot(normal, on_unit_sphere) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(v: Vec3, n: Vec3) -> Vec3:
    return v - 2 * dot(v, n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    cos_theta = min(dot(-uv, n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel


def random_in_unit_disk() -> Vec3:
    while True:
        p = Vec3(random_float(-1.0, 1.0), random_float(-1.0, 1.0), 0.0)
        if p.length_squared() < 1:
            return p


def random_cosine_direction() -> Vec3:
    r1 = random.random()
    r2 = random.random()
    phi = 2.0 * PI * r1
    root = math.sqrt(r2)
    return Vec3(math.cos(phi) * root, math.sin(phi) * root, math.sqrt(1.0 - r2))