"""Gradient (Perlin) noise."""

from __future__ import annotations

import math

from raytracer.vec3 import Vec3, dot, random_int, random_vector, unit_vector

POINT_COUNT = 256


def _generate_perm() -> list[int]:
    p = list(range(POINT_COUNT))
    for i in range(POINT_COUNT - 1, 0, -1):
        target = random_int(0, i)
        p[i], p[target] = p[target], p[i]
    return p


def _perlin_interp(c: list[list[list[Vec3]]], u: float, v: float, w: float) -> float:
    uu = u * u * (3 - 2 * u)
    vv = v * v * (3 - 2 * v)
    ww = w * w * (3 - 2 * w)
    accum = 0.0
    for i in (0, 1):
        for j in (0, 1):
            for k in (0, 1):
                weight_v = Vec3(u - i, v - j, w - k)
                accum += (
                    (i * uu + (1 - i) * (1 - uu))
                    * (j * vv + (1 - j) * (1 - vv))
                    * (k * ww + (1 - k) * (1 - ww))
                    * dot(c[i][j][k], weight_v)
                )
    return accum


class Perlin:
    """Random gradients and permutation tables for smooth 3D noise."""

    def __init__(self) -> None:
        self.randvec = [unit_vector(random_vector(-1.0, 1.0)) for _ in range(POINT_COUNT)]
        self.perm_x = _generate_perm()
        self.perm_y = _generate_perm()
        self.perm_z = _generate_perm()

    def noise(self, p: Vec3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)
        c = [
            [
                [
                    self.randvec[
                        self.perm_x[(i + di) & 255]
                        ^ self.perm_y[(j + dj) & 255]
                        ^ self.perm_z[(k + dk) & 255]
                    ]
                    for dk in (0, 1)
                ]
                for dj in (0, 1)
            ]
            for di in (0, 1)
        ]
        return _perlin_interp(c, u, v, w)

    def turb(self, p: Vec3, depth: int) -> float:
        """Sum of ``depth`` noise octaves, each at double frequency and half weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)