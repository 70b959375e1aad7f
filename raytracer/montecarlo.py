"""Small Monte Carlo estimation and integration experiments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import accumulate

from raytracer.vec3 import PI, Vec3, random_float, random_unit_vector


@dataclass(frozen=True)
class Sample:
    """A sampled abscissa with the integrand's value there."""

    x: float
    p_x: float


@dataclass(frozen=True)
class HalfwayEstimate:
    """Estimates for f(x) = exp(-x / 2pi) sin^2(x) over [0, 2pi]."""

    average: float
    area: float
    halfway: float

    def __str__(self) -> str:
        return (
            f"Average = {self.average:.12f}\n"
            f"Area under curve = {self.area:.12f}\n"
            f"Halfway = {self.halfway:.12f}"
        )


def _require_samples(n: int) -> None:
    if n < 1:
        raise ValueError("at least one sample is needed")


def estimate_halfway(n: int = 10000) -> HalfwayEstimate:
    """Estimate the mean, the integral and the point splitting the area in half."""
    _require_samples(n)
    samples = []
    for _ in range(n):
        x = random_float(0.0, 2 * PI)
        sinx = math.sin(x)
        samples.append(Sample(x, math.exp(-x / (2 * PI)) * sinx * sinx))

    total = sum(s.p_x for s in samples)
    samples.sort(key=lambda s: s.x)

    half_sum = total / 2.0
    running = accumulate(s.p_x for s in samples)
    halfway = next(
        (s.x for s, acc in zip(samples, running) if acc >= half_sum),
        0.0,
    )
    return HalfwayEstimate(
        average=total / n,
        area=2 * PI * total / n,
        halfway=halfway,
    )


def icd(d: float) -> float:
    """Inverse cumulative distribution used to draw samples."""
    return 8.0 * d ** (1.0 / 3.0)


def pdf(x: float) -> float:
    return (3.0 / 8.0) * (x * x)


def integrate_x_squared(n: int = 100000) -> float:
    """Mean of x^2 over samples drawn through ``icd``."""
    _require_samples(n)
    total = 0.0
    for _ in range(n):
        x = icd(random_float())
        total += x * x
    return total / n


def cos_squared(d: Vec3) -> float:
    return d.z * d.z


def sphere_pdf(d: Vec3) -> float:
    """Uniform density over the unit sphere."""
    return 1 / (4 * PI)


def integrate_cos_squared_sphere(n: int = 1000000) -> float:
    """Estimate the integral of cos^2(theta) over the unit sphere."""
    _require_samples(n)
    total = 0.0
    for _ in range(n):
        d = random_unit_vector()
        total += cos_squared(d) / sphere_pdf(d)
    return total / n