"""A positionable pinhole/thin-lens camera that renders scenes to PPM text."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from raytracer.color import Color, write_color
from raytracer.hittable import Hittable
from raytracer.interval import Interval
from raytracer.vec3 import (
    INFINITY,
    Ray,
    Vec3,
    cross,
    degrees_to_radians,
    random_float,
    random_in_unit_disk,
    unit_vector,
)

MAX_P3_COLOR_SIZE = 255


def _zero() -> Vec3:
    return Vec3(0.0, 0.0, 0.0)


@dataclass
class Camera:
    """Scene camera; set the public settings, then call ``render``."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_px: int = 10
    max_depth: int = 10
    vfov: float = 90.0
    lookfrom: Vec3 = field(default_factory=_zero)
    lookat: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    camera_up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0
    background: Color = field(default_factory=_zero)

    image_height: int = field(init=False, default=1, repr=False)
    sqrt_spp: int = field(init=False, default=1, repr=False)
    recip_sqrt_spp: float = field(init=False, default=1.0, repr=False)
    px_sample_scale: float = field(init=False, default=1.0, repr=False)
    center: Vec3 = field(init=False, default_factory=_zero, repr=False)
    cam_x: Vec3 = field(init=False, default_factory=_zero, repr=False)
    cam_y: Vec3 = field(init=False, default_factory=_zero, repr=False)
    cam_z: Vec3 = field(init=False, default_factory=_zero, repr=False)
    pixel00_loc: Vec3 = field(init=False, default_factory=_zero, repr=False)
    pixel_delta_x: Vec3 = field(init=False, default_factory=_zero, repr=False)
    pixel_delta_y: Vec3 = field(init=False, default_factory=_zero, repr=False)
    defocus_disk_x: Vec3 = field(init=False, default_factory=_zero, repr=False)
    defocus_disk_y: Vec3 = field(init=False, default_factory=_zero, repr=False)

    def initialize(self) -> None:
        """Derive the image size, camera basis and viewport geometry from the settings."""
        if self.samples_per_px < 1:
            raise ValueError("samples_per_px must be at least 1")

        self.image_height = max(int(self.image_width / self.aspect_ratio), 1)

        self.sqrt_spp = int(math.sqrt(self.samples_per_px))
        self.px_sample_scale = 1.0 / (self.sqrt_spp * self.sqrt_spp)
        self.recip_sqrt_spp = 1.0 / self.sqrt_spp

        self.center = self.lookfrom
        self.cam_z = unit_vector(self.lookfrom - self.lookat)
        self.cam_x = unit_vector(cross(self.camera_up, self.cam_z))
        self.cam_y = cross(self.cam_z, self.cam_x)

        theta = degrees_to_radians(self.vfov)
        half_height = math.tan(theta / 2.0)
        viewport_height = 2.0 * half_height * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        viewport_x = viewport_width * self.cam_x
        viewport_y = viewport_height * -self.cam_y

        self.pixel_delta_x = viewport_x / self.image_width
        self.pixel_delta_y = viewport_y / self.image_height

        upper_left = (
            self.center
            - self.focus_dist * self.cam_z
            - viewport_x / 2.0
            - viewport_y / 2.0
        )
        self.pixel00_loc = upper_left + 0.5 * (self.pixel_delta_x + self.pixel_delta_y)

        defocus_radius = self.focus_dist * math.tan(
            degrees_to_radians(self.defocus_angle / 2.0)
        )
        self.defocus_disk_x = self.cam_x * defocus_radius
        self.defocus_disk_y = self.cam_y * defocus_radius

    def ray_color(self, r: Ray, depth: int, world: Hittable) -> Color:
        """Radiance carried back along ``r``, following at most ``depth`` bounces."""
        if depth <= 0:
            return Color(0.0, 0.0, 0.0)

        rec = world.hit(r, Interval(0.001, INFINITY))
        if rec is None:
            return self.background

        mat = rec.mat
        emission = mat.emitted(rec.u, rec.v, rec.p)
        result = mat.scatter(r, rec)
        if result is None:
            return emission

        scattering_pdf = mat.scatter_pdf(r, rec, result.scattered)
        pdf_val = scattering_pdf
        if pdf_val == 0:
            # A zero density divides zero by zero: the contribution is undefined.
            return emission + Color(math.nan, math.nan, math.nan)

        incoming = self.ray_color(result.scattered, depth - 1, world)
        return emission + (result.attenuation * scattering_pdf * incoming) / pdf_val

    def _sample_square_stratified(self, s_i: int, s_j: int) -> Vec3:
        px = (s_i + random_float()) * self.recip_sqrt_spp - 0.5
        py = (s_j + random_float()) * self.recip_sqrt_spp - 0.5
        return Vec3(px, py, 0.0)

    def _defocus_sample(self) -> Vec3:
        p = random_in_unit_disk()
        return self.center + p.x * self.defocus_disk_x + p.y * self.defocus_disk_y

    def get_ray(self, i: int, j: int, s_i: int, s_j: int) -> Ray:
        """A ray through sub-pixel cell (s_i, s_j) of pixel (i, j), at a random time."""
        offset = self._sample_square_stratified(s_i, s_j)
        px_sample = (
            self.pixel00_loc
            + (i + offset.x) * self.pixel_delta_x
            + (j + offset.y) * self.pixel_delta_y
        )
        origin = self.center if self.defocus_angle <= 0 else self._defocus_sample()
        return Ray(origin, px_sample - origin, random_float())

    def render(
        self,
        world: Hittable,
        out: Optional[TextIO] = None,
        log: Optional[TextIO] = None,
    ) -> None:
        """Render ``world`` as a PPM P3 image to ``out``, reporting progress to ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log

        self.initialize()
        out.write(f"P3\n{self.image_width} {self.image_height}\n{MAX_P3_COLOR_SIZE}\n")

        strata = range(self.sqrt_spp)
        for j in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - j} ")
            log.flush()
            for i in range(self.image_width):
                pixel_color = sum(
                    (
                        self.ray_color(self.get_ray(i, j, s_i, s_j), self.max_depth, world)
                        for s_j in strata
                        for s_i in strata
                    ),
                    Color(0.0, 0.0, 0.0),
                )
                write_color(out, self.px_sample_scale * pixel_color)

        log.write("\rDone.                 \n")