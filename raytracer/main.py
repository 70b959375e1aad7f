"""Benchmark run followed by a Cornell box render to standard output."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from raytracer.bench import (
    add_arrays,
    cpu_count,
    describe_arrays,
    flatten,
    populate,
    populate_threaded,
    random_test_vector,
    time_function,
)
from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.hittable import Hittable, HittableList, RotateY, Translate
from raytracer.material import DiffuseLight, Lambertian
from raytracer.quad import Quad, box
from raytracer.vec3 import Vec3

_RULE = "\n" + "/" * 50 + "\n"


def cornell_box() -> HittableList:
    """The Cornell box scene: five walls, a ceiling light and two rotated boxes."""
    world = HittableList()
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color(15, 15, 15))

    world.add(Quad(Vec3(555, 0, 0), Vec3(0, 0, 555), Vec3(0, 555, 0), green))
    world.add(Quad(Vec3(0, 0, 555), Vec3(0, 0, -555), Vec3(0, 555, 0), red))
    world.add(Quad(Vec3(0, 555, 0), Vec3(555, 0, 0), Vec3(0, 0, 555), white))
    world.add(Quad(Vec3(0, 0, 555), Vec3(555, 0, 0), Vec3(0, 0, -555), white))
    world.add(Quad(Vec3(555, 0, 555), Vec3(-555, 0, 0), Vec3(0, 555, 0), white))

    world.add(Quad(Vec3(213, 554, 227), Vec3(130, 0, 0), Vec3(0, 0, 105), light))

    box1: Hittable = box(Vec3(0, 0, 0), Vec3(165, 330, 165), white)
    box1 = RotateY(box1, 15)
    box1 = Translate(box1, Vec3(265, 0, 295))
    world.add(box1)

    box2: Hittable = box(Vec3(0, 0, 0), Vec3(165, 165, 165), white)
    box2 = RotateY(box2, -18)
    box2 = Translate(box2, Vec3(130, 0, 65))
    world.add(box2)

    return world


def cornell_camera() -> Camera:
    """The camera set up to view the Cornell box."""
    return Camera(
        aspect_ratio=1.0,
        image_width=1200,
        samples_per_px=100,
        max_depth=50,
        background=Color(0, 0, 0),
        vfov=40,
        lookfrom=Vec3(278, 278, -800),
        lookat=Vec3(278, 278, 0),
        camera_up=Vec3(0, 1, 0),
        defocus_angle=0,
        focus_dist=10.0,
    )


def _run_benchmark(n: int, log) -> None:
    log.write(_RULE)
    max_threads = cpu_count()
    log.write(f"MAX THREADS per sysctl -n hw.ncpu: maxt = {max_threads}\n")

    a = [Vec3() for _ in range(n)]
    b = [Vec3() for _ in range(n)]
    c = [Vec3() for _ in range(n)]

    a_time = time_function(populate, a, 0, n - 1)
    b_time = time_function(populate_threaded, n, max_threads, b)
    log.write(describe_arrays(a, b, c))
    log.write(f"A - linear, for loop time: {a_time}s\n")
    log.write(f"B - threads, time: {b_time}s\n\n")

    log.write("Example NEON SIMD\n")
    example = [*flatten(add_arrays([random_test_vector()], [random_test_vector()])), 2.0]
    log.write("".join(f" {e:g}" for e in example))
    log.write("\n")

    log.write("NEON: C vs NEON\n")
    _, c_time_plain = time_function(add_arrays, a, b)
    c, c_time_bulk = time_function(add_arrays, a, b)
    log.write("\n")
    for i, (u, v, w) in enumerate(zip(a[:5], b[:5], c[:5])):
        log.write(f"A{i}[{u.x:g}, {u.y:g}, {u.z:g}]\n")
        log.write(f"B{i}[{v.x:g}, {v.y:g}, {v.z:g}]\n")
        log.write(f"C{i}[{w.x:g}, {w.y:g}, {w.z:g}]\n\n")
    log.write(f"add_float_c (C = A+B) - linear, for loop time: {c_time_plain}s\n")
    log.write(f"add_float_neon1 (C = A+B) - neon, time: {c_time_bulk}s\n\n")
    log.write(_RULE)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="raytracer",
        description="Run the vector benchmark, then render the Cornell box as PPM.",
    )
    parser.add_argument("--count", type=int, default=1000000, help="benchmark array length")
    parser.add_argument("--width", type=int, default=1200, help="image width in pixels")
    parser.add_argument("--samples", type=int, default=100, help="samples per pixel")
    parser.add_argument("--depth", type=int, default=50, help="maximum bounce depth")
    parser.add_argument("--no-bench", action="store_true", help="skip the benchmark")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    log = sys.stderr
    if not args.no_bench:
        _run_benchmark(args.count, log)

    world = cornell_box()
    cam = cornell_camera()
    cam.image_width = args.width
    cam.samples_per_px = args.samples
    cam.max_depth = args.depth
    cam.render(world, sys.stdout, log)
    return 0


if __name__ == "__main__":
    sys.exit(main())