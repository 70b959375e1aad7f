# raytracer

A compact path tracer in pure Python with no third-party dependencies.

It renders scenes built from spheres (static or moving), quads, six-sided
boxes and constant-density volumes. The available materials are
Lambertian, metal, dielectric, isotropic and emissive. Textures can be a
solid colour, a 3D checkerboard or Perlin-noise marble. Objects can be
moved with `Translate` and rotated about the y axis with `RotateY`. A
bounding volume hierarchy (`BVHNode`) speeds up ray queries. Images are
written as plain-text PPM (`P3`).

The package also has a few Monte Carlo integration experiments and a
small benchmark that fills and adds large arrays of vectors, once
serially and once across threads.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
raytracer > cornell.ppm
```

This runs the vector benchmark and then renders the Cornell box scene to
standard output as a PPM image. The benchmark report and the progress
lines go to standard error. The thread count comes from
`sysctl -n hw.ncpu`. If that command is not available, the operating
system's CPU count is used instead.

Options:

- `--count N`: length of the benchmark arrays (default 1000000)
- `--width N`: image width in pixels (default 1200)
- `--samples N`: samples per pixel (default 100). Sampling is stratified,
  so only the largest square number not above N is used.
- `--depth N`: maximum number of bounces (default 50)
- `--no-bench`: skip the benchmark and only render

Rendering in pure Python is slow. The default full-size scene takes a
very long time, so try something like
`raytracer --no-bench --width 100 --samples 4` first.

## Using the library

```python
import sys

from raytracer.vec3 import Vec3
from raytracer.hittable import HittableList
from raytracer.material import Lambertian, DiffuseLight
from raytracer.sphere import Sphere
from raytracer.quad import Quad
from raytracer.bvh import BVHNode
from raytracer.camera import Camera

world = HittableList()
world.add(Sphere(Vec3(0, 1, 0), 1.0, Lambertian(Vec3(0.7, 0.3, 0.3))))
world.add(Quad(Vec3(-2, 3, -2), Vec3(4, 0, 0), Vec3(0, 0, 4),
               DiffuseLight(Vec3(4, 4, 4))))

cam = Camera(
    aspect_ratio=16 / 9,
    image_width=160,
    samples_per_px=16,
    max_depth=10,
    vfov=40,
    lookfrom=Vec3(0, 2, 6),
    lookat=Vec3(0, 1, 0),
    camera_up=Vec3(0, 1, 0),
    focus_dist=6.0,
    defocus_angle=0.0,
    background=Vec3(0, 0, 0),
)

cam.render(BVHNode(world), sys.stdout, sys.stderr)
```

How the pieces behave:

- A hit query (`hit(ray, interval)`) returns a `HitRecord`, or `None` when
  the ray misses.
- `Material.scatter` returns a `ScatterResult`, or `None` when the ray is
  absorbed.
- To make a sphere move, pass `end_center`. The sphere then goes from
  `center` at time 0 to `end_center` at time 1, which gives motion blur.
- `raytracer.quad.box(a, b, mat)` builds the six faces of a box as a
  `HittableList`.
- `ConstantMedium(boundary, density, albedo)` fills a convex boundary with
  fog that scatters light evenly in all directions.

For the classic scene, `raytracer.main.cornell_box()` returns the world
and `raytracer.main.cornell_camera()` returns a camera set up to view it.

### Monte Carlo experiments

These are in `raytracer.montecarlo`:

- `estimate_halfway(n)` returns a `HalfwayEstimate` for
  exp(-x/2π)·sin²(x) over [0, 2π]. It holds the average, the area, and
  the point that splits the area in half.
- `integrate_x_squared(n)` returns the mean of x² over samples drawn
  through the inverse cumulative distribution `icd`.
- `integrate_cos_squared_sphere(n)` estimates the integral of cos²θ over
  the unit sphere.

### Benchmark helpers

`raytracer.bench` provides:

- `time_function`
- `populate` and `populate_threaded`
- `add_arrays`
- `flatten`
- `describe_arrays`
- `cpu_count`

## What it does not do

- It cannot load textures from image files. The only textures are solid
  colours, checkerboards and Perlin noise.
- The only output format is text PPM. Nothing is displayed on screen, and
  no other image format is written.
- The command renders only the built-in Cornell box. It has no scene file
  format.