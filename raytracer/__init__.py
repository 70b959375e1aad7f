"""A small path tracer with BVH acceleration, textures, volumes and Monte Carlo experiments."""

__version__ = "0.1.0"