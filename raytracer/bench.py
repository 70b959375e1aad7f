"""Timing helpers and bulk vector operations used by the benchmark run."""

from __future__ import annotations

import os
import random
import subprocess
import threading
import time
from typing import Any, Callable, MutableSequence, Sequence, Union

from raytracer.vec3 import Vec3


def time_function(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Union[float, tuple[Any, float]]:
    """Call ``func`` and measure it in seconds.

    Returns the elapsed time alone when the call returns None, otherwise a
    ``(result, elapsed)`` pair.
    """
    begin = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed = time.perf_counter() - begin
    if result is None:
        return elapsed
    return result, elapsed


def _test_component() -> float:
    base = random.randrange(101)
    divisor = random.randrange(100)
    while divisor == 0:
        divisor = random.randrange(100)
    return float(base + 1 // divisor)


def random_test_vector() -> Vec3:
    """A vector of whole-number components in [0, 101], for filling test arrays."""
    return Vec3(_test_component(), _test_component(), _test_component())


def populate(vectors: MutableSequence[Vec3], start: int, end: int) -> None:
    """Fill ``vectors[start:end]`` with random test vectors."""
    for i in range(start, end):
        vectors[i] = random_test_vector()


def populate_threaded(n: int, max_threads: int, vectors: MutableSequence[Vec3]) -> None:
    """Fill the first ``n`` entries of ``vectors`` using ``max_threads`` worker threads."""
    if max_threads < 1:
        raise ValueError("max_threads must be at least 1")
    chunk = n // max_threads
    threads = []
    for t in range(max_threads):
        start = t * chunk
        end = n if t == max_threads - 1 else (t + 1) * chunk
        worker = threading.Thread(target=populate, args=(vectors, start, end))
        threads.append(worker)
        worker.start()
    for worker in threads:
        worker.join()


def cpu_count() -> int:
    """Number of CPUs as reported by ``sysctl -n hw.ncpu``, else by the OS."""
    try:
        completed = subprocess.run(
            ["sysctl", "-n", "hw.ncpu"],
            capture_output=True,
            text=True,
            check=True,
        )
        count = int(completed.stdout.strip())
        if count > 0:
            return count
    except (OSError, subprocess.CalledProcessError, ValueError):
        pass
    return os.cpu_count() or 1


def flatten(vectors: Sequence[Vec3]) -> list[float]:
    """The components of all vectors in order: x0, y0, z0, x1, ..."""
    return [component for v in vectors for component in v]


def add_arrays(a: Sequence[Vec3], b: Sequence[Vec3]) -> list[Vec3]:
    """Element-wise sum of two equally long vector sequences."""
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    return [u + v for u, v in zip(a, b)]


def _format_vector(label: str, index: int, v: Vec3) -> str:
    return f"{label}{index}[{v.x:g}, {v.y:g}, {v.z:g}]\n"


def _describe_one(label: str, vectors: Sequence[Vec3]) -> str:
    lines = [f"First 10 elements: {label}\n"]
    lines.extend(_format_vector(label, i, v) for i, v in enumerate(vectors[:11]))
    lines.append("\n")
    return "".join(lines)


def describe_arrays(a: Sequence[Vec3], b: Sequence[Vec3], c: Sequence[Vec3]) -> str:
    """Text listing the leading elements of each array; ``c`` is left out while it starts at zero."""
    text = _describe_one("A", a) + _describe_one("B", b)
    if not c or c[0].x == 0:
        return text
    return text + _describe_one("C", c)