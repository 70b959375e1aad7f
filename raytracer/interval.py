"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Interval:
    """A real interval [min, max]; empty by default."""

    min: float = math.inf
    max: float = -math.inf

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> Interval:
        padding = delta / 2.0
        return Interval(self.min - padding, self.max + padding)

    def union(self, other: Interval) -> Interval:
        """The smallest interval enclosing both."""
        low = self.min if self.min <= other.min else other.min
        high = self.max if self.max >= other.max else other.max
        return Interval(low, high)

    def __add__(self, displacement: float) -> Interval:
        if not isinstance(displacement, (int, float)):
            return NotImplemented
        return Interval(self.min + displacement, self.max + displacement)

    def __radd__(self, displacement: float) -> Interval:
        return self.__add__(displacement)


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)