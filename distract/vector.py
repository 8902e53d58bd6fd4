"""Two-dimensional vectors and linear interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_NORMALIZE_EPSILON = 0.05


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between ``a`` and ``b`` by ``t``."""
    return (1 - t) * a + t * b


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction, or the zero vector if too short."""
        length = self.magnitude()
        if length < _NORMALIZE_EPSILON:
            return Vector2(0, 0)
        return Vector2(self.x / length, self.y / length)

    def distance(self, other: Vector2) -> float:
        """Distance between this vector and ``other``."""
        return abs((other - self).magnitude())

    def truncated(self) -> Vector2:
        """Vector with both components truncated towards zero to integers."""
        return Vector2(int(self.x), int(self.y))


def vector_lerp(v1: Vector2, v2: Vector2, t: float) -> Vector2:
    """Component-wise linear interpolation between two vectors."""
    return Vector2(lerp(v1.x, v2.x, t), lerp(v1.y, v2.y, t))