"""Small 2D and 3D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Vector2:
    """A 2D vector; ``Vector2(v)`` sets both components to ``v``."""

    x: float
    y: float | None = None

    def __post_init__(self) -> None:
        if self.y is None:
            self.y = self.x
        self.x = float(self.x)
        self.y = float(self.y)

    def _pair(self, other: Vector2 | float) -> tuple[float, float]:
        if isinstance(other, Vector2):
            return other.x, other.y  # type: ignore[return-value]
        return float(other), float(other)

    def __add__(self, other: Vector2 | float) -> Vector2:
        ox, oy = self._pair(other)
        return Vector2(self.x + ox, self.y + oy)

    def __sub__(self, other: Vector2 | float) -> Vector2:
        ox, oy = self._pair(other)
        return Vector2(self.x - ox, self.y - oy)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        ox, oy = self._pair(other)
        return Vector2(self.x * ox, self.y * oy)

    def __truediv__(self, other: Vector2 | float) -> Vector2:
        ox, oy = self._pair(other)
        return Vector2(self.x / ox, self.y / oy)

    def __iadd__(self, other: Vector2 | float) -> Vector2:
        ox, oy = self._pair(other)
        self.x += ox
        self.y += oy
        return self

    def __neg__(self) -> Vector2:
        return self.inverse()

    def __str__(self) -> str:
        return f"{{{_num(self.x)}, {_num(self.y)}}}"

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def inverse(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalised(self) -> Vector2:
        """A unit vector in the same direction; the zero vector stays zero."""
        if self.is_zero():
            return Vector2(0.0)
        mag = self.magnitude()
        return Vector2(self.x / mag, self.y / mag)

    def normalise(self) -> None:
        """Scale this vector to unit length in place, unless it is zero."""
        if not self.is_zero():
            mag = self.magnitude()
            self.x /= mag
            self.y /= mag

    def dot_product(self, other: Vector2) -> Vector2:
        """The component-wise product with ``other``."""
        return Vector2(self.x * other.x, self.y * other.y)


@dataclass
class Vector3:
    """A 3D vector."""

    x: float
    y: float
    z: float