"""
ASCII Viewport - geometry/vector2.py
Immutable 2D vector used for world positions and viewport offsets.
==================================================================
Stack:       Python 3.11+ | dataclasses
Status:      Stable.

World space uses screen orientation: x grows to the right, y grows downward,
so UP is (0, -1).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import ClassVar

@dataclass(frozen=True)
class Vector2:
    x: float
    y: float

    ZERO: ClassVar["Vector2"]
    UP: ClassVar["Vector2"]
    DOWN: ClassVar["Vector2"]
    LEFT: ClassVar["Vector2"]
    RIGHT: ClassVar["Vector2"]

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalised(self) -> Vector2:
        """Unit vector in the same direction. The zero vector stays zero."""
        length = self.length()
        if length == 0:
            return self
        return self / length


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.UP = Vector2(0.0, -1.0)
Vector2.DOWN = Vector2(0.0, 1.0)
Vector2.LEFT = Vector2(-1.0, 0.0)
Vector2.RIGHT = Vector2(1.0, 0.0)
