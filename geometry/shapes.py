"""
ASCII Viewport - geometry/shapes.py
Drawable capability and the built-in shapes.
============================================
Stack:       Python 3.11+ | abc | dataclasses
Status:      Stable.

Contract for every Drawable
---------------------------
  bbox()              Axis-aligned Rect enclosing every point the shape claims.
                      The renderer only uses it to reject cells cheaply.
  point_in_self(p)    Exact containment test. Pure; never raises, including
                      for NaN/inf coordinates (comparisons are simply False).
  glyph               Optional single character overriding the renderer's
                      filled glyph for this shape.

point_in_self(p) must imply bbox().contains(p). The renderer does not check
this; a shape that breaks it gets clipped to its box.
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from geometry.vector2 import Vector2

class Drawable(ABC):
    """Anything the renderer can hit-test."""

    glyph: Optional[str] = None

    @abstractmethod
    def bbox(self) -> Rect:
        ...

    @abstractmethod
    def point_in_self(self, point: Vector2) -> bool:
        ...


@dataclass(frozen=True)
class Rect(Drawable):
    """
    Axis-aligned rectangle anchored at its top-left corner.
    Doubles as the bounding-box type for every other shape.
    """
    position: Vector2
    width: float
    height: float
    glyph: Optional[str] = None

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def right(self) -> float:
        return self.position.x + self.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.height

    def bbox(self) -> Rect:
        return self

    def point_in_self(self, point: Vector2) -> bool:
        # Half-open: left/top edges belong to the rect, right/bottom do not.
        return (self.left <= point.x < self.right) and (self.top <= point.y < self.bottom)

    def contains(self, point: Vector2) -> bool:
        """Closed interval test used for bounding-box rejection."""
        return (self.left <= point.x <= self.right) and (self.top <= point.y <= self.bottom)

    def translated(self, delta: Vector2) -> Rect:
        return Rect(self.position + delta, self.width, self.height, self.glyph)


@dataclass(frozen=True)
class Circle(Drawable):
    """Circle anchored at its centre. The rim counts as inside."""
    position: Vector2
    radius: float
    glyph: Optional[str] = None

    def bbox(self) -> Rect:
        offset = Vector2(self.radius, self.radius)
        return Rect(self.position - offset, self.radius * 2, self.radius * 2)

    def point_in_self(self, point: Vector2) -> bool:
        distance = math.hypot(point.x - self.position.x, point.y - self.position.y)
        return distance <= self.radius

    def translated(self, delta: Vector2) -> Circle:
        return Circle(self.position + delta, self.radius, self.glyph)
