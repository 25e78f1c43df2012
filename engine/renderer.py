"""
ASCII Viewport - engine/renderer.py
Rasterizer: maps viewport cells to world points and hit-tests registered shapes.
================================================================================
Stack:       Python 3.11+ | NumPy
Status:      Core.

Frame procedure
---------------
  1. Cell (r, c) samples the world point  position + (c, r) * cell_scale.
  2. Per shape, the closed bbox interval test on the x and y sample vectors
     selects the candidate columns and rows.
  3. point_in_self() runs only on candidate cells.
  4. Shapes paint in registration order: the last registered shape wins
     wherever several overlap.

The registry holds plain references. The caller owns the shapes, and there is
no removal API.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

import numpy as np

from engine.data_loader import RendererOptions
from geometry.shapes import Drawable, Rect
from geometry.vector2 import Vector2

logger = logging.getLogger(__name__)

class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def as_vector(self) -> Vector2:
        return _DIRECTION_VECTORS[self]

_DIRECTION_VECTORS = {
    Direction.UP: Vector2.UP,
    Direction.DOWN: Vector2.DOWN,
    Direction.LEFT: Vector2.LEFT,
    Direction.RIGHT: Vector2.RIGHT,
}


class Renderer:
    """
    Owns the viewport offset, the shape registry and the glyph buffer.
    """
    def __init__(self, options: Optional[RendererOptions] = None, position: Vector2 = Vector2.ZERO):
        self.options = options if options is not None else RendererOptions()
        self.position = position
        self.drawables: List[Drawable] = []
        self.buffer = self._blank_buffer()
        # Diagnostics for the most recent frame
        self.point_tests = 0
        self.filled_cells = 0

    @property
    def rows(self) -> int:
        return self.options.viewport_height

    @property
    def columns(self) -> int:
        return self.options.viewport_width

    def _blank_buffer(self) -> np.ndarray:
        return np.full((self.rows, self.columns), self.options.background_glyph, dtype="<U1")

    # --------------------------------------------------------------------
    # Registry & viewport
    # --------------------------------------------------------------------

    def add_drawable(self, drawable: Drawable) -> None:
        self.drawables.append(drawable)
        logger.debug("Registered %r (%d shapes)", drawable, len(self.drawables))

    def move_viewport(self, delta: Vector2) -> None:
        """Pans by delta world units. The viewport is unbounded."""
        self.position = self.position + delta
        logger.debug("Viewport moved to (%g, %g)", self.position.x, self.position.y)

    def walk(self, direction: Direction, distance: float) -> None:
        self.move_viewport(direction.as_vector() * distance)

    def bbox(self) -> Rect:
        """World-space area covered by the viewport."""
        scale = self.options.cell_scale
        return Rect(self.position, self.columns * scale, self.rows * scale)

    def world_point(self, column: int, row: int) -> Vector2:
        scale = self.options.cell_scale
        return Vector2(self.position.x + column * scale, self.position.y + row * scale)

    # --------------------------------------------------------------------
    # Rasterization
    # --------------------------------------------------------------------

    def render(self) -> np.ndarray:
        """Rebuilds the glyph buffer for the current viewport and returns it."""
        scale = self.options.cell_scale
        xs = self.position.x + np.arange(self.columns, dtype=np.float64) * scale
        ys = self.position.y + np.arange(self.rows, dtype=np.float64) * scale

        buffer = self._blank_buffer()
        painted = np.zeros(buffer.shape, dtype=bool)
        point_tests = 0

        for drawable in self.drawables:
            box = drawable.bbox()
            # NaN bounds compare False everywhere, leaving no candidates.
            cols = np.flatnonzero((xs >= box.left) & (xs <= box.right))
            if cols.size == 0:
                continue
            rows = np.flatnonzero((ys >= box.top) & (ys <= box.bottom))
            if rows.size == 0:
                continue

            glyph = getattr(drawable, "glyph", None) or self.options.filled_glyph
            for r in rows:
                world_y = float(ys[r])
                for c in cols:
                    point_tests += 1
                    if drawable.point_in_self(Vector2(float(xs[c]), world_y)):
                        buffer[r, c] = glyph
                        painted[r, c] = True

        self.buffer = buffer
        self.point_tests = point_tests
        self.filled_cells = int(np.count_nonzero(painted))
        logger.debug(
            "Rendered %dx%d frame: %d point tests, %d filled cells",
            self.columns, self.rows, self.point_tests, self.filled_cells,
        )
        return buffer

    def lines(self, spaced: Optional[bool] = None) -> List[str]:
        """Text rows of the last rendered buffer."""
        if spaced is None:
            spaced = self.options.spaced
        separator = " " if spaced else ""
        return [separator.join(row) + (separator if spaced else "") for row in self.buffer]
