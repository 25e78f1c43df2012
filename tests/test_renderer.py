"""
ASCII Viewport - tests/test_renderer.py
Rasterization, tie-breaking, panning and the bbox pre-filter.
"""

import math

import numpy as np
import pytest

from engine.renderer import Direction, Renderer
from geometry.shapes import Circle, Drawable, Rect
from geometry.vector2 import Vector2

class CountingRect(Rect):
    """Rect that records every point it was asked about."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        object.__setattr__(self, "asked", [])

    def point_in_self(self, point: Vector2) -> bool:
        self.asked.append(point)
        return super().point_in_self(point)

def filled_cells(grid: np.ndarray, glyph: str = "#"):
    return {(int(r), int(c)) for r, c in zip(*np.nonzero(grid == glyph))}

def test_empty_renderer_is_background(make_renderer):
    r = make_renderer(5, 3)
    grid = r.render()
    assert grid.shape == (3, 5)
    assert (grid == "-").all()
    assert r.filled_cells == 0

def test_single_rect_fills_top_left_block(make_renderer):
    r = make_renderer(20, 20)
    r.add_drawable(Rect(Vector2(0.0, 0.0), 10.0, 10.0))
    grid = r.render()

    assert (grid[:10, :10] == "#").all()
    assert (grid[10:, :] == "-").all()
    assert (grid[:, 10:] == "-").all()
    assert r.filled_cells == 100

def test_circle_cells_satisfy_distance(make_renderer):
    r = make_renderer(20, 20, cell_scale=0.5)
    circle = Circle(Vector2(5.0, 5.0), 3.0)
    r.add_drawable(circle)
    grid = r.render()
    box = circle.bbox()

    filled = filled_cells(grid)
    assert filled
    for row, col in filled:
        p = r.world_point(col, row)
        assert math.hypot(p.x - 5.0, p.y - 5.0) <= 3.0
        assert box.contains(p)

    # Every sampled point inside the circle got painted
    for row in range(20):
        for col in range(20):
            if circle.point_in_self(r.world_point(col, row)):
                assert (row, col) in filled

def test_circle_rim_cells_are_painted(make_renderer):
    r = make_renderer(12, 12)
    r.add_drawable(Circle(Vector2(5.0, 5.0), 3.0))
    grid = r.render()
    assert grid[5, 8] == "#"   # (8, 5) lies exactly on the rim
    assert grid[5, 2] == "#"
    assert grid[2, 5] == "#"
    assert grid[8, 8] == "-"

def test_last_registered_wins_on_overlap(make_renderer):
    r = make_renderer(10, 10)
    first = Rect(Vector2(0.0, 0.0), 6.0, 6.0, glyph="A")
    second = Rect(Vector2(3.0, 3.0), 6.0, 6.0, glyph="B")
    r.add_drawable(first)
    r.add_drawable(second)
    grid = r.render()

    assert grid[0, 0] == "A"
    assert grid[4, 4] == "B"     # overlap
    assert grid[5, 5] == "B"     # overlap
    assert grid[8, 8] == "B"
    assert grid[9, 9] == "-"

def test_render_is_deterministic(make_renderer):
    r = make_renderer(16, 12)
    r.add_drawable(Rect(Vector2(1.0, 1.0), 4.0, 3.0))
    r.add_drawable(Circle(Vector2(9.0, 6.0), 4.0, glyph="o"))
    assert np.array_equal(r.render(), r.render())

def test_pan_is_pure_translation(make_renderer):
    delta = Vector2(3.0, -2.0)
    shapes = [Rect(Vector2(1.0, 4.0), 5.0, 3.0), Circle(Vector2(8.0, 6.0), 3.0, glyph="o")]

    panned = make_renderer(16, 12)
    for shape in shapes:
        panned.add_drawable(shape)
    panned.move_viewport(delta)

    shifted = make_renderer(16, 12)
    for shape in shapes:
        shifted.add_drawable(shape.translated(-delta))

    assert np.array_equal(panned.render(), shifted.render())

def test_panning_clears_previous_frame(make_renderer):
    r = make_renderer(10, 10)
    r.add_drawable(Rect(Vector2(0.0, 0.0), 2.0, 2.0))
    r.render()
    r.move_viewport(Vector2(100.0, 100.0))
    assert (r.render() == "-").all()

def test_viewport_is_unbounded(make_renderer):
    r = make_renderer(4, 4)
    r.add_drawable(Rect(Vector2(-1e6, -1e6), 2.0, 2.0))
    r.move_viewport(Vector2(-1e6, -1e6))
    grid = r.render()
    assert (grid[:2, :2] == "#").all()
    assert r.position == Vector2(-1e6, -1e6)

def test_walk_uses_direction_vectors(make_renderer):
    r = make_renderer()
    r.walk(Direction.RIGHT, 2.0)
    r.walk(Direction.UP, 3.0)
    assert r.position == Vector2(2.0, -3.0)
    r.walk(Direction.LEFT, 2.0)
    r.walk(Direction.DOWN, 3.0)
    assert r.position == Vector2.ZERO

def test_bbox_prefilter_skips_cells_outside_box(make_renderer):
    r = make_renderer(30, 30)
    shape = CountingRect(Vector2(10.0, 12.0), 3.0, 2.0)
    r.add_drawable(shape)
    r.render()

    box = shape.bbox()
    assert shape.asked
    assert all(box.contains(p) for p in shape.asked)
    # Closed box [10, 13] x [12, 14] covers 4 x 3 cells
    assert len(shape.asked) == 12
    assert r.point_tests == 12

def test_shape_outside_viewport_is_never_tested(make_renderer):
    r = make_renderer(10, 10)
    shape = CountingRect(Vector2(50.0, 0.0), 3.0, 3.0)
    r.add_drawable(shape)
    r.render()
    assert shape.asked == []
    assert r.point_tests == 0

def test_nan_shape_renders_nothing(make_renderer):
    r = make_renderer(5, 5)
    r.add_drawable(Circle(Vector2(math.nan, 0.0), 2.0))
    r.add_drawable(Rect(Vector2(0.0, 0.0), math.inf, 1.0))
    grid = r.render()
    assert (grid[0] == "#").all()
    assert (grid[1:] == "-").all()

def test_custom_drawable_extension(make_renderer):
    class Diamond(Drawable):
        def __init__(self, centre: Vector2, radius: float):
            self.centre = centre
            self.radius = radius

        def bbox(self) -> Rect:
            offset = Vector2(self.radius, self.radius)
            return Rect(self.centre - offset, self.radius * 2, self.radius * 2)

        def point_in_self(self, point: Vector2) -> bool:
            return abs(point.x - self.centre.x) + abs(point.y - self.centre.y) <= self.radius

    r = make_renderer(7, 7)
    r.add_drawable(Diamond(Vector2(3.0, 3.0), 2.0))
    grid = r.render()
    assert grid[3, 3] == "#"
    assert grid[1, 3] == "#"
    assert grid[1, 1] == "-"
    assert r.filled_cells == 13

def test_viewport_bbox_and_world_point(make_renderer):
    r = make_renderer(8, 4, cell_scale=0.5)
    r.move_viewport(Vector2(2.0, 1.0))
    box = r.bbox()
    assert (box.left, box.top, box.right, box.bottom) == (2.0, 1.0, 6.0, 3.0)
    assert r.world_point(4, 2) == Vector2(4.0, 2.0)

def test_lines_spaced_and_compact(make_renderer):
    r = make_renderer(3, 2)
    r.add_drawable(Rect(Vector2(0.0, 0.0), 1.0, 1.0))
    r.render()
    assert r.lines() == ["# - - ", "- - - "]
    assert r.lines(spaced=False) == ["#--", "---"]

def test_plain_object_with_two_methods_renders(make_renderer):
    class Dot:
        def __init__(self, at: Vector2):
            self.at = at

        def bbox(self) -> Rect:
            return Rect(self.at, 0.0, 0.0)

        def point_in_self(self, point: Vector2) -> bool:
            return point == self.at

    r = make_renderer(3, 3)
    r.add_drawable(Dot(Vector2(1.0, 1.0)))
    grid = r.render()
    assert grid[1, 1] == "#"
    assert r.filled_cells == 1

def test_filled_cells_counts_background_coloured_glyphs(make_renderer):
    r = make_renderer(4, 4)
    r.add_drawable(Rect(Vector2(0.0, 0.0), 2.0, 2.0, glyph="-"))
    r.add_drawable(Rect(Vector2(1.0, 1.0), 2.0, 2.0))
    grid = r.render()
    assert grid[0, 0] == "-"
    assert grid[1, 1] == "#"
    # 4 + 4 cells painted, one shared
    assert r.filled_cells == 7
