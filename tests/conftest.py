"""
ASCII Viewport - tests/conftest.py
Shared builders for renderer tests.
"""

import pytest

from engine.data_loader import RendererOptions
from engine.renderer import Renderer

def grid_options(width: int, height: int, **overrides) -> RendererOptions:
    return RendererOptions(viewport_width=width, viewport_height=height, **overrides)

@pytest.fixture
def make_renderer():
    def _make(width: int = 20, height: int = 20, **overrides) -> Renderer:
        return Renderer(grid_options(width, height, **overrides))
    return _make
