"""
ASCII Viewport - engine/data_loader.py
Renderer options and scene definitions loaded from TOML, validated by Pydantic.
=============================================================================
Stack:       Python 3.11+ | Pydantic v2 | tomllib
Status:      Core configuration layer.

Files
-----
  engine/data/config.toml          [renderer] table -> RendererOptions
  engine/data/scenes/<name>.toml   [[shapes]] array -> SceneDef

Both ship as package data of `engine`, read-only. A missing config.toml means defaults.
"""

import logging
import tomllib
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from engine.errors import SceneError
from geometry.shapes import Circle, Drawable, Rect
from geometry.vector2 import Vector2

logger = logging.getLogger(__name__)

# ================================================================================
# SCHEMAS
# ================================================================================

def _single_char(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) != 1:
        raise ValueError(f"glyph must be exactly one character, got {value!r}")
    return value

class RendererOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    viewport_width: int = Field(default=36, gt=0)   # columns
    viewport_height: int = Field(default=24, gt=0)  # rows
    cell_scale: float = Field(default=1.0, gt=0)    # world units per cell
    filled_glyph: str = "#"
    background_glyph: str = "-"
    spaced: bool = True                             # pad each glyph with a space on output
    pan_step: float = 1.0                           # world units per key press
    title: str = "ASCII Viewport"
    log_level: str = "INFO"

    @field_validator("filled_glyph", "background_glyph")
    @classmethod
    def _check_glyph(cls, value: str) -> str:
        return _single_char(value)

class ShapeDef(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str  # "rect" | "circle"
    x: float
    y: float
    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None
    glyph: Optional[str] = None

    @field_validator("glyph")
    @classmethod
    def _check_glyph(cls, value: Optional[str]) -> Optional[str]:
        return _single_char(value)

class SceneDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    name: str = "untitled"
    start_x: float = 0.0
    start_y: float = 0.0
    shapes: List[ShapeDef] = Field(default_factory=list)

# ================================================================================
# LOADERS & CACHE (JIT)
# ================================================================================

_SCENE_CACHE: Dict[str, SceneDef] = {}

DATA_DIR = Path(__file__).parent / "data"

def load_options(path: Optional[Path] = None) -> RendererOptions:
    """Reads the [renderer] table. Falls back to defaults when the file is absent."""
    if path is None:
        path = DATA_DIR / "config.toml"

    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return RendererOptions()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return RendererOptions(**data.get("renderer", {}))

def load_scene(scene_id: str) -> SceneDef:
    """JIT loads a scene definition from TOML."""
    if scene_id in _SCENE_CACHE:
        return _SCENE_CACHE[scene_id]

    path = DATA_DIR / "scenes" / f"{scene_id}.toml"
    if not path.exists():
        raise FileNotFoundError(f"Scene definition not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    scene = SceneDef(**data)
    _SCENE_CACHE[scene_id] = scene
    return scene

def build_shape(shape_def: ShapeDef) -> Drawable:
    """Instantiates one Drawable from its definition."""
    position = Vector2(shape_def.x, shape_def.y)

    if shape_def.kind == "rect":
        if shape_def.width is None or shape_def.height is None:
            raise SceneError(f"rect at ({shape_def.x}, {shape_def.y}) needs width and height")
        return Rect(position, shape_def.width, shape_def.height, glyph=shape_def.glyph)

    if shape_def.kind == "circle":
        if shape_def.radius is None:
            raise SceneError(f"circle at ({shape_def.x}, {shape_def.y}) needs a radius")
        return Circle(position, shape_def.radius, glyph=shape_def.glyph)

    raise SceneError(f"Unknown shape kind: {shape_def.kind!r}")

def build_shapes(scene: SceneDef) -> List[Drawable]:
    """Instantiates every shape in a scene, preserving file order."""
    return [build_shape(shape_def) for shape_def in scene.shapes]
