"""
ASCII Viewport - run.py
Main entry point for the interactive viewport.
"""

import logging
import sys
from pathlib import Path

# Ensure we can import the project packages when run from a checkout
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from engine.data_loader import build_shapes, load_options, load_scene
from engine.errors import TerminalError
from engine.log import configure_logging
from engine.renderer import Renderer
from geometry.vector2 import Vector2
from ui.screens import ViewportState
from ui.states import Engine
from ui.terminal import Terminal

logger = logging.getLogger("run")

def main() -> int:
    options = load_options()
    configure_logging(options.log_level)

    scene = load_scene("demo")
    # Shapes outlive the renderer: this list owns them for the whole session.
    shapes = build_shapes(scene)

    renderer = Renderer(options, position=Vector2(scene.start_x, scene.start_y))
    for shape in shapes:
        renderer.add_drawable(shape)

    cell_width = 2 if options.spaced else 1
    terminal = Terminal(
        width=options.viewport_width * cell_width,
        height=options.viewport_height + 1,
        title=options.title,
    )
    engine = Engine(terminal=terminal, renderer=renderer, initial_state_cls=ViewportState)

    try:
        engine.run()
    except TerminalError as exc:
        logger.error("Fatal terminal error: %s", exc)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
