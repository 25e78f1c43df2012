"""
ASCII Viewport - ui/screens.py
Implementations of the UI Screen States.
"""
from typing import Dict, Optional
import tcod

from engine.renderer import Direction
from ui.states import BaseState, Engine
from ui.terminal import Terminal

KeySym = tcod.event.KeySym

DIRECTION_KEYS: Dict[KeySym, Direction] = {
    KeySym.UP: Direction.UP,
    KeySym.W: Direction.UP,
    KeySym.K: Direction.UP,
    KeySym.DOWN: Direction.DOWN,
    KeySym.S: Direction.DOWN,
    KeySym.J: Direction.DOWN,
    KeySym.LEFT: Direction.LEFT,
    KeySym.A: Direction.LEFT,
    KeySym.H: Direction.LEFT,
    KeySym.RIGHT: Direction.RIGHT,
    KeySym.D: Direction.RIGHT,
    KeySym.L: Direction.RIGHT,
}

QUIT_KEYS = (KeySym.Q, KeySym.ESCAPE)
HELP_KEYS = (KeySym.SLASH, KeySym.QUESTION, KeySym.F1)

def direction_for_key(sym: KeySym) -> Optional[Direction]:
    """Maps a key to a pan direction, or None for non-movement keys."""
    return DIRECTION_KEYS.get(sym)


class ViewportState(BaseState):
    """The pannable scene view with a one-line status bar underneath."""

    def on_render(self, terminal: Terminal) -> None:
        renderer = self.engine.renderer
        renderer.render()
        terminal.blit_lines(renderer.lines())

        pos = renderer.position
        terminal.root_console.print(
            0, renderer.rows,
            f"Position: ({pos.x:g}, {pos.y:g})   [Arrows/WASD] Pan   [?] Help   [Q] Quit",
            fg=(150, 150, 150),
        )

    def ev_keydown(self, event: tcod.event.KeyDown) -> None:
        if event.sym in QUIT_KEYS:
            self.engine.running = False
        elif event.sym in HELP_KEYS:
            self.engine.change_state(HelpState(self.engine, self))
        else:
            direction = direction_for_key(event.sym)
            if direction is not None:
                self.engine.renderer.walk(direction, self.engine.renderer.options.pan_step)


class HelpState(BaseState):
    """Key legend drawn over the paused scene."""

    LEGEND = (
        "Arrows / WASD / HJKL   pan",
        "?  or  F1              this help",
        "Q  or  Esc             quit",
    )

    def __init__(self, engine: Engine, parent_state: ViewportState):
        super().__init__(engine)
        self.parent_state = parent_state

    def on_render(self, terminal: Terminal) -> None:
        self.parent_state.on_render(terminal)
        width = min(terminal.width - 2, max(len(line) for line in self.LEGEND) + 4)
        height = min(terminal.height - 2, len(self.LEGEND) + 2)
        terminal.root_console.draw_frame(
            1, 1, width, height,
            "Help", clear=True, fg=(255, 255, 255), bg=(0, 0, 0)
        )
        for i, line in enumerate(self.LEGEND[: height - 2]):
            terminal.root_console.print(3, 2 + i, line[: width - 4])

    def ev_keydown(self, event: tcod.event.KeyDown) -> None:
        if event.sym == KeySym.Q:
            self.engine.running = False
        else:
            self.engine.change_state(self.parent_state)
