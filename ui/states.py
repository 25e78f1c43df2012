"""
ASCII Viewport - ui/states.py
State machine for the interactive loop and event routing.
"""

from __future__ import annotations
import logging
from typing import Any
import tcod

from engine.errors import TerminalError
from engine.renderer import Renderer
from ui.terminal import Terminal

logger = logging.getLogger(__name__)

class BaseState(tcod.event.EventDispatch[Any]):
    """
    Protocol for a screen state.
    Intercepts tcod events and renders to the console.
    """
    def __init__(self, engine: "Engine"):
        super().__init__()
        self.engine = engine

    def on_render(self, terminal: Terminal) -> None:
        """Called every frame to draw to the console."""
        pass


class Engine:
    """
    Central loop controller handling the TCOD context, Terminal, Renderer and state.
    """
    def __init__(self, terminal: Terminal, renderer: Renderer, initial_state_cls: type[BaseState]):
        self.terminal = terminal
        self.renderer = renderer
        self.active_state: BaseState = initial_state_cls(self)
        self.running = True

    def change_state(self, new_state: BaseState) -> None:
        """Transitions to a new Active State."""
        self.active_state = new_state

    def frame(self, context: tcod.context.Context) -> None:
        """One full render pass, presented atomically."""
        self.terminal.clear()
        self.active_state.on_render(self.terminal)
        self.terminal.present(context)

    def run(self) -> None:
        """Main blocking event loop. The context restores the terminal on any exit."""
        try:
            context = tcod.context.new_terminal(
                self.terminal.width,
                self.terminal.height,
                title=self.terminal.title,
                vsync=True,
            )
        except RuntimeError as exc:
            raise TerminalError(f"Could not open terminal: {exc}") from exc

        logger.info("Terminal opened (%dx%d)", self.terminal.width, self.terminal.height)
        try:
            with context:
                self.terminal.context = context

                while self.running:
                    # 1. Render
                    self.frame(context)

                    # 2. Handle Inputs
                    for event in tcod.event.wait():
                        context.convert_event(event)

                        if isinstance(event, tcod.event.Quit):
                            self.running = False
                            break

                        # Route to active state handler
                        self.active_state.dispatch(event)
                        if not self.running:
                            break
        finally:
            self.terminal.context = None
            logger.info("Terminal closed")
