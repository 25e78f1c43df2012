"""
ASCII Viewport - ui/terminal.py
TCOD terminal: owns the root console the glyph grid is blitted onto.
====================================================================
Stack:       Python 3.11+ | tcod
Status:      Stable.
"""

from __future__ import annotations
from typing import List, Optional
import tcod

from engine.errors import TerminalError

class Terminal:
    """
    Manages the tcod root console and frame presentation.
    """
    def __init__(self, width: int, height: int, title: str = "ASCII Viewport"):
        self.width = width
        self.height = height
        self.title = title
        self.root_console = tcod.console.Console(width, height)
        self.context: Optional[tcod.context.Context] = None

    def clear(self) -> None:
        """Clear the console with blanks."""
        self.root_console.clear()

    def blit_lines(self, lines: List[str]) -> None:
        """Writes text rows from the top-left corner. Overflow is clipped."""
        for y, line in enumerate(lines[: self.height]):
            self.root_console.print(0, y, line[: self.width])

    def present(self, context: tcod.context.Context) -> None:
        """Present the current console to the screen."""
        try:
            context.present(self.root_console)
        except RuntimeError as exc:
            raise TerminalError(f"Failed to present frame: {exc}") from exc
