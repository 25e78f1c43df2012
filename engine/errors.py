"""
ASCII Viewport - engine/errors.py
Exception hierarchy. The geometry core is total and raises none of these.
"""

from __future__ import annotations

class ViewportError(Exception):
    """Base class for every error raised by the application."""


class TerminalError(ViewportError):
    """The terminal context could not be opened or written to. Fatal."""


class SceneError(ViewportError):
    """A scene definition names an unknown shape kind or is malformed."""
