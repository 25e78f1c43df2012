"""
ASCII Viewport - engine/log.py
Root logging setup. Modules log through logging.getLogger(__name__).
"""

from __future__ import annotations
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_HANDLER: Optional[logging.Handler] = None

def configure_logging(level: str = "INFO") -> None:
    """Installs a single stderr handler on the root logger. Safe to call twice."""
    global _HANDLER
    root = logging.getLogger()

    if _HANDLER is not None:
        root.removeHandler(_HANDLER)

    _HANDLER = logging.StreamHandler(sys.stderr)
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_HANDLER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
