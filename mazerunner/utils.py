"""Locating the directory the game was started from."""

from __future__ import annotations

import os
import sys


def executable_dir() -> str:
    """Absolute directory of the running program, or ``""`` if unknown."""
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return ""
    return os.path.dirname(os.path.abspath(program))