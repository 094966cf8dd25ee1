#!/usr/bin/env python3
"""
Color placeholders and their ANSI escape sequences.

- $(c0) -> reset color/formatting
- $(c1) -> orange
- $(c2) -> dim gray
"""

import os
import sys
from typing import Optional

NO_COLOR_ENV = "NO_COLOR"

RESET = "\x1b[0m"
ORANGE = "\x1b[38;5;208m"
DIM_GRAY = "\x1b[38;5;8m"

C0 = "$(c0)"
C1 = "$(c1)"
C2 = "$(c2)"

# accents reset first so they never stack
PLACEHOLDERS = {
    C0: RESET,
    C1: RESET + ORANGE,
    C2: RESET + DIM_GRAY,
}


def should_colorize() -> bool:
    """Color only when stdout is a terminal and NO_COLOR is absent."""
    if NO_COLOR_ENV in os.environ:
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def colorize(s: str, enabled: Optional[bool] = None) -> str:
    """Replace color placeholders with escape codes, or remove them when color is off."""
    if enabled is None:
        enabled = should_colorize()

    for placeholder, code in PLACEHOLDERS.items():
        s = s.replace(placeholder, code if enabled else "")
    return s
