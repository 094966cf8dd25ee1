#!/usr/bin/env python3
"""
UI module initialization for omnifetch.
"""

from .colors import colorize, should_colorize
from .logos import FENIX, OMNIOS
from .render import build_output_block, render
