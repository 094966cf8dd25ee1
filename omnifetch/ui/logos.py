#!/usr/bin/env python3
"""
Static logo assets, loaded once at import.
"""

import os
from typing import Tuple

LOGO_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logos")


def load_logo(name: str) -> Tuple[str, ...]:
    with open(os.path.join(LOGO_DIR, name), "r", encoding="utf-8") as f:
        return tuple(f.read().splitlines())


FENIX = load_logo("fenix.txt")
OMNIOS = load_logo("omnios.txt")
