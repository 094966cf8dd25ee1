#!/usr/bin/env python3
"""
Renders collected facts beside the logo.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .colors import C0, C1, C2, colorize, should_colorize

logger = logging.getLogger("omnifetch.render")


def build_output_block(user: str, hostname: str, facts: Dict[str, str],
                       logo_b: Sequence[str]) -> List[str]:
    """
    Build the lines shown to the right of the primary logo.

    Layout: the word-mark logo, a blank line, ``user@host``, a dashed
    separator as wide as the banner, a blank line, then one ``label: value``
    line per fact in insertion order.
    """
    output = list(logo_b)
    output.append("")

    output.append(f"{C1}{user}{C2}@{C1}{hostname}")
    num_dashes = len(user) + 1 + len(hostname)
    output.append(f"{C2}{'-' * num_dashes}")
    output.append("")

    for key, value in facts.items():
        output.append(f"{C1}{key}:{C0} {value}")

    return output


def render(user: str, hostname: str, facts: Dict[str, str],
           logo_a: Sequence[str], logo_b: Sequence[str],
           color: Optional[bool] = None) -> List[str]:
    """
    Interleave the output block with the primary logo, one line per logo line.

    Block lines beyond the length of ``logo_a`` are not rendered. The result
    starts and ends with an empty line.
    """
    if color is None:
        color = should_colorize()

    output = build_output_block(user, hostname, facts, logo_b)
    if len(output) > len(logo_a):
        logger.debug(f"Dropping {len(output) - len(logo_a)} line(s) that do not fit beside the logo")

    lines = [""]
    for i, logo_line in enumerate(logo_a):
        output_line = output[i] if i < len(output) else ""
        lines.append(colorize(f"{logo_line} {output_line}", color))
    lines.append("")

    return lines
