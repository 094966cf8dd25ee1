#!/usr/bin/env python3
"""
Base module for all probes, plus the command executor they share.
"""

import subprocess
import logging
from typing import List

from ..exceptions import ExecutionError, EncodingError, FileReadError, MissingDataError

logger = logging.getLogger("omnifetch.modules")


def run_command(args: List[str]) -> str:
    """
    Run a command and return its trimmed standard output.

    Args:
        args: Program followed by its arguments. No shell is involved.

    Returns:
        Standard output with leading and trailing whitespace removed

    Raises:
        ExecutionError: The program could not be started or exited non-zero
        EncodingError: The output is not valid UTF-8
    """
    if not args:
        raise ValueError("run_command requires at least one argument")

    command = " ".join(args)
    logger.debug(f"Running command: {command}")

    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False
        )
    except OSError as e:
        raise ExecutionError(command, details=str(e)) from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise ExecutionError(command, result.returncode, stderr or None)

    try:
        output = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(command, str(e)) from e

    return output.strip()


def run_command_string(command: str) -> str:
    """Split a command line on whitespace and run it. Arguments cannot contain spaces."""
    return run_command(command.split())


def read_first_line(file_path: str) -> str:
    """Return the first line of a file with surrounding whitespace removed."""
    try:
        with open(file_path, "r") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(file_path, str(e)) from e

    lines = content.splitlines()
    if not lines:
        raise MissingDataError(f"expected at least 1 line in {file_path}")

    return lines[0].strip()


class Probe:
    """Base class for all probes. Each probe produces one labeled fact."""

    label = ""

    def run(self) -> str:
        """Collect the fact and return its display value."""
        raise NotImplementedError("Subclasses must implement this method")

    def run_command(self, command: str) -> str:
        return run_command_string(command)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.label!r}>"
