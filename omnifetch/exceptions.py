#!/usr/bin/env python3
"""
Exception types raised while collecting and rendering system facts.

Every error is fatal: probes raise, the driver reports the first one and exits.
"""

from typing import Optional


class OmnifetchError(Exception):
    """Base exception for all omnifetch errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ExecutionError(OmnifetchError):
    """Raised when a command cannot be spawned or exits non-zero."""

    def __init__(self, command: str, returncode: Optional[int] = None,
                 details: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        if returncode is None:
            message = f"exec failed: {command}"
        else:
            message = f"exec failed: {command} (exit status {returncode})"
        super().__init__(message, details)


class EncodingError(OmnifetchError):
    """Raised when a command writes output that is not valid text."""

    def __init__(self, command: str, details: Optional[str] = None):
        self.command = command
        super().__init__(f"invalid output from: {command}", details)


class FileReadError(OmnifetchError):
    """Raised when a file cannot be read."""

    def __init__(self, path: str, details: Optional[str] = None):
        self.path = path
        super().__init__(f"failed to read {path}", details)


class ParseError(OmnifetchError):
    """Raised when command output does not match the expected layout."""

    pass


class MissingDataError(ParseError):
    """Raised when an expected line or field is absent."""

    pass


class InconsistentDataError(ParseError):
    """Raised when output contradicts itself (e.g. two active boot environments)."""

    pass


class EnvironmentVariableError(OmnifetchError):
    """Raised when a required environment variable is unset."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"failed to get {name.lower()}", f"${name} is not set")


class ClockError(OmnifetchError):
    """Raised when the system clock reads earlier than the boot time."""

    pass
