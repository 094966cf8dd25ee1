#!/usr/bin/env python3
"""
Boot environment probe.
"""

from .base import Probe
from ..exceptions import ParseError, MissingDataError, InconsistentDataError


def format_boot_environments(output: str) -> str:
    """
    Summarize `beadm list -H` output.

    Records are ``name;uuid;flags;mountpoint;space;policy;created``. The flag
    ``N`` marks the boot environment in use now, ``R`` the one active on
    reboot. Each flag must appear on exactly one record.
    """
    next_be = None
    current_be = None

    for line in output.splitlines():
        fields = line.split(";")
        if len(fields) < 3:
            raise ParseError(f"unexpected beadm record: {line!r}")
        name, flags = fields[0], fields[2]

        if "R" in flags:
            if next_be is not None:
                raise InconsistentDataError(
                    f"multiple boot environments active on reboot: {next_be}, {name}")
            next_be = name
        if "N" in flags:
            if current_be is not None:
                raise InconsistentDataError(
                    f"multiple boot environments active now: {current_be}, {name}")
            current_be = name

    if next_be is None:
        raise MissingDataError("couldn't find next be")
    if current_be is None:
        raise MissingDataError("couldn't find current be")

    if next_be == current_be:
        return current_be
    return f"{current_be} (staged {next_be})"


class BootEnvironmentProbe(Probe):
    """Current boot environment, and the staged one if a different BE is activated."""

    label = "Boot Env"

    def run(self) -> str:
        return format_boot_environments(self.run_command("beadm list -H"))
