#!/usr/bin/env python3
"""
Service manager and zone probes.
"""

from .base import Probe


def count_online_services(output: str) -> int:
    """Count `svcs -H -o state` lines reporting ``online``."""
    return sum(1 for line in output.splitlines() if line == "online")


def count_lines(output: str) -> int:
    return len(output.splitlines())


class SMFProbe(Probe):
    """Number of SMF services currently online."""

    label = "SMF"

    def run(self) -> str:
        online = count_online_services(self.run_command("svcs -H -o state"))
        return f"{online} svcs online"


class ZonesProbe(Probe):
    """Running zones against all configured zones."""

    label = "Zones"

    def run(self) -> str:
        running = count_lines(self.run_command("zoneadm list -n"))
        total = count_lines(self.run_command("zoneadm list -cn"))
        return f"{running} running ({total} total)"
