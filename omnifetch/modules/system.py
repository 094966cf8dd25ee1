#!/usr/bin/env python3
"""
System identity and hardware probes.
"""

import time
from collections import Counter
from typing import Optional

from .base import Probe, read_first_line
from ..exceptions import ParseError, MissingDataError, ClockError

RELEASE_FILE = "/etc/release"
SECONDS_PER_DAY = 60 * 60 * 24


def format_cpu_brands(output: str) -> str:
    """
    Count CPUs per brand in `kstat -p cpu_info:::brand` output.

    Each line looks like ``cpu_info:0:cpu_info0:brand<TAB>Intel(r) Xeon(r) ...``.
    Brands are listed in the order they are first seen.
    """
    counts = Counter()
    for line in output.splitlines():
        fields = line.split("\t")
        if len(fields) < 2:
            raise ParseError(f"unexpected cpu_info line: {line!r}")
        counts[fields[1]] += 1

    return ", ".join(f"{count} x {brand}" for brand, count in counts.items())


def parse_boot_time(output: str) -> int:
    """Extract the boot epoch from `kstat -p unix:0:system_misc:boot_time` output."""
    fields = output.split("\t")
    if len(fields) < 2:
        raise MissingDataError(f"boot_time value missing from: {output!r}")

    try:
        return int(fields[1].strip())
    except ValueError as e:
        raise ParseError(f"invalid boot_time value: {fields[1]!r}") from e


def format_uptime(boot_time: int, now: int) -> str:
    """Render whole days elapsed between boot and now."""
    if now < boot_time:
        raise ClockError(f"system clock ({now}) is earlier than boot time ({boot_time})")

    days = (now - boot_time) // SECONDS_PER_DAY
    return f"up {days} days"


def parse_memory(output: str) -> str:
    """
    Pull the memory figure from `lgrpinfo -m` output.

    The second line reads like ``        Memory: installed 64G, allocated 12G, free 52G``;
    everything after the first colon is returned as printed.
    """
    lines = output.splitlines()
    if len(lines) < 2:
        raise MissingDataError("expected at least 2 lines of lgrpinfo output")

    fields = lines[1].split(":")
    if len(fields) < 2:
        raise ParseError(f"unexpected lgrpinfo memory line: {lines[1]!r}")

    return fields[1].strip()


class OSReleaseProbe(Probe):
    """Operating system release, from the first line of /etc/release."""

    label = "OS"

    def __init__(self, release_file: str = RELEASE_FILE):
        self.release_file = release_file

    def run(self) -> str:
        return read_first_line(self.release_file)


class KernelProbe(Probe):
    """Kernel version string."""

    label = "Kernel"

    def run(self) -> str:
        return self.run_command("uname -v")


class ZonenameProbe(Probe):
    """Name of the zone this process runs in."""

    label = "Zonename"

    def run(self) -> str:
        name = self.run_command("zonename")
        if not name:
            raise MissingDataError("zonename returned an empty name")
        return name


class CPUProbe(Probe):
    """Processor count grouped by brand."""

    label = "CPU"

    def run(self) -> str:
        return format_cpu_brands(self.run_command("kstat -p cpu_info:::brand"))


class UptimeProbe(Probe):
    """Whole days since boot."""

    label = "Uptime"

    def run(self, now: Optional[int] = None) -> str:
        output = self.run_command("kstat -p unix:0:system_misc:boot_time")
        boot_time = parse_boot_time(output)
        if now is None:
            now = int(time.time())
        return format_uptime(boot_time, now)


class MemoryProbe(Probe):
    """Installed memory as reported by the locality group tools."""

    label = "Memory"

    def run(self) -> str:
        return parse_memory(self.run_command("lgrpinfo -m"))
