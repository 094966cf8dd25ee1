#!/usr/bin/env python3
"""
Storage related probes.
"""

from .base import Probe
from ..exceptions import ParseError


def format_zpools(output: str) -> str:
    """Render `zpool list -Ho name,cap,alloc,size` as ``name alloc/size`` entries."""
    zpools = []
    for line in output.splitlines():
        columns = line.split()
        if len(columns) < 4:
            raise ParseError(f"unexpected zpool list line: {line!r}")
        # cap is read but not shown
        name, _cap, alloc, size = columns[:4]
        zpools.append(f"{name} {alloc}/{size}")

    return ", ".join(zpools)


class ZFSProbe(Probe):
    """Allocated and total size of every imported pool."""

    label = "ZFS"

    def run(self) -> str:
        return format_zpools(self.run_command("zpool list -Ho name,cap,alloc,size"))
