#!/usr/bin/env python3
"""
Module initialization - imports all probes and provides functions to build and run them in display order.
"""

import logging
from typing import Dict, List, Optional

from .base import Probe, run_command, run_command_string

from .system import (
    OSReleaseProbe, KernelProbe, ZonenameProbe, CPUProbe, UptimeProbe, MemoryProbe
)
from .bootloader import BootEnvironmentProbe
from .services import SMFProbe, ZonesProbe
from .storage import ZFSProbe

logger = logging.getLogger("omnifetch.modules")


def get_all_probes() -> List[Probe]:
    """Return one instance of every probe, in display order."""
    return [
        OSReleaseProbe(),
        KernelProbe(),
        ZonenameProbe(),
        BootEnvironmentProbe(),
        CPUProbe(),
        UptimeProbe(),
        MemoryProbe(),
        SMFProbe(),
        ZonesProbe(),
        ZFSProbe()
    ]


def collect_facts(probes: Optional[List[Probe]] = None) -> Dict[str, str]:
    """
    Run every probe in order and map its label to its value.

    The first probe to raise aborts collection; nothing partial is returned.
    """
    if probes is None:
        probes = get_all_probes()

    facts = {}
    for probe in probes:
        logger.debug(f"Running probe: {probe.label}")
        facts[probe.label] = probe.run()

    return facts
