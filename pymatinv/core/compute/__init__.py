"""
Shared compute infrastructure for PyMatInv.

This module provides hardware detection, timing utilities, and the
tolerance tiers shared by the matrix engine and the benchmark harness.

Submodules:
    device: CPU description and core count
    timing: Execution timing utilities
    tolerances: Equality/zero tolerance per scalar kind
"""

from pymatinv.core.compute.device import DeviceInfo, get_cpu_info
from pymatinv.core.compute.timing import Timer, timed
from pymatinv.core.compute.tolerances import (
    EXACT,
    FLOATING,
    MATRIX_TOLERANCE,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "get_cpu_info",
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "FLOATING",
    "EXACT",
    "MATRIX_TOLERANCE",
    "select_tolerance",
]
