"""
Hardware detection.

Describes the CPU the benchmark runs on. The benchmark uses one worker
thread per available core by default.
"""

from dataclasses import dataclass
import os
import platform


@dataclass(frozen=True)
class DeviceInfo:
    """
    Information about the compute device.

    Attributes:
        device_type: Always 'cpu'
        name: Human-readable processor name
        core_count: Number of logical cores usable by this process (>= 1)
    """
    device_type: str
    name: str
    core_count: int

    def __str__(self) -> str:
        return f"CPU ({self.name}, {self.core_count} cores)"


def _usable_core_count() -> int:
    # Honour CPU affinity where the platform exposes it
    if hasattr(os, 'sched_getaffinity'):
        try:
            return max(1, len(os.sched_getaffinity(0)))
        except OSError:
            pass
    return max(1, os.cpu_count() or 1)


def get_cpu_info() -> DeviceInfo:
    """
    Get CPU device info.

    Returns:
        DeviceInfo for the CPU
    """
    processor = platform.processor()
    if not processor:
        processor = platform.machine() or "Unknown CPU"

    return DeviceInfo(
        device_type='cpu',
        name=processor,
        core_count=_usable_core_count(),
    )
