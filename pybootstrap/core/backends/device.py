"""
Processor detection.

Reports the CPU the process runs on and how many workers the parallel
resampling path may use.
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
        n_cpus: Processors usable by this process (at least 1)
    """
    device_type: str
    name: str
    n_cpus: int

    def __str__(self) -> str:
        return f"CPU ({self.name}, {self.n_cpus} cores)"

    @property
    def is_parallel(self) -> bool:
        """True if more than one worker can run at once."""
        return self.n_cpus > 1


def available_cpus() -> int:
    """
    Number of processors this process may run on.

    Honours CPU affinity masks where the platform exposes them, so that
    containers pinned to a subset of cores do not oversubscribe.
    """
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
        n_cpus=available_cpus(),
    )
