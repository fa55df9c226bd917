"""
Shared backend infrastructure for pybootstrap.

Submodules:
    device: Processor detection and worker count
"""

from pybootstrap.core.backends.device import (
    DeviceInfo,
    available_cpus,
    get_cpu_info,
)

__all__ = [
    "DeviceInfo",
    "available_cpus",
    "get_cpu_info",
]
