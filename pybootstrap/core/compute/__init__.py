"""
Shared compute infrastructure for pybootstrap.

Submodules:
    timing: Execution timing utilities
"""

from pybootstrap.core.compute.timing import Timer

__all__ = [
    "Timer",
]
