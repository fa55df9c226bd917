"""
Bootstrap backends.
"""

from pybootstrap.univariate.backends.cpu import (
    CPUParallelBackend,
    CPUSequentialBackend,
    nested_resample,
)

__all__ = [
    "CPUParallelBackend",
    "CPUSequentialBackend",
    "nested_resample",
]
