"""
Core infrastructure for pybootstrap.

Shared abstractions used by the univariate resampling module.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    backends: Processor detection
    compute: Timing utilities
"""

from pybootstrap.core.protocols import Backend
from pybootstrap.core.result import Result
from pybootstrap.core.exceptions import (
    PyBootstrapError,
    ValidationError,
    DimensionError,
    BuilderStateError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyBootstrapError",
    "ValidationError",
    "DimensionError",
    "BuilderStateError",
]
