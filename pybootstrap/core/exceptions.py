"""
Exception hierarchy for pybootstrap.

All exceptions inherit from PyBootstrapError to allow catching any
library-specific error. The resampling engine itself raises nothing of its
own: these are raised at the API boundary (input validation) and by the
distribution builders when they are misused.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyBootstrapError(Exception):
    """Base exception for all pybootstrap errors."""
    pass


class ValidationError(PyBootstrapError):
    """
    Input validation failed.

    Raised when user-provided inputs (sample data, resample counts,
    worker counts, backend names) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions or statistic arity are incorrect or inconsistent.

    Raised when sample data is not one-dimensional, or when a statistic
    returns a different number of fields than the builder accumulating it.

    Attributes:
        expected: Expected dimension or arity, if known
        actual: Observed dimension or arity, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class BuilderStateError(PyBootstrapError):
    """
    A distribution builder was used after it was completed.

    complete() transfers ownership of the accumulated values to the
    returned distributions; any later push() or extend() on the same
    builder raises this error.

    Attributes:
        operation: Name of the rejected operation ('push', 'extend', ...)
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
