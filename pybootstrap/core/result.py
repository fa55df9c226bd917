"""
Generic result container for pybootstrap computations.

The Result class is the envelope every backend returns. It carries the
domain payload (the bootstrap distributions) together with run metadata,
so that timing and diagnostics travel with the values that produced them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (strategy, workers, granularity)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for bootstrap computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (distributions, counts)
        info: Structured metadata (strategy, worker count, granularity)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=BootParams(distributions=dist, nresamples=100, arity=1),
        ...     info={'strategy': 'sequential', 'workers': 1},
        ...     timing={'total_seconds': 0.01, 'resampling': 0.009},
        ...     backend_name='cpu_sequential'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
