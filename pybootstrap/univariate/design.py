"""
Design class for the two-sample bootstrap.

BootstrapDesign encapsulates all inputs the backends need. Immutable,
validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from numpy.typing import ArrayLike

from pybootstrap.core.backends.device import get_cpu_info
from pybootstrap.core.exceptions import ValidationError
from pybootstrap.core.validation import check_count
from pybootstrap.univariate.sample import Sample


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for a two-sample bootstrap run.

    Attributes:
        a: First sample.
        b: Second sample.
        statistic: fn(a_resample, b_resample) -> float or tuple of floats.
            Called from several threads at once on the parallel path, so it
            must not mutate shared state.
        nresamples: Number of statistic evaluations to produce.
        workers: Upper bound on parallel workers.
        arity: Number of fields the statistic returns, or None to learn it
            from the first evaluation.
        seed: Random seed for reproducibility (per worker count).
    """
    a: Sample
    b: Sample
    statistic: Callable[[Sample, Sample], Any]
    nresamples: int
    workers: int
    arity: int | None
    seed: int | None

    @classmethod
    def for_bootstrap(
        cls,
        a: Sample | ArrayLike,
        b: Sample | ArrayLike,
        nresamples: int,
        statistic: Callable[[Sample, Sample], Any],
        *,
        workers: int | None = None,
        arity: int | None = None,
        seed: int | None = None,
    ) -> BootstrapDesign:
        """
        Create a bootstrap design with validation.

        Args:
            a: First sample, a Sample or 1D array-like.
            b: Second sample, a Sample or 1D array-like.
            nresamples: Number of bootstrap evaluations. Must be >= 0.
            statistic: Function of two samples.
            workers: Parallel workers. Defaults to the processors available
                to this process. Must be >= 1.
            arity: Fields per statistic value, if known. Must be >= 1.
            seed: Random seed.

        Returns:
            Validated BootstrapDesign.

        Raises:
            ValidationError: If inputs are invalid.
        """
        if not isinstance(a, Sample):
            a = Sample(a)
        if not isinstance(b, Sample):
            b = Sample(b)

        if not callable(statistic):
            raise ValidationError(
                f"statistic: expected a callable, got {type(statistic).__name__}"
            )

        nresamples = check_count(nresamples, "nresamples")

        if workers is None:
            workers = get_cpu_info().n_cpus
        workers = check_count(workers, "workers", minimum=1)

        if arity is not None:
            arity = check_count(arity, "arity", minimum=1)

        if seed is not None:
            seed = check_count(seed, "seed")

        return cls(
            a=a,
            b=b,
            statistic=statistic,
            nresamples=nresamples,
            workers=workers,
            arity=arity,
            seed=seed,
        )

    @property
    def use_parallel(self) -> bool:
        """
        Whether the automatic strategy picks the parallel path.

        Only worth it when there are several workers and more resamples
        than observations; otherwise drawing the resamples dominates.
        """
        return self.workers > 1 and self.nresamples > len(self.a) + len(self.b)
