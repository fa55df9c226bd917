"""
Solver dispatch for the two-sample bootstrap.

bootstrap() returns the distributions; run_bootstrap() returns the full
BootstrapSolution with timing and run metadata.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Literal

from numpy.typing import ArrayLike

from pybootstrap.core.exceptions import ValidationError
from pybootstrap.tuples import Distribution, TupledDistributions
from pybootstrap.univariate.backends.cpu import CPUParallelBackend, CPUSequentialBackend
from pybootstrap.univariate.design import BootstrapDesign
from pybootstrap.univariate.sample import Sample
from pybootstrap.univariate.solution import BootstrapSolution


BackendChoice = Literal['auto', 'sequential', 'parallel']


def _get_backend(backend: str, design: BootstrapDesign):
    """
    Select the execution strategy.

    'auto' goes parallel only when there are several workers and more
    resamples than observations in both samples combined.
    """
    if backend == 'auto':
        backend = 'parallel' if design.use_parallel else 'sequential'
    if backend == 'sequential':
        return CPUSequentialBackend()
    if backend == 'parallel':
        return CPUParallelBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'auto', 'sequential' or 'parallel'."
    )


def run_bootstrap(
    a: Sample | ArrayLike,
    b: Sample | ArrayLike,
    nresamples: int,
    statistic: Callable[[Sample, Sample], Any],
    *,
    workers: int | None = None,
    seed: int | None = None,
    arity: int | None = None,
    backend: BackendChoice = 'auto',
) -> BootstrapSolution:
    """
    Two-sample bootstrap with run metadata.

    Parameters
    ----------
    a, b : Sample or array-like
        Independent samples. Read concurrently by every worker; they are
        copied into read-only Samples if given as arrays.
    nresamples : int
        Number of statistic evaluations (>= 0). Every returned field has
        exactly this many entries.
    statistic : callable
        fn(a_resample, b_resample) -> float or tuple of floats. The Sample
        arguments are only valid during the call. Must be safe to call
        from several threads at once.
    workers : int or None
        Parallel workers. Defaults to the available processors.
    seed : int or None
        Random seed. Results are reproducible for a given seed, strategy
        and worker count.
    arity : int or None
        Fields per statistic value. Only needed to shape empty results
        of tuple statistics (nresamples=0).
    backend : str
        'auto' (default), 'sequential' or 'parallel'.

    Returns
    -------
    BootstrapSolution
    """
    design = BootstrapDesign.for_bootstrap(
        a, b, nresamples, statistic,
        workers=workers,
        arity=arity,
        seed=seed,
    )

    be = _get_backend(backend, design)
    result = be.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return BootstrapSolution(_result=result, _design=design)


def bootstrap(
    a: Sample | ArrayLike,
    b: Sample | ArrayLike,
    nresamples: int,
    statistic: Callable[[Sample, Sample], Any],
    *,
    workers: int | None = None,
    seed: int | None = None,
    arity: int | None = None,
    backend: BackendChoice = 'auto',
) -> Distribution | TupledDistributions:
    """
    Two-sample bootstrap.

    Evaluates `statistic` on exactly `nresamples` pairs of resamples of
    `a` and `b`, in parallel when it pays off. See run_bootstrap() for
    the parameters.

    Returns
    -------
    Distribution
        If the statistic returns a scalar.
    TupledDistributions
        If it returns a tuple; one Distribution per field, aligned by
        evaluation.

    Examples
    --------
    >>> diff = bootstrap([1.0, 2.0, 3.0], [4.0, 5.0], 100,
    ...                  lambda x, y: x.mean() - y.mean())
    >>> len(diff)
    100
    """
    return run_bootstrap(
        a, b, nresamples, statistic,
        workers=workers,
        seed=seed,
        arity=arity,
        backend=backend,
    ).distributions
