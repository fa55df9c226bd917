"""
Mixed two-sample bootstrap.

Resamples from the pooled observations of both samples, then splits each
resample back into parts of len(a) and len(b). The resulting distribution
describes the statistic under the null hypothesis that both samples come
from the same population, which is what a bootstrap p-value needs.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from pybootstrap.core.validation import check_count
from pybootstrap.tuples import Distribution, TupledDistributions, TupledDistributionsBuilder
from pybootstrap.univariate.resamples import Resamples
from pybootstrap.univariate.sample import Sample


def mixed_bootstrap(
    a: Sample | ArrayLike,
    b: Sample | ArrayLike,
    nresamples: int,
    statistic: Callable[[Sample, Sample], Any],
    *,
    seed: int | None = None,
    arity: int | None = None,
) -> Distribution | TupledDistributions:
    """
    Bootstrap `statistic` over resamples of the pooled data.

    Args:
        a: First sample
        b: Second sample
        nresamples: Number of evaluations (>= 0)
        statistic: fn(a_part, b_part) -> float or tuple of floats
        seed: Random seed
        arity: Fields per statistic value, if known

    Returns:
        Distribution for scalar statistics, TupledDistributions otherwise.
    """
    a = a if isinstance(a, Sample) else Sample(a)
    b = b if isinstance(b, Sample) else Sample(b)
    nresamples = check_count(nresamples, "nresamples")

    n_a = len(a)
    joined = Sample(np.concatenate([a.as_array(), b.as_array()]))
    resamples = Resamples(joined, seed=seed)
    builder = TupledDistributionsBuilder(nresamples, arity=arity)

    for _ in range(nresamples):
        resample = resamples.next().as_array()
        builder.push(statistic(Sample._view(resample[:n_a]), Sample._view(resample[n_a:])))

    return builder.complete()
