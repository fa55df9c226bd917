"""
Common data structures for the univariate bootstrap.

BootParams is the parameter payload wrapped by Result[P] and exposed
through BootstrapSolution.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pybootstrap.tuples import Distribution, TupledDistributions


@dataclass(frozen=True)
class BootParams:
    """
    Parameter payload for bootstrap results.

    - distributions: one Distribution (scalar statistic) or a
      TupledDistributions (tuple statistic)
    - nresamples: entries per field
    - arity: number of fields
    """
    distributions: Distribution | TupledDistributions
    nresamples: int
    arity: int


def ceil_sqrt(n: int) -> int:
    """Smallest integer r with r * r >= n."""
    r = math.isqrt(n)
    return r if r * r == n else r + 1


def params_from(distributions: Distribution | TupledDistributions) -> BootParams:
    if isinstance(distributions, TupledDistributions):
        return BootParams(
            distributions=distributions,
            nresamples=distributions.nresamples,
            arity=distributions.arity,
        )
    return BootParams(
        distributions=distributions,
        nresamples=len(distributions),
        arity=1,
    )
