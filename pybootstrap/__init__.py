"""
pybootstrap: bootstrap sampling distributions for performance measurements.

Resamples two independent sets of observations to build the empirical
distribution of any statistic of them, in parallel across processors.

Submodules:
    univariate: Samples, resampling, the bootstrap engine and its
        consumers (percentiles, outliers, KDE, mixed bootstrap)
    tuples: Distributions and their builders
    core: Result envelope, exceptions, validation, timing
"""

__version__ = "0.1.0"

from pybootstrap.tuples import (
    Distribution,
    TupledDistributions,
    TupledDistributionsBuilder,
)
from pybootstrap.univariate import (
    Sample,
    Resamples,
    Percentiles,
    bootstrap,
    run_bootstrap,
    mixed_bootstrap,
)
from pybootstrap import univariate

__all__ = [
    "__version__",
    "Distribution",
    "TupledDistributions",
    "TupledDistributionsBuilder",
    "Sample",
    "Resamples",
    "Percentiles",
    "bootstrap",
    "run_bootstrap",
    "mixed_bootstrap",
    "univariate",
]
