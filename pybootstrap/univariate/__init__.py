"""
Univariate bootstrap analysis.

Provides the two-sample bootstrap engine plus the utilities that consume
its distributions: percentiles, Tukey outlier classification, kernel
density estimation and the mixed (pooled) bootstrap.

Usage:
    from pybootstrap.univariate import Sample, bootstrap

    diff = bootstrap(a, b, 10_000, lambda x, y: x.mean() - y.mean())
    lower, upper = diff.confidence_interval(0.95)
"""

from pybootstrap.univariate.sample import Sample
from pybootstrap.univariate.resamples import Resamples
from pybootstrap.univariate.percentiles import Percentiles
from pybootstrap.univariate.design import BootstrapDesign
from pybootstrap.univariate.solution import BootstrapSolution
from pybootstrap.univariate.solvers import bootstrap, run_bootstrap
from pybootstrap.univariate.mixed import mixed_bootstrap
from pybootstrap.univariate.outliers import Label, LabeledSample, tukey
from pybootstrap.univariate.kde import Kde, sweep

__all__ = [
    "Sample",
    "Resamples",
    "Percentiles",
    "BootstrapDesign",
    "BootstrapSolution",
    "bootstrap",
    "run_bootstrap",
    "mixed_bootstrap",
    "Label",
    "LabeledSample",
    "tukey",
    "Kde",
    "sweep",
]
