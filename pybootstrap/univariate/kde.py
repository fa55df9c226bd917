"""
Gaussian kernel density estimation.

Thin layer over scipy.stats.gaussian_kde using scipy's Silverman factor
for the bandwidth (h = sigma * (3n/4)^(-1/5)).
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pybootstrap.core.exceptions import ValidationError
from pybootstrap.core.validation import check_count
from pybootstrap.univariate.sample import Sample

# Grid padding on each side of the data, in bandwidths
TAIL_BANDWIDTHS = 3.0


class Kde:
    """
    Kernel density estimator of a sample.

    Args:
        sample: Sample with at least two distinct values
    """

    def __init__(self, sample: Sample | ArrayLike):
        if not isinstance(sample, Sample):
            sample = Sample(sample)
        if len(sample) < 2:
            raise ValidationError(
                f"sample: KDE requires at least 2 observations, got {len(sample)}"
            )
        if sample.var() == 0.0:
            raise ValidationError("sample: KDE is undefined for constant data")
        self._sample = sample
        self._kde = sp_stats.gaussian_kde(
            np.asarray(sample, dtype=np.float64), bw_method='silverman'
        )

    @property
    def sample(self) -> Sample:
        return self._sample

    @property
    def bandwidth(self) -> float:
        """Kernel standard deviation in data units."""
        return float(np.sqrt(self._kde.covariance[0, 0]))

    def estimate(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Density at each point of `x`."""
        return self._kde(np.atleast_1d(np.asarray(x, dtype=np.float64)))


def sweep(
    sample: Sample | ArrayLike,
    npoints: int,
    range: tuple[float, float] | None = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Evaluate the KDE of `sample` on `npoints` evenly spaced points.

    Args:
        sample: Data to estimate the density of
        npoints: Number of grid points (>= 2)
        range: (start, end) of the grid. Defaults to the sample range
            padded by three bandwidths on each side.

    Returns:
        (xs, ys): grid points and density estimates
    """
    npoints = check_count(npoints, "npoints", minimum=2)
    kde = Kde(sample)
    if range is None:
        pad = TAIL_BANDWIDTHS * kde.bandwidth
        start, end = kde.sample.min() - pad, kde.sample.max() + pad
    else:
        start, end = range
        if not start < end:
            raise ValidationError(f"range: start must be < end, got {range}")
    xs = np.linspace(start, end, npoints)
    return xs, kde.estimate(xs)
