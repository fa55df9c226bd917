"""
Percentiles of a sorted copy of the data.

Linear interpolation between closest ranks, the same convention as
numpy's default ("linear", Hyndman & Fan type 7).
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybootstrap.core.exceptions import ValidationError


class Percentiles:
    """
    Sorted snapshot of a 1D array with percentile lookups.

    Args:
        data: 1D array-like of numbers. NaNs are not allowed.
    """

    __slots__ = ('_sorted',)

    def __init__(self, data: ArrayLike):
        arr = np.sort(np.asarray(data, dtype=np.float64), kind='stable')
        if np.isnan(arr).any():
            raise ValidationError("data: percentiles are undefined with NaN values")
        arr.flags.writeable = False
        self._sorted = arr

    def __len__(self) -> int:
        return self._sorted.shape[0]

    @property
    def sorted(self) -> NDArray[np.floating[Any]]:
        return self._sorted

    def at(self, p: float) -> float:
        """
        Value at percentile `p`.

        Args:
            p: Percentile in [0, 100]

        Raises:
            ValidationError: p outside [0, 100], or no data
        """
        if not 0.0 <= p <= 100.0:
            raise ValidationError(f"p: must be in [0, 100], got {p}")
        n = len(self)
        if n == 0:
            raise ValidationError("percentile of an empty distribution")
        if n == 1:
            return float(self._sorted[0])

        rank = p / 100.0 * (n - 1)
        lo = math.floor(rank)
        hi = min(lo + 1, n - 1)
        frac = rank - lo
        x_lo = self._sorted[lo]
        return float(x_lo + frac * (self._sorted[hi] - x_lo))

    @property
    def median(self) -> float:
        return self.at(50.0)

    @property
    def quartiles(self) -> tuple[float, float, float]:
        """(Q1, median, Q3)."""
        return self.at(25.0), self.at(50.0), self.at(75.0)

    @property
    def iqr(self) -> float:
        q1, _, q3 = self.quartiles
        return q3 - q1

    def __repr__(self) -> str:
        return f"Percentiles(n={len(self)})"
