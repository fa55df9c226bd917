"""
Sample: immutable 1D view over floating point observations.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybootstrap.core.validation import check_1d, check_array, check_count, check_finite

if TYPE_CHECKING:
    from pybootstrap.tuples import Distribution, TupledDistributions
    from pybootstrap.univariate.percentiles import Percentiles

# Scale factor making the MAD a consistent estimator of sigma for normal data
MAD_NORMAL_CONSISTENCY = 1.4826


class Sample:
    """
    Read-only sequence of observations.

    Construction validates and copies the input; the stored array is
    flagged read-only, so a Sample can be shared between worker threads
    without locking. Float32 input keeps its precision; integer input is
    promoted to float64.

    Args:
        data: 1D array-like of finite numbers.

    Raises:
        ValidationError: Non-numeric or non-finite data
        DimensionError: Data that is not one-dimensional
    """

    __slots__ = ('_data',)

    def __init__(self, data: ArrayLike):
        if isinstance(data, Sample):
            self._data = data._data
            return
        arr = check_array(data, "data")
        check_1d(arr, "data")
        check_finite(arr, "data")
        arr = arr.copy()
        arr.flags.writeable = False
        self._data = arr

    @classmethod
    def _view(cls, array: NDArray[np.floating[Any]]) -> Sample:
        """Wrap a read-only array without validation or copy."""
        obj = cls.__new__(cls)
        obj._data = array
        return obj

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __array__(self, dtype=None, copy=None):
        # np.array() asks for a copy; np.asarray() may get the read-only view
        if copy:
            return np.array(self._data, dtype=dtype, copy=True)
        if dtype is None or np.dtype(dtype) == self._data.dtype:
            return self._data
        if copy is False:
            raise ValueError(
                f"Sample of {self._data.dtype} cannot become "
                f"{np.dtype(dtype)} without a copy"
            )
        return self._data.astype(dtype)

    def __repr__(self) -> str:
        return f"Sample(n={len(self)}, dtype={self._data.dtype})"

    def as_array(self) -> NDArray[np.floating[Any]]:
        """The observations as a read-only array."""
        return self._data

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    # --- Descriptive statistics ---
    #
    # sum/mean/min/max/var forward numpy's keyword arguments: np.mean(sample)
    # and friends dispatch to these methods.

    def sum(self, *args, **kwargs) -> float:
        return np.sum(self._data, *args, **kwargs)

    def mean(self, *args, **kwargs) -> float:
        return np.mean(self._data, *args, **kwargs)

    def min(self, *args, **kwargs) -> float:
        return np.min(self._data, *args, **kwargs)

    def max(self, *args, **kwargs) -> float:
        return np.max(self._data, *args, **kwargs)

    def var(self, *args, ddof: int = 1, **kwargs) -> float:
        """
        Variance, with the n - 1 denominator unless `ddof` says otherwise.

        Samples with fewer than ddof + 1 observations give NaN.
        """
        if len(self) <= ddof:
            return float('nan')
        return np.var(self._data, *args, ddof=ddof, **kwargs)

    def std_dev(self, ddof: int = 1) -> float:
        return float(np.sqrt(self.var(ddof=ddof)))

    def median(self) -> float:
        return self.percentiles().median

    def median_abs_dev(self, median: float | None = None) -> float:
        """
        Median absolute deviation, scaled to estimate sigma under normality.
        """
        if median is None:
            median = self.median()
        return float(np.median(np.abs(self._data - median))) * MAD_NORMAL_CONSISTENCY

    def percentiles(self) -> 'Percentiles':
        from pybootstrap.univariate.percentiles import Percentiles
        return Percentiles(self._data)

    # --- Resampling ---

    def bootstrap(
        self,
        nresamples: int,
        statistic: Callable[[Sample], Any],
        *,
        seed: int | None = None,
        arity: int | None = None,
    ) -> 'Distribution | TupledDistributions':
        """
        One-sample bootstrap.

        Evaluates `statistic` on `nresamples` resamples of this sample.
        The Sample passed to `statistic` is only valid during the call.

        Args:
            nresamples: Number of resamples (>= 0)
            statistic: fn(resample) -> float or tuple of floats
            seed: Random seed
            arity: Number of fields the statistic returns, if known

        Returns:
            Distribution for scalar statistics, TupledDistributions otherwise.
        """
        from pybootstrap.tuples import TupledDistributionsBuilder
        from pybootstrap.univariate.resamples import Resamples

        nresamples = check_count(nresamples, "nresamples")
        resamples = Resamples(self, seed=seed)
        builder = TupledDistributionsBuilder(nresamples, arity=arity)
        for _ in range(nresamples):
            builder.push(statistic(resamples.next()))
        return builder.complete()
