"""
Bootstrap distributions and their builders.

A statistic returns either a scalar or a fixed-size tuple of floats. The
builder keeps one growable sequence per tuple field and appends every
field of a pushed value at the same index, so position i of each field
always comes from the same statistic invocation.

complete() hands the values over as:
    - Distribution, for a statistic that returned scalars
    - TupledDistributions (a tuple of Distribution), for tuple statistics
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybootstrap.core.exceptions import BuilderStateError, DimensionError
from pybootstrap.core.validation import check_choice, check_count, check_probability

if TYPE_CHECKING:
    from pybootstrap.univariate.percentiles import Percentiles


class Distribution:
    """
    Immutable empirical distribution of one statistic field.

    Wraps a read-only 1D float64 array. Order follows the order in which
    the statistic was evaluated; callers must not attach meaning to it
    beyond field alignment.
    """

    __slots__ = ('_values',)

    def __init__(self, values: ArrayLike):
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 1:
            raise DimensionError(
                f"values: expected 1D array, got {arr.ndim}D with shape {arr.shape}",
                expected=1,
                actual=arr.ndim,
            )
        arr.flags.writeable = False
        self._values = arr

    @classmethod
    def _wrap(cls, values: NDArray[np.float64]) -> Distribution:
        """Adopt an already read-only array without copying."""
        obj = cls.__new__(cls)
        obj._values = values
        return obj

    def __len__(self) -> int:
        return self._values.shape[0]

    def __getitem__(self, index):
        return self._values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __array__(self, dtype=None, copy=None):
        if copy:
            return np.array(self._values, dtype=dtype, copy=True)
        if dtype is None or np.dtype(dtype) == self._values.dtype:
            return self._values
        if copy is False:
            raise ValueError(
                f"Distribution cannot become {np.dtype(dtype)} without a copy"
            )
        return self._values.astype(dtype)

    def __repr__(self) -> str:
        return f"Distribution(n={len(self)})"

    def as_array(self) -> NDArray[np.float64]:
        """The underlying values as a read-only array."""
        return self._values

    def mean(self, *args, **kwargs) -> float:
        # np.mean(distribution) dispatches here with numpy's keywords
        return np.mean(self._values, *args, **kwargs)

    def std_dev(self) -> float:
        """Sample standard deviation (ddof=1)."""
        if len(self) < 2:
            return float('nan')
        return float(np.std(self._values, ddof=1))

    def standard_error(self) -> float:
        """
        Bootstrap estimate of the standard error of the statistic.

        This is the standard deviation of the bootstrap distribution.
        """
        return self.std_dev()

    def percentiles(self) -> 'Percentiles':
        from pybootstrap.univariate.percentiles import Percentiles
        return Percentiles(self._values)

    def confidence_interval(self, confidence_level: float) -> tuple[float, float]:
        """
        Percentile confidence interval.

        Args:
            confidence_level: In (0, 1), e.g. 0.95

        Returns:
            (lower, upper) bounds at the alpha/2 and 1 - alpha/2 percentiles
        """
        cl = check_probability(confidence_level, "confidence_level")
        percentiles = self.percentiles()
        alpha = 1.0 - cl
        return (
            percentiles.at(50.0 * alpha),
            percentiles.at(100.0 * (1.0 - alpha / 2.0)),
        )

    def p_value(self, t: float, tails: str = "two") -> float:
        """
        Achieved significance level of `t` against this distribution.

        Counts the values on the smaller side of `t` and scales by the
        number of tails.

        Args:
            t: Observed statistic
            tails: "one" or "two"
        """
        check_choice(tails, ("one", "two"), "tails")
        n = len(self)
        if n == 0:
            return float('nan')
        hits = int(np.count_nonzero(self._values < t))
        factor = 1 if tails == "one" else 2
        return min(hits, n - hits) / n * factor


class TupledDistributions(tuple):
    """
    One Distribution per field of a tuple-valued statistic.

    A plain tuple subclass, so it unpacks like the statistic's result:

        mean_dist, var_dist = bootstrap(a, b, 1000, mean_and_var)
    """

    def __new__(cls, distributions):
        distributions = tuple(distributions)
        lengths = {len(d) for d in distributions}
        if len(lengths) > 1:
            raise DimensionError(
                f"Field distributions have unequal lengths: {sorted(lengths)}"
            )
        return super().__new__(cls, distributions)

    @property
    def arity(self) -> int:
        return len(self)

    @property
    def nresamples(self) -> int:
        return len(self[0]) if self else 0

    def as_array(self) -> NDArray[np.float64]:
        """Stack the fields into an array of shape (nresamples, arity)."""
        if not self:
            return np.empty((0, 0), dtype=np.float64)
        return np.column_stack([d.as_array() for d in self])

    def __repr__(self) -> str:
        return f"TupledDistributions(arity={self.arity}, n={self.nresamples})"


class TupledDistributionsBuilder:
    """
    Field-aligned accumulator for statistic results.

    Storage is a zero-initialised (arity, capacity) float64 buffer plus a
    fill count. Pushing past the reserved capacity grows the buffer by
    doubling; it only changes the final length, never earlier values.

    The arity is fixed either at construction or by the first pushed
    value or merged builder. Every later value must have the same arity.

    Args:
        capacity: Number of statistic evaluations this builder is
            responsible for (space reserved up front).
        arity: Number of fields per value, or None to learn it from the
            first push. An empty builder declared with arity 1 completes
            to a Distribution.
    """

    def __init__(self, capacity: int, arity: int | None = None):
        self._capacity = check_count(capacity, "capacity")
        self._arity: int | None = None
        self._scalar: bool | None = None
        self._buffer: NDArray[np.float64] | None = None
        self._len = 0
        self._completed = False
        if arity is not None:
            self._adopt(check_count(arity, "arity", minimum=1), None)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return (
            f"TupledDistributionsBuilder(len={self._len}, "
            f"capacity={self.capacity}, arity={self._arity})"
        )

    @property
    def capacity(self) -> int:
        if self._buffer is None:
            return self._capacity
        return self._buffer.shape[1]

    @property
    def arity(self) -> int | None:
        return self._arity

    @property
    def completed(self) -> bool:
        return self._completed

    def push(self, value: Any) -> None:
        """Append each field of `value` to its sequence."""
        self._check_open('push')
        row = np.asarray(value, dtype=np.float64)
        if row.ndim > 1:
            raise DimensionError(
                f"statistic must return a scalar or a flat tuple, "
                f"got shape {row.shape}"
            )
        scalar = row.ndim == 0
        row = np.atleast_1d(row)
        self._adopt(row.shape[0], scalar)

        if self._len == self._buffer.shape[1]:
            self._grow(self._len + 1)
        self._buffer[:, self._len] = row
        self._len += 1

    def extend(self, other: TupledDistributionsBuilder) -> None:
        """
        Drain `other` into this builder.

        Appends other's values after this builder's, field by field,
        preserving their order. `other` is left empty but usable.
        """
        self._check_open('extend')
        other._check_open('extend')
        if other is self:
            raise ValueError("cannot extend a builder with itself")

        if other._arity is not None:
            self._adopt(other._arity, other._scalar)

        n = other._len
        if n == 0:
            return

        if self._len + n > self._buffer.shape[1]:
            self._grow(self._len + n)
        self._buffer[:, self._len:self._len + n] = other._buffer[:, :n]
        self._len += n
        other._len = 0

    def complete(self) -> Distribution | TupledDistributions:
        """
        Finalize into immutable distributions.

        The builder is unusable afterwards.
        """
        self._check_open('complete')
        self._completed = True

        arity = self._arity if self._arity is not None else 1
        if self._buffer is None:
            values = np.zeros((arity, 0), dtype=np.float64)
        elif self._len == self._buffer.shape[1]:
            values = self._buffer
        else:
            values = self._buffer[:, :self._len].copy()
        values.flags.writeable = False
        self._buffer = None

        fields = [Distribution._wrap(values[i]) for i in range(arity)]

        scalar = self._scalar
        if scalar is None:
            # Nothing was pushed: a declared arity of 1 reads as a scalar
            # statistic, as it does once values arrive from one.
            scalar = self._arity is None or self._arity == 1
        if scalar:
            return fields[0]
        return TupledDistributions(fields)

    def _adopt(self, arity: int, scalar: bool | None) -> None:
        if self._arity is None:
            self._arity = arity
            self._buffer = np.zeros((arity, self._capacity), dtype=np.float64)
        elif self._arity != arity:
            raise DimensionError(
                f"statistic arity changed: builder holds {self._arity} "
                f"field(s), got {arity}",
                expected=self._arity,
                actual=arity,
            )
        if self._scalar is None and scalar is not None:
            self._scalar = scalar

    def _grow(self, min_capacity: int) -> None:
        new_capacity = max(min_capacity, 2 * self._buffer.shape[1])
        grown = np.zeros((self._arity, new_capacity), dtype=np.float64)
        grown[:, :self._len] = self._buffer[:, :self._len]
        self._buffer = grown

    def _check_open(self, operation: str) -> None:
        if self._completed:
            raise BuilderStateError(
                f"cannot {operation}() a builder after complete()",
                operation=operation,
            )
