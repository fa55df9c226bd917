"""
Resampling with replacement.

Resamples is an endless supply of same-length resamples of one Sample.
Every call writes into the same scratch buffer, so each resample is only
valid until the next one is drawn.
"""

from __future__ import annotations

import numpy as np

from pybootstrap.univariate.sample import Sample


class Resamples:
    """
    Infinite generator of bootstrap resamples.

    Each resample has len(sample) elements, each drawn uniformly with
    replacement from the source. Draws share only the random generator,
    so successive resamples are independent.

    Args:
        sample: Source sample (read, never written)
        rng: Random generator to draw from. Created from `seed` if None.
        seed: Seed for a fresh generator when `rng` is not given.

    Usage:
        resamples = Resamples(sample, seed=42)
        first = resamples.next()
        m = first.mean()           # use it before drawing again
        second = resamples.next()  # first now holds the same data as second
    """

    def __init__(
        self,
        sample: Sample,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        self._sample = sample
        self._data = sample.as_array()
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._buffer = np.empty_like(self._data)
        view = self._buffer.view()
        view.flags.writeable = False
        self._resample = Sample._view(view)

    @property
    def sample(self) -> Sample:
        return self._sample

    def next(self) -> Sample:
        """Draw the next resample into the shared buffer."""
        n = self._data.shape[0]
        indices = self._rng.integers(0, n, size=n)
        np.take(self._data, indices, out=self._buffer)
        return self._resample

    def __iter__(self) -> Resamples:
        return self

    def __next__(self) -> Sample:
        return self.next()
