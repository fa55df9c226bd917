"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pybootstrap import Sample


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_pair():
    """The two small samples used in the mean-difference scenario."""
    return Sample([1.0, 2.0, 3.0]), Sample([4.0, 5.0])


@pytest.fixture
def timing_pair(rng):
    """Two benchmark-like samples of iteration times (ms)."""
    a = rng.normal(10.0, 1.0, size=50)
    b = rng.normal(12.0, 1.5, size=40)
    return Sample(a), Sample(b)
