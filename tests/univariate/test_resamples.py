"""
Tests for Resamples: length, membership, buffer reuse and randomness.
"""

import numpy as np
import pytest

from pybootstrap import Resamples, Sample


class TestResampleShape:

    @pytest.mark.parametrize("n", [1, 2, 7, 100])
    def test_length_matches_source(self, n):
        resamples = Resamples(Sample(np.arange(float(n))), seed=0)
        for _ in range(20):
            assert len(resamples.next()) == n

    def test_values_come_from_source(self, rng):
        data = rng.normal(size=15)
        resamples = Resamples(Sample(data), seed=3)
        allowed = set(data.tolist())
        for _ in range(50):
            assert set(resamples.next().as_array().tolist()) <= allowed

    def test_dtype_preserved(self):
        sample = Sample(np.array([1.0, 2.0], dtype=np.float32))
        assert Resamples(sample, seed=0).next().dtype == np.float32

    def test_single_observation(self):
        resamples = Resamples(Sample([4.2]), seed=0)
        np.testing.assert_array_equal(resamples.next().as_array(), [4.2])


class TestBufferReuse:

    def test_same_view_every_call(self):
        resamples = Resamples(Sample([1.0, 2.0, 3.0]), seed=0)
        first = resamples.next()
        second = resamples.next()
        assert first is second

    def test_view_is_read_only(self):
        resamples = Resamples(Sample([1.0, 2.0, 3.0]), seed=0)
        with pytest.raises(ValueError):
            resamples.next().as_array()[0] = 9.0

    def test_np_array_survives_next_draw(self):
        resamples = Resamples(Sample(np.arange(50.0)), seed=0)
        kept = np.array(resamples.next())
        snapshot = kept.copy()
        resamples.next()
        np.testing.assert_array_equal(kept, snapshot)

    def test_source_untouched(self):
        sample = Sample([1.0, 2.0, 3.0, 4.0])
        resamples = Resamples(sample, seed=0)
        for _ in range(10):
            resamples.next()
        np.testing.assert_array_equal(sample.as_array(), [1.0, 2.0, 3.0, 4.0])


class TestRandomness:

    def test_successive_resamples_differ(self):
        resamples = Resamples(Sample(np.arange(50.0)), seed=0)
        first = resamples.next().as_array().copy()
        second = resamples.next().as_array().copy()
        assert not np.array_equal(first, second)

    def test_seed_reproducible(self):
        sample = Sample(np.arange(20.0))
        r1 = Resamples(sample, seed=11)
        r2 = Resamples(sample, seed=11)
        for _ in range(5):
            np.testing.assert_array_equal(r1.next().as_array(), r2.next().as_array())

    def test_shared_generator(self):
        rng = np.random.default_rng(5)
        sample = Sample(np.arange(10.0))
        a = Resamples(sample, rng=rng)
        b = Resamples(sample, rng=rng)
        expected = np.random.default_rng(5)
        idx_a = expected.integers(0, 10, size=10)
        idx_b = expected.integers(0, 10, size=10)
        np.testing.assert_array_equal(a.next().as_array(), idx_a.astype(float))
        np.testing.assert_array_equal(b.next().as_array(), idx_b.astype(float))

    def test_roughly_uniform(self):
        resamples = Resamples(Sample([0.0, 1.0]), seed=2)
        total = sum(resamples.next().sum() for _ in range(500))
        # 1000 draws from {0, 1}
        assert 400 < total < 600

    def test_iterator_protocol(self):
        resamples = Resamples(Sample([1.0, 2.0]), seed=0)
        it = iter(resamples)
        assert it is resamples
        assert len(next(it)) == 2
