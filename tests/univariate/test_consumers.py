"""
Tests for the distribution consumers: mixed bootstrap, Tukey outlier
classification and kernel density estimation.
"""

import numpy as np
import pytest

from pybootstrap import Sample, TupledDistributions, mixed_bootstrap
from pybootstrap.core.exceptions import ValidationError
from pybootstrap.univariate import Kde, Label, sweep, tukey


# ---------------------------------------------------------------------------
# Mixed bootstrap
# ---------------------------------------------------------------------------

class TestMixedBootstrap:

    def test_split_sizes(self):
        sizes = []

        def statistic(x, y):
            sizes.append((len(x), len(y)))
            return 0.0

        dist = mixed_bootstrap([1.0, 2.0, 3.0], [4.0, 5.0], 25, statistic, seed=0)
        assert len(dist) == 25
        assert set(sizes) == {(3, 2)}

    def test_values_drawn_from_pool(self):
        pool = {1.0, 2.0, 3.0, 10.0, 20.0}

        def statistic(x, y):
            assert set(x.as_array().tolist()) <= pool
            assert set(y.as_array().tolist()) <= pool
            return x.mean() - y.mean()

        mixed_bootstrap([1.0, 2.0, 3.0], [10.0, 20.0], 50, statistic, seed=1)

    def test_null_distribution_centred_on_zero(self, timing_pair):
        a, b = timing_pair
        dist = mixed_bootstrap(a, b, 2000, lambda x, y: x.mean() - y.mean(), seed=2)
        observed = a.mean() - b.mean()
        assert abs(dist.mean()) < 0.1
        # a real 2 ms shift is far in the tail of the pooled distribution
        assert dist.p_value(observed) < 0.01

    def test_tuple_statistic(self):
        dists = mixed_bootstrap([1.0, 2.0], [3.0, 4.0], 10, lambda x, y: (x.mean(), y.mean()), seed=0)
        assert isinstance(dists, TupledDistributions)
        assert dists.nresamples == 10

    def test_zero_resamples(self):
        assert len(mixed_bootstrap([1.0], [2.0], 0, lambda x, y: 0.0)) == 0

    def test_negative_resamples(self):
        with pytest.raises(ValidationError):
            mixed_bootstrap([1.0], [2.0], -5, lambda x, y: 0.0)


# ---------------------------------------------------------------------------
# Tukey fences
# ---------------------------------------------------------------------------

class TestTukey:

    def test_fences_from_quartiles(self):
        labeled = tukey(Sample([1.0, 2.0, 3.0, 4.0, 5.0]))
        # Q1 = 2, Q3 = 4, IQR = 2
        fences = labeled.fences
        assert fences.low_severe == pytest.approx(-4.0)
        assert fences.low_mild == pytest.approx(-1.0)
        assert fences.high_mild == pytest.approx(7.0)
        assert fences.high_severe == pytest.approx(10.0)

    def test_labels(self):
        data = [10.0, 10.5, 11.0, 11.5, 12.0, 10.2, 11.8, 14.0, 30.0, 0.0]
        labeled = tukey(data)
        labels = dict(zip(data, labeled.labels))
        assert labels[11.0] is Label.NOT_AN_OUTLIER
        assert labels[30.0] is Label.HIGH_SEVERE
        assert labels[0.0] is Label.LOW_SEVERE
        assert len(labeled) == len(data)

    def test_mild(self):
        fences = tukey([1.0, 2.0, 3.0, 4.0, 5.0]).fences
        assert fences.classify(8.0) is Label.HIGH_MILD
        assert fences.classify(-2.0) is Label.LOW_MILD
        assert fences.classify(7.0) is Label.NOT_AN_OUTLIER

    def test_count_and_mask(self):
        labeled = tukey([1.0, 2.0, 3.0, 4.0, 5.0, 100.0])
        counts = labeled.count()
        assert set(counts) == set(Label)
        assert counts[Label.HIGH_SEVERE] == 1
        assert sum(counts.values()) == 6
        assert labeled.n_outliers == 1
        np.testing.assert_array_equal(labeled.outlier_mask(), [False] * 5 + [True])

    def test_iteration_pairs_values_with_labels(self):
        labeled = tukey([1.0, 2.0, 3.0])
        pairs = list(labeled)
        assert pairs[0] == (1.0, Label.NOT_AN_OUTLIER)

    def test_label_properties(self):
        assert Label.HIGH_SEVERE.is_severe
        assert Label.LOW_MILD.is_outlier
        assert not Label.NOT_AN_OUTLIER.is_outlier


# ---------------------------------------------------------------------------
# Kernel density estimation
# ---------------------------------------------------------------------------

class TestKde:

    def test_silverman_bandwidth(self, rng):
        data = rng.normal(size=200)
        kde = Kde(data)
        sigma = np.std(data, ddof=1)
        expected = (200 * 3.0 / 4.0) ** (-1.0 / 5.0) * sigma
        assert kde.bandwidth == pytest.approx(expected, rel=1e-8)

    def test_density_integrates_to_one(self, rng):
        xs, ys = sweep(rng.normal(size=100), 2000)
        area = float(np.sum(0.5 * (ys[1:] + ys[:-1]) * np.diff(xs)))
        assert area == pytest.approx(1.0, abs=0.01)

    def test_sweep_default_range_padded(self):
        sample = Sample([1.0, 2.0, 3.0, 4.0])
        xs, ys = sweep(sample, 50)
        kde = Kde(sample)
        assert xs[0] == pytest.approx(1.0 - 3.0 * kde.bandwidth)
        assert xs[-1] == pytest.approx(4.0 + 3.0 * kde.bandwidth)
        assert len(xs) == len(ys) == 50

    def test_sweep_explicit_range(self):
        xs, _ = sweep([1.0, 2.0, 3.0], 11, range=(0.0, 10.0))
        np.testing.assert_allclose(xs, np.linspace(0.0, 10.0, 11))

    def test_too_few_points(self):
        with pytest.raises(ValidationError, match="at least 2"):
            Kde([1.0])

    def test_constant_data(self):
        with pytest.raises(ValidationError, match="constant"):
            Kde([2.0, 2.0, 2.0])

    def test_bad_range(self):
        with pytest.raises(ValidationError, match="range"):
            sweep([1.0, 2.0], 10, range=(5.0, 1.0))
