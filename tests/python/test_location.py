"""
Tests for the biweight location.
"""

import math

import pytest
import numpy as np

import biweight
from biweight import location, IterationConfig, StartPoint, EmptySampleError, InvalidArgumentError


class TestLocation:
    """Test scalar biweight location."""

    def test_standard_normal(self, rng):
        """Location of N(0, 1) data is close to zero."""
        X = rng.standard_normal(10000)
        assert location(X) == pytest.approx(0.0, abs=5e-2)

    @pytest.mark.parametrize("k", [1.0, 0.0, -3.5, 1e6])
    def test_constant(self, k):
        """Location of constant data is exactly that constant."""
        assert location(np.full(10, k)) == k

    @pytest.mark.parametrize("n", [1, 6, 7])
    def test_constant_exact(self, n):
        """No rounding drift for constants that are not powers of two."""
        assert location([7.5] * n) == 7.5
        assert location([0.1] * n, maxiter=1) == 0.1
        assert location([np.nan, 0.1, 0.1, np.inf]) == 0.1

    def test_outlier(self, outlier_sample):
        """One clear outlier does not pull the location."""
        assert location(outlier_sample) == pytest.approx(2.0, abs=1e-5)

    @pytest.mark.parametrize("v", [np.nan, np.inf, -np.inf])
    def test_non_finite_skipped(self, v):
        """NaN and Inf are excluded from every iteration."""
        assert location([1, 2, 3, v, 2]) == pytest.approx(2.0, abs=1e-5)

    def test_non_finite_same_as_removed(self, rng):
        """Inserting a NaN gives the same result as leaving the value out."""
        X = rng.standard_normal(51)
        with_nan = np.insert(X, 17, np.nan)
        assert location(with_nan) == pytest.approx(location(X), rel=1e-12)

    def test_shift_equivariance(self, rng):
        """Shifting the data shifts the location."""
        X = rng.standard_normal(200)
        assert location(X + 100) == pytest.approx(location(X) + 100, abs=1e-4)

    def test_returns_float(self, outlier_sample):
        """Scalar inputs give a plain float."""
        assert isinstance(location(outlier_sample), float)

    def test_empty(self):
        """An empty sample raises."""
        with pytest.raises(EmptySampleError):
            location([np.nan, np.nan])


class TestLocationOptions:
    """Test cutoff and stopping criteria."""

    def test_single_iteration(self, outlier_sample):
        """One iteration from zero is a weighted mean about zero."""
        w1 = (1 - (1 / 18) ** 2) ** 2
        w2 = (1 - (2 / 18) ** 2) ** 2
        w3 = (1 - (3 / 18) ** 2) ** 2
        expected = (w1 * 1 + 2 * w2 * 2 + w3 * 3) / (w1 + 2 * w2 + w3)
        assert location(outlier_sample, maxiter=1) == pytest.approx(expected)

    def test_median_start(self, rng):
        """Starting at the median converges to the same location."""
        X = 10 * rng.standard_normal(500) + 50
        with biweight.config.local(iteration=IterationConfig(start=StartPoint.MEDIAN)):
            from_median = location(X)
        assert from_median == pytest.approx(location(X, maxiter=100), abs=1e-5)

    def test_explicit_arguments_beat_config(self, outlier_sample):
        """Arguments override the configured defaults."""
        biweight.config.iteration = IterationConfig(maxiter=1)
        assert location(outlier_sample, maxiter=50) == pytest.approx(2.0, abs=1e-6)
        assert location(outlier_sample) != pytest.approx(2.0, abs=1e-6)

    def test_custom_cutoff(self):
        """A smaller cutoff excludes a moderate outlier."""
        X = [0.0, 1.0, -1.0, 0.5, -0.5, 8.0]
        assert abs(location(X, c=2)) < abs(location(X, c=20))

    @pytest.mark.parametrize("kwargs", [{"maxiter": 0}, {"tol": -1.0}, {"c": 0}])
    def test_invalid_arguments(self, kwargs, outlier_sample):
        """Unusable parameters raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            location(outlier_sample, **kwargs)

    def test_undefined_location_is_nan(self):
        """When every weight vanishes the result is NaN, not an exception."""
        # About 0 the MAD is 10, so with c=0.5 both values lie beyond the cutoff
        result = location([10.0, 10.0, -10.0, 10.0], c=0.5, maxiter=1)
        assert math.isnan(result)


class TestLocationAxis:
    """Test per-axis location."""

    def test_columns(self):
        """axis=0 gives one location per column."""
        X = np.tile([1.0, 2.0, 3.0], (5, 1))
        np.testing.assert_allclose(location(X, axis=0), [1.0, 2.0, 3.0])

    def test_rows(self):
        """axis=1 gives one location per row."""
        X = np.tile([1.0, 2.0, 3.0], (5, 1))
        np.testing.assert_allclose(location(X, axis=1), np.full(5, 2.0), atol=1e-5)

    def test_flattened(self):
        """axis=None reduces the whole array."""
        X = np.tile([1.0, 2.0, 3.0], (5, 1))
        assert location(X) == pytest.approx(location(X.ravel()))

    def test_out_of_bounds(self):
        """An axis beyond the array rank raises."""
        with pytest.raises(InvalidArgumentError):
            location(np.ones((3, 3)), axis=2)
