"""
Tests for biweight midvariance and scale.
"""

import math

import pytest
import numpy as np

import biweight
from biweight import midvariance, midvar, scale, CutoffConfig, EmptySampleError


class TestMidvariance:
    """Test scalar midvariance."""

    def test_standard_normal(self, rng):
        """Midvariance of N(0, 1) data is close to one."""
        X = rng.standard_normal(10000)
        assert midvariance(X) == pytest.approx(1.0, abs=0.1)

    @pytest.mark.parametrize("values", [np.zeros(100), np.ones(100), [5, 5, 5, 5]])
    def test_constant_is_zero(self, values):
        """Constant data has exactly zero midvariance."""
        assert midvariance(values) == 0.0

    def test_outlier(self, outlier_sample):
        """Reference value with one clear outlier."""
        assert midvariance(outlier_sample) == pytest.approx(0.51266, abs=1e-5)

    @pytest.mark.parametrize("v", [np.nan, np.inf])
    def test_non_finite_skipped(self, v):
        """NaN and Inf are dropped before the median."""
        assert midvariance([1, 2, 3, v, 2]) == pytest.approx(0.55472, abs=1e-5)

    def test_reflection_invariance(self, rng):
        """Mirroring the data about its median leaves the midvariance unchanged."""
        X = rng.standard_normal(101)
        m = np.median(X)
        assert midvariance(-X + 2 * m) == pytest.approx(midvariance(X), rel=1e-10)

    def test_scales_quadratically(self, rng):
        """Multiplying the data by k multiplies the midvariance by k^2."""
        X = rng.standard_normal(200)
        assert midvariance(3 * X) == pytest.approx(9 * midvariance(X), rel=1e-10)

    def test_alias(self, outlier_sample):
        """midvar is the same function."""
        assert midvar is midvariance

    def test_config_cutoff(self, rng):
        """The configured scale cutoff is used when c is omitted."""
        X = rng.standard_normal(300)
        with biweight.config.local(cutoff=CutoffConfig(scale=6.0)):
            configured = midvariance(X)
        assert configured == midvariance(X, c=6)
        assert configured != midvariance(X)

    def test_empty(self):
        """An all-NaN sample raises."""
        with pytest.raises(EmptySampleError):
            midvariance([np.nan])


class TestScale:
    """Test biweight scale."""

    def test_sqrt_of_midvariance(self, rng):
        """Scale is the square root of the midvariance."""
        X = rng.standard_normal(10000)
        assert scale(X) == pytest.approx(math.sqrt(midvariance(X)), rel=1e-15)

    def test_axes(self, rng):
        """Per-axis scale matches per-axis midvariance."""
        X = rng.standard_normal((1000, 5))
        for axis in (0, 1):
            np.testing.assert_allclose(scale(X, axis=axis), np.sqrt(midvariance(X, axis=axis)))


class TestMidvarianceAxis:
    """Test per-axis midvariance."""

    def test_columns(self, rng):
        """axis=0 gives one value per column, each near one."""
        X = rng.standard_normal((10000, 5))
        vals = midvariance(X, axis=0)
        assert vals.shape == (5,)
        np.testing.assert_allclose(vals, np.ones(5), atol=0.1)

    def test_rows(self, rng):
        """axis=1 gives one value per row."""
        X = rng.standard_normal((100, 5))
        vals = midvariance(X, axis=1)
        assert vals.shape == (100,)
        assert vals[7] == pytest.approx(midvariance(X[7]))

    def test_negative_axis(self, rng):
        """Negative axes count from the end."""
        X = rng.standard_normal((20, 4))
        np.testing.assert_array_equal(midvariance(X, axis=-1), midvariance(X, axis=1))

    def test_no_lanes(self):
        """An axis with no lanes gives an empty result."""
        assert midvariance(np.zeros((3, 0)), axis=0).shape == (0,)
        assert scale(np.zeros((0, 4)), axis=1).shape == (0,)
        assert biweight.location(np.zeros((2, 0, 5)), axis=2).shape == (2, 0)

    def test_empty_lanes_raise(self):
        """Lanes with no values still raise."""
        with pytest.raises(EmptySampleError):
            midvariance(np.zeros((0, 3)), axis=0)
