"""Unit tests for the cumulative normal approximation."""

import warnings

import numpy as np
import pytest
from scipy.stats import norm

from quantgreeks.derivatives.stats import RSQRTPI, cnd


class TestCumulativeNormal:
    """Test cnd against known values and the exact CDF."""

    def test_at_zero(self):
        """N(0) should be one half."""
        assert abs(cnd(0.0) - 0.5) < 1e-6

    @pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 1.96, 3.0, 6.5])
    def test_symmetry(self, x):
        """N(x) + N(-x) should be 1."""
        assert abs(cnd(x) + cnd(-x) - 1.0) < 1e-6

    def test_matches_exact_cdf(self):
        """Polynomial approximation stays within its 7.5e-8 error bound."""
        xs = np.linspace(-8.0, 8.0, 2001)
        np.testing.assert_allclose(cnd(xs), norm.cdf(xs), rtol=0, atol=1e-7)

    def test_monotonic(self):
        """CDF should be non-decreasing."""
        values = cnd(np.linspace(-5.0, 5.0, 501))
        assert np.all(np.diff(values) >= 0)

    def test_saturates_at_infinity(self):
        """Tails go to exactly 0 and 1 without warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert cnd(float("inf")) == 1.0
            assert cnd(float("-inf")) == 0.0

    def test_nan_propagates(self):
        """NaN in, NaN out."""
        assert np.isnan(cnd(float("nan")))

    def test_scalar_in_scalar_out(self):
        """Scalars give a numpy float64 scalar, not a 0-d array."""
        result = cnd(0.3)
        assert isinstance(result, np.float64)
        assert isinstance(result, float)

    def test_array_shape_preserved(self):
        """Array input is evaluated elementwise."""
        xs = np.array([[-1.0, 0.0], [1.0, 2.0]])
        result = cnd(xs)
        assert result.shape == (2, 2)
        np.testing.assert_almost_equal(result[1, 0], cnd(1.0), decimal=15)

    def test_rsqrtpi(self):
        """RSQRTPI is 1/sqrt(2*pi)."""
        np.testing.assert_almost_equal(RSQRTPI, 1.0 / np.sqrt(2.0 * np.pi), decimal=15)
