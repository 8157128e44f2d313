"""Unit tests for European option pricing and value at expiry."""

import math

import numpy as np
import pytest

from quantgreeks.derivatives.price import euro_call, euro_put
from quantgreeks.derivatives.value import call_at_expiry, put_at_expiry

from reference_contract import DIV_YIELD, INTEREST_RATE, STRIKE, TIME_TO_EXPIRY, UNDERLYING, VOL


class TestEuropeanPricing:
    """Test Black-Scholes call and put prices."""

    def test_euro_call(self, contract):
        """Call price of the reference contract."""
        assert abs(euro_call(*contract) - 3.148) < 0.001

    def test_euro_put(self, contract):
        """Put price of the reference contract."""
        assert abs(euro_put(*contract) - 3.406) < 0.001

    def test_put_call_parity(self, contract):
        """C - P = s0 - x*e^(-rt); q only enters through d1."""
        expected = UNDERLYING - STRIKE * math.exp(-INTEREST_RATE * TIME_TO_EXPIRY)
        assert abs(euro_call(*contract) - euro_put(*contract) - expected) < 1e-6

    def test_put_call_parity_without_dividends(self):
        """With q == 0 parity is the textbook s0*e^(-qt) - x*e^(-rt)."""
        args = (100.0, 95.0, 0.5, 0.04, 0.0, 0.3)
        expected = 100.0 * math.exp(-0.0 * 0.5) - 95.0 * math.exp(-0.04 * 0.5)
        assert abs(euro_call(*args) - euro_put(*args) - expected) < 1e-6

    def test_prices_positive(self, contract):
        """Both prices carry time value."""
        assert euro_call(*contract) > 0
        assert euro_put(*contract) > 0

    def test_call_decreases_with_strike(self):
        """Vectorized over strikes, call prices fall and put prices rise."""
        strikes = np.array([55.0, 60.0, 65.0, 70.0, 75.0])
        calls = euro_call(UNDERLYING, strikes, TIME_TO_EXPIRY, INTEREST_RATE, DIV_YIELD, VOL)
        puts = euro_put(UNDERLYING, strikes, TIME_TO_EXPIRY, INTEREST_RATE, DIV_YIELD, VOL)
        assert np.all(np.diff(calls) < 0)
        assert np.all(np.diff(puts) > 0)
        np.testing.assert_almost_equal(calls[2], euro_call(UNDERLYING, STRIKE, TIME_TO_EXPIRY, INTEREST_RATE, DIV_YIELD, VOL))

    def test_zero_time_does_not_raise(self):
        """Expired contract with s0 == x gives nan instead of raising."""
        assert np.isnan(euro_call(STRIKE, STRIKE, 0.0, INTEREST_RATE, DIV_YIELD, VOL))


class TestValueAtExpiry:
    """Test intrinsic value."""

    def test_call_in_the_money(self):
        assert call_at_expiry(74.68, STRIKE) == pytest.approx(9.68)

    def test_call_out_of_the_money(self):
        assert call_at_expiry(54.68, STRIKE) == 0.0

    def test_put_in_the_money(self):
        assert put_at_expiry(54.68, STRIKE) == pytest.approx(10.32)

    def test_put_out_of_the_money(self):
        assert put_at_expiry(74.68, STRIKE) == 0.0

    @pytest.mark.parametrize("s_t", [0.0, 10.0, 64.99, 65.0, 65.01, 200.0])
    def test_parity_at_expiry(self, s_t):
        """call - put == s_t - x exactly."""
        assert call_at_expiry(s_t, STRIKE) - put_at_expiry(s_t, STRIKE) == s_t - STRIKE

    def test_array_input(self):
        """Payoffs over a grid of terminal prices."""
        s_t = np.array([60.0, 65.0, 70.0])
        np.testing.assert_array_equal(call_at_expiry(s_t, STRIKE), [0.0, 0.0, 5.0])
        np.testing.assert_array_equal(put_at_expiry(s_t, STRIKE), [5.0, 0.0, 0.0])
