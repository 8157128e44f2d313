"""Unit tests for the parameter bundles."""

import pytest
from pydantic import ValidationError

from quantgreeks.core import LiquidityPosition, OptionParameters, OptionType, SqueethPosition
from quantgreeks.derivatives import d1


class TestOptionParameters:

    def test_as_tuple_order(self, option_params, contract):
        assert option_params.as_tuple() == contract

    def test_feeds_formulas(self, option_params, contract):
        assert d1(*option_params.as_tuple()) == d1(*contract)

    def test_rates_default_to_zero(self):
        params = OptionParameters(s0=100.0, x=100.0, t=1.0, sigma=0.2)
        assert params.r == 0.0
        assert params.q == 0.0

    @pytest.mark.parametrize("field,value", [("s0", 0.0), ("x", -1.0), ("t", 0.0), ("sigma", -0.1)])
    def test_rejects_out_of_domain(self, field, value):
        kwargs = {"s0": 100.0, "x": 100.0, "t": 1.0, "sigma": 0.2, field: value}
        with pytest.raises(ValidationError):
            OptionParameters(**kwargs)

    def test_zero_vol_allowed(self):
        assert OptionParameters(s0=100.0, x=100.0, t=1.0, sigma=0.0).sigma == 0.0

    def test_frozen(self, option_params):
        with pytest.raises(ValidationError):
            option_params.s0 = 1.0


class TestLiquidityPosition:

    def test_rejects_inverted_range(self):
        with pytest.raises(ValidationError, match="p_a must be below p_b"):
            LiquidityPosition(p_a=5024.0, p_b=3747.0, r_a=1.0, r_b=1.0)

    def test_rejects_negative_reserves(self):
        with pytest.raises(ValidationError):
            LiquidityPosition(p_a=3747.0, p_b=5024.0, r_a=-1.0, r_b=1.0)

    def test_in_range(self, liquidity_position):
        assert liquidity_position.in_range(4360.61)
        assert liquidity_position.in_range(3747.0)
        assert not liquidity_position.in_range(5100.0)


class TestSqueethPosition:

    def test_rejects_zero_normalization_factor(self):
        with pytest.raises(ValidationError):
            SqueethPosition(eth_price=3500.0, normalization_factor=0.0, iv=0.9)

    def test_rejects_negative_iv(self):
        with pytest.raises(ValidationError):
            SqueethPosition(eth_price=3500.0, normalization_factor=0.8, iv=-0.1)


def test_option_type_values():
    assert OptionType("call") is OptionType.CALL
    assert OptionType.PUT.value == "put"
