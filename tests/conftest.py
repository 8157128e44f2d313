"""Pytest configuration and fixtures."""

import pytest

from quantgreeks.config import get_settings
from quantgreeks.core import LiquidityPosition, OptionParameters, SqueethPosition

from reference_contract import DIV_YIELD, INTEREST_RATE, STRIKE, TIME_TO_EXPIRY, UNDERLYING, VOL


@pytest.fixture
def contract():
    """Positional Black-Scholes arguments of the reference contract."""
    return (UNDERLYING, STRIKE, TIME_TO_EXPIRY, INTEREST_RATE, DIV_YIELD, VOL)


@pytest.fixture
def option_params():
    """Reference contract as an OptionParameters bundle."""
    return OptionParameters(
        s0=UNDERLYING,
        x=STRIKE,
        t=TIME_TO_EXPIRY,
        r=INTEREST_RATE,
        q=DIV_YIELD,
        sigma=VOL,
    )


@pytest.fixture
def squeeth_position():
    """ETH at 3500, normalization factor 0.8, 90% implied vol."""
    return SqueethPosition(eth_price=3500.0, normalization_factor=0.8, iv=0.9)


@pytest.fixture
def liquidity_position():
    """ETH/USDC range 3747-5024 with the reserves in priced-token order."""
    return LiquidityPosition(p_a=3747.0, p_b=5024.0, r_a=1.448, r_b=6779.0)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
