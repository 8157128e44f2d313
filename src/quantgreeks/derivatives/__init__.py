"""
Derivatives pricing and analysis module.

Provides:
- Cumulative normal approximation and Black-Scholes d1 / d2 terms
- European call / put pricing and value at expiry
- First- and second-order Greeks
- Squeeth and concentrated liquidity Greeks
- Implied volatility, put-call parity and an OptionPricer facade
"""

from .common import d1, d2, d2_from_d1, one_over_sqrt_two_pi
from .greeks import (
    EULERS_NUMBER,
    FUNDING_PERIOD,
    SCALING_FACTOR,
    LiquidityGreeks,
    SqueethGreeks,
    concentrated_delta,
    concentrated_gamma,
    concentrated_greeks,
    delta_call,
    delta_call_from_d1,
    delta_put,
    delta_put_from_d1,
    gamma,
    gamma_from_d1,
    lambda_call,
    lambda_from_delta,
    lambda_put,
    rho_call,
    rho_call_from_d2,
    rho_put,
    rho_put_from_d2,
    sqth_delta,
    sqth_gamma,
    sqth_theta,
    sqth_to_usd,
    sqth_vega,
    squeeth_greeks,
    theta_call,
    theta_call_from_d1,
    theta_put,
    theta_put_from_d1,
    vega,
    vega_from_d1,
    virtual_liquidity,
)
from .options import (
    OptionGreeks,
    OptionPricer,
    calculate_greeks,
    implied_volatility,
    put_call_parity_gap,
)
from .price import euro_call, euro_put
from .stats import cnd
from .value import call_at_expiry, put_at_expiry

__all__ = [
    # Primitives
    "cnd",
    "d1",
    "d2",
    "d2_from_d1",
    "one_over_sqrt_two_pi",
    # Pricing
    "euro_call",
    "euro_put",
    "call_at_expiry",
    "put_at_expiry",
    # First-order Greeks
    "delta_call",
    "delta_call_from_d1",
    "delta_put",
    "delta_put_from_d1",
    "lambda_call",
    "lambda_put",
    "lambda_from_delta",
    "rho_call",
    "rho_call_from_d2",
    "rho_put",
    "rho_put_from_d2",
    "theta_call",
    "theta_call_from_d1",
    "theta_put",
    "theta_put_from_d1",
    "vega",
    "vega_from_d1",
    # Second-order Greeks
    "gamma",
    "gamma_from_d1",
    # Concentrated liquidity
    "virtual_liquidity",
    "concentrated_delta",
    "concentrated_gamma",
    "concentrated_greeks",
    "LiquidityGreeks",
    # Squeeth
    "FUNDING_PERIOD",
    "SCALING_FACTOR",
    "EULERS_NUMBER",
    "sqth_to_usd",
    "sqth_delta",
    "sqth_gamma",
    "sqth_theta",
    "sqth_vega",
    "squeeth_greeks",
    "SqueethGreeks",
    # Options analytics
    "OptionGreeks",
    "OptionPricer",
    "calculate_greeks",
    "implied_volatility",
    "put_call_parity_gap",
]
