"""Greeks: first- and second-order Black-Scholes, squeeth, concentrated liquidity."""

from .concentrated_liquidity import (
    LiquidityGreeks,
    concentrated_delta,
    concentrated_gamma,
    concentrated_greeks,
    virtual_liquidity,
)
from .first import (
    delta_call,
    delta_call_from_d1,
    delta_put,
    delta_put_from_d1,
    lambda_call,
    lambda_from_delta,
    lambda_put,
    rho_call,
    rho_call_from_d2,
    rho_put,
    rho_put_from_d2,
    theta_call,
    theta_call_from_d1,
    theta_put,
    theta_put_from_d1,
    vega,
    vega_from_d1,
)
from .second import gamma, gamma_from_d1
from .squeeth import (
    EULERS_NUMBER,
    FUNDING_PERIOD,
    SCALING_FACTOR,
    SqueethGreeks,
    sqth_delta,
    sqth_gamma,
    sqth_theta,
    sqth_to_usd,
    sqth_vega,
    squeeth_greeks,
)

__all__ = [
    # First order
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
    # Second order
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
]
