"""
European vanilla option pricing under Black-Scholes.

The spot leg is not discounted by the dividend yield; q only enters the
price through d1. Put-call parity therefore reads C - P = s0 - x*e^(-rt).
"""

from __future__ import annotations

import numpy as np

from ._numeric import ArrayLike, FloatResult, as_float64, as_result, ieee
from .common import d1, d2_from_d1
from .stats import cnd


def euro_call(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """
    Evaluate the price of a European call option.

    Args:
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        sigma: Volatility

    Returns:
        Theoretical present value, in the currency of s0 and x
    """
    s0, x, t, r, q, sigma = as_float64(s0, x, t, r, q, sigma)
    d_1 = d1(s0, x, t, r, q, sigma)
    d_2 = d2_from_d1(t, sigma, d_1)
    with ieee():
        arg1 = s0 * cnd(d_1)
        arg2 = x * np.exp(-r * t) * cnd(d_2)
        return as_result(arg1 - arg2)


def euro_put(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """
    Evaluate the price of a European put option.

    Args:
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        sigma: Volatility

    Returns:
        Theoretical present value, in the currency of s0 and x
    """
    s0, x, t, r, q, sigma = as_float64(s0, x, t, r, q, sigma)
    d_1 = d1(s0, x, t, r, q, sigma)
    d_2 = d2_from_d1(t, sigma, d_1)
    with ieee():
        arg1 = s0 * cnd(-d_1)
        arg2 = x * np.exp(-r * t) * cnd(-d_2)
        return as_result(-arg1 + arg2)
