"""
Black-Scholes intermediate terms.

d1 and d2 are the standardized log-moneyness quantities every formula in
this package is built from. Callers that need both should compute d1 once
and derive d2 with `d2_from_d1` so the two never drift apart.

Note: t == 0 or sigma == 0 divides by zero and yields inf/nan. Expired and
zero-volatility contracts have to be filtered out by the caller.
"""

from __future__ import annotations

import math

import numpy as np

from ._numeric import ArrayLike, FloatResult, as_float64, as_result, ieee


def d1(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """
    Calculate d1 in the Black-Scholes formula.

    Args:
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        sigma: Volatility

    Returns:
        (ln(s0/x) + t*(r - q + sigma^2/2)) / (sigma*sqrt(t))
    """
    s0, x, t, r, q, sigma = as_float64(s0, x, t, r, q, sigma)
    with ieee():
        ln = np.log(s0 / x)
        t_num = t * (r - q + (sigma ** 2 / 2.0))
        return as_result((ln + t_num) / (sigma * np.sqrt(t)))


def d2(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """Calculate d2 in the Black-Scholes formula."""
    return d2_from_d1(t, sigma, d1(s0, x, t, r, q, sigma))


def d2_from_d1(t: ArrayLike, sigma: ArrayLike, d1: ArrayLike) -> FloatResult:
    """Calculate d2 from an already computed d1."""
    t, sigma, d1 = as_float64(t, sigma, d1)
    with ieee():
        return as_result(d1 - (np.sqrt(t) * sigma))


def one_over_sqrt_two_pi() -> float:
    """1 / sqrt(2*pi), the normalizing constant of the standard normal pdf."""
    return 1.0 / math.sqrt(2.0 * math.pi)
