"""
First-order Greeks for European options.

All functions take the six Black-Scholes parameters (s0, x, t, r, q, sigma)
plus, where noted, an extra caller-supplied value. Rho and vega are scaled
per 1% move in the rate and in volatility respectively.

The `*_from_d1` / `*_from_d2` variants take an already computed d1 or d2,
so several Greeks of one contract can share a single evaluation.
"""

from __future__ import annotations

import numpy as np

from .._numeric import ArrayLike, FloatResult, as_float64, as_result, ieee
from ..common import d1, d2, d2_from_d1, one_over_sqrt_two_pi
from ..stats import cnd


# =============================================================================
# Delta
# =============================================================================


def delta_call(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """
    Delta of a call option.

    Rate of change of the theoretical option value with respect to the
    underlying price.
    """
    return delta_call_from_d1(t, q, d1(s0, x, t, r, q, sigma))


def delta_put(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """
    Delta of a put option.

    Rate of change of the theoretical option value with respect to the
    underlying price.
    """
    return delta_put_from_d1(t, q, d1(s0, x, t, r, q, sigma))


def delta_call_from_d1(t: ArrayLike, q: ArrayLike, d1: ArrayLike) -> FloatResult:
    """Call delta from an already computed d1."""
    t, q = as_float64(t, q)
    with ieee():
        return as_result(np.exp(-(q * t)) * cnd(d1))


def delta_put_from_d1(t: ArrayLike, q: ArrayLike, d1: ArrayLike) -> FloatResult:
    """Put delta from an already computed d1."""
    t, q = as_float64(t, q)
    with ieee():
        return as_result(np.exp(-(q * t)) * (cnd(d1) - 1.0))


# =============================================================================
# Lambda (Omega)
# =============================================================================


def lambda_call(
    s0: ArrayLike,
    x: ArrayLike,
    t: ArrayLike,
    r: ArrayLike,
    q: ArrayLike,
    sigma: ArrayLike,
    v: ArrayLike,
) -> FloatResult:
    """
    Lambda of a call option, also known as omega.

    Percentage change in the option value per percentage change in the
    underlying price.

    Args:
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        sigma: Volatility
        v: Value or current price of the option
    """
    return lambda_from_delta(s0, v, delta_call(s0, x, t, r, q, sigma))


def lambda_put(
    s0: ArrayLike,
    x: ArrayLike,
    t: ArrayLike,
    r: ArrayLike,
    q: ArrayLike,
    sigma: ArrayLike,
    v: ArrayLike,
) -> FloatResult:
    """
    Lambda of a put option, also known as omega.

    Args:
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        sigma: Volatility
        v: Value or current price of the option
    """
    return lambda_from_delta(s0, v, delta_put(s0, x, t, r, q, sigma))


def lambda_from_delta(s0: ArrayLike, v: ArrayLike, delta: ArrayLike) -> FloatResult:
    """Lambda from a known delta: delta * s0 / v. A zero v gives inf."""
    s0, v, delta = as_float64(s0, v, delta)
    with ieee():
        return as_result(delta * s0 / v)


# =============================================================================
# Rho
# =============================================================================


def rho_call(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """Rho of a call option, per 1% change in the risk-free rate."""
    return rho_call_from_d2(x, t, r, d2(s0, x, t, r, q, sigma))


def rho_put(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """Rho of a put option, per 1% change in the risk-free rate."""
    return rho_put_from_d2(x, t, r, d2(s0, x, t, r, q, sigma))


def rho_call_from_d2(x: ArrayLike, t: ArrayLike, r: ArrayLike, d2: ArrayLike) -> FloatResult:
    """Call rho from an already computed d2."""
    x, t, r = as_float64(x, t, r)
    d2_cnd = cnd(d2)
    with ieee():
        return as_result((1.0 / 100.0) * x * t * np.exp(-r * t) * d2_cnd)


def rho_put_from_d2(x: ArrayLike, t: ArrayLike, r: ArrayLike, d2: ArrayLike) -> FloatResult:
    """Put rho from an already computed d2."""
    x, t, r = as_float64(x, t, r)
    neg_d2_cnd = cnd(-np.asarray(d2, dtype=np.float64))
    with ieee():
        return as_result(-(1.0 / 100.0) * x * t * np.exp(-r * t) * neg_d2_cnd)


# =============================================================================
# Theta
# =============================================================================


def theta_call(
    s0: ArrayLike,
    x: ArrayLike,
    t: ArrayLike,
    r: ArrayLike,
    q: ArrayLike,
    sigma: ArrayLike,
    days_per_year: ArrayLike,
) -> FloatResult:
    """
    Theta of a call option, per calendar day.

    Args:
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        sigma: Volatility
        days_per_year: Number of calendar days in the year
    """
    return theta_call_from_d1(s0, x, t, r, q, sigma, days_per_year, d1(s0, x, t, r, q, sigma))


def theta_put(
    s0: ArrayLike,
    x: ArrayLike,
    t: ArrayLike,
    r: ArrayLike,
    q: ArrayLike,
    sigma: ArrayLike,
    days_per_year: ArrayLike,
) -> FloatResult:
    """
    Theta of a put option, per calendar day.

    Args:
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        sigma: Volatility
        days_per_year: Number of calendar days in the year
    """
    return theta_put_from_d1(s0, x, t, r, q, sigma, days_per_year, d1(s0, x, t, r, q, sigma))


def theta_call_from_d1(
    s0: ArrayLike,
    x: ArrayLike,
    t: ArrayLike,
    r: ArrayLike,
    q: ArrayLike,
    sigma: ArrayLike,
    days_per_year: ArrayLike,
    d1: ArrayLike,
) -> FloatResult:
    """Call theta from an already computed d1."""
    d_2 = d2_from_d1(t, sigma, d1)
    arg1 = _theta_arg_1(s0, t, q, sigma, d1)
    arg2 = _theta_arg_2(x, t, r, d_2)
    arg3 = _theta_arg_3(s0, t, q, d1)
    with ieee():
        return as_result((1.0 / np.float64(days_per_year)) * (arg1 - arg2 + arg3))


def theta_put_from_d1(
    s0: ArrayLike,
    x: ArrayLike,
    t: ArrayLike,
    r: ArrayLike,
    q: ArrayLike,
    sigma: ArrayLike,
    days_per_year: ArrayLike,
    d1: ArrayLike,
) -> FloatResult:
    """Put theta from an already computed d1."""
    (d1,) = as_float64(d1)
    d_2 = d2_from_d1(t, sigma, d1)
    arg1 = _theta_arg_1(s0, t, q, sigma, d1)
    # The put legs evaluate N(.) at -d2 and -d1
    arg2 = _theta_arg_2(x, t, r, -d_2)
    arg3 = _theta_arg_3(s0, t, q, -d1)
    with ieee():
        return as_result((1.0 / np.float64(days_per_year)) * (arg1 + arg2 - arg3))


def _theta_arg_1(s0, t, q, sigma, d1):
    s0, t, q, sigma, d1 = as_float64(s0, t, q, sigma, d1)
    with ieee():
        return -(
            ((s0 * sigma * np.exp(-q * t)) / (2.0 * np.sqrt(t)))
            * one_over_sqrt_two_pi()
            * np.exp(-(d1 ** 2) / 2.0)
        )


def _theta_arg_2(x, t, r, d2):
    x, t, r = as_float64(x, t, r)
    with ieee():
        return r * x * np.exp(-r * t) * cnd(d2)


def _theta_arg_3(s0, t, q, d1):
    s0, t, q = as_float64(s0, t, q)
    with ieee():
        return q * s0 * np.exp(-q * t) * cnd(d1)


# =============================================================================
# Vega
# =============================================================================


def vega(
    s0: ArrayLike, x: ArrayLike, t: ArrayLike, r: ArrayLike, q: ArrayLike, sigma: ArrayLike
) -> FloatResult:
    """
    Vega of an option (identical for calls and puts).

    Sensitivity of the option value to a 1 vol-point move in the
    volatility of the underlying.
    """
    return vega_from_d1(s0, t, q, d1(s0, x, t, r, q, sigma))


def vega_from_d1(s0: ArrayLike, t: ArrayLike, q: ArrayLike, d1: ArrayLike) -> FloatResult:
    """Vega from an already computed d1."""
    s0, t, q, d1 = as_float64(s0, t, q, d1)
    with ieee():
        mult1 = (1.0 / 100.0) * s0 * np.exp(-(q * t)) * np.sqrt(t)
        mult2 = one_over_sqrt_two_pi()
        mult3 = np.exp(-(d1 ** 2) / 2.0)
        return as_result(mult1 * mult2 * mult3)
