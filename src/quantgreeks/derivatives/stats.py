"""
Statistics helpers shared by the Black-Scholes formulas.

The cumulative normal distribution uses the Zelen-Severo polynomial
approximation (Abramowitz & Stegun 26.2.17) rather than an exact CDF, so
that results line up with published reference values to the last digit.
"""

from __future__ import annotations

import numpy as np

from ._numeric import ArrayLike, FloatResult, as_float64, as_result, ieee

A1 = 0.31938153
A2 = -0.356563782
A3 = 1.781477937
A4 = -1.821255978
A5 = 1.330274429
RSQRTPI = 0.39894228040143267793994605993438  # 1 / sqrt(2 * pi)


def cnd(x: ArrayLike) -> FloatResult:
    """
    Cumulative distribution function of the standard normal distribution.

    Absolute error is bounded by roughly 7.5e-8 for all finite x.

    Args:
        x: Point (or array of points) at which to evaluate the CDF

    Returns:
        Approximation of N(x)
    """
    with ieee():
        (x,) = as_float64(x)
        k = 1.0 / (1.0 + 0.2316419 * np.abs(x))
        value = RSQRTPI * np.exp(-0.5 * x * x) * (
            k * (A1 + k * (A2 + k * (A3 + k * (A4 + k * A5))))
        )
        return as_result(np.where(x > 0.0, 1.0 - value, value))
