"""Option value at expiry (no time value)."""

from __future__ import annotations

import numpy as np

from ._numeric import ArrayLike, FloatResult, as_result


def call_at_expiry(s_t: ArrayLike, x: ArrayLike) -> FloatResult:
    """
    Value of a call option at expiry.

    Args:
        s_t: Price of the underlying at the expiry date
        x: Strike price
    """
    return as_result(np.maximum(np.subtract(s_t, x), 0.0))


def put_at_expiry(s_t: ArrayLike, x: ArrayLike) -> FloatResult:
    """
    Value of a put option at expiry.

    Args:
        s_t: Price of the underlying at the expiry date
        x: Strike price
    """
    return as_result(np.maximum(np.subtract(x, s_t), 0.0))
