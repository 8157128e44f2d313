"""
Greeks of a concentrated liquidity (Uniswap v3 style) position.

Derived from Guillaume Lambert's "Understanding the value of Uniswap v3
liquidity positions" and Appendix A of the bounded liquidity paper
(SSRN 3898384).

Everything here is computed in float32 to stay in line with the
precision of the published on-chain figures.

Caveat: a position has no gamma outside of [p_a, p_b]. These functions do
not range-check the price; that is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from quantgreeks.core.models import LiquidityPosition

from .._numeric import ArrayLike, Float32Result, as_result, ieee


def _f32(*values: ArrayLike):
    return tuple(np.float32(v) for v in values)


def virtual_liquidity(p_a: ArrayLike, p_b: ArrayLike, r_a: ArrayLike, r_b: ArrayLike) -> Float32Result:
    """
    Virtual liquidity L of a concentrated liquidity position.

    Solves the bounded liquidity reserve equation for L as a quadratic
    a*L^2 + b*L + c = 0 and returns the positive root.

    Which reserve is the priced token depends on the pool's token order;
    callers sometimes need to swap r_a and r_b.

    Args:
        p_a: Lower price of the tick range
        p_b: Upper price of the tick range
        r_a: Reserves of token a
        r_b: Reserves of token b

    Returns:
        Virtual liquidity, elementwise for array inputs. If the
        discriminant is negative the result is nan; if neither root is
        positive the second root is returned as is.
    """
    p_a, p_b, r_a, r_b = _f32(p_a, p_b, r_a, r_b)
    two, four = _f32(2.0, 4.0)
    with ieee():
        a = (np.sqrt(p_a) / np.sqrt(p_b)) - np.float32(1.0)
        b = (r_b / np.sqrt(p_b)) + (r_a * np.sqrt(p_a))
        c = r_a * r_b

        discriminant = b ** 2 - (four * a * c)

        solution1 = (-b - np.sqrt(discriminant)) / (two * a)
        solution2 = (-b + np.sqrt(discriminant)) / (two * a)

        return as_result(np.where(solution1 > 0.0, solution1, solution2))


def concentrated_delta(liquidity: ArrayLike, p: ArrayLike, p_b: ArrayLike) -> Float32Result:
    """
    Delta of a concentrated liquidity position.

    Args:
        liquidity: Virtual liquidity L
        p: Current price
        p_b: Upper price of the tick range
    """
    liquidity, p, p_b = _f32(liquidity, p, p_b)
    one = np.float32(1.0)
    with ieee():
        return liquidity * (one / np.sqrt(p) - one / np.sqrt(p_b))


def concentrated_gamma(liquidity: ArrayLike, p: ArrayLike) -> Float32Result:
    """
    Gamma of a concentrated liquidity position.

    Args:
        liquidity: Virtual liquidity L
        p: Current price
    """
    liquidity, p = _f32(liquidity, p)
    with ieee():
        return np.float32(0.5) * liquidity * p ** np.float32(-1.5)


@dataclass
class LiquidityGreeks:
    """Virtual liquidity and Greeks of a position at one price."""
    virtual_liquidity: float
    delta: float
    gamma: float


def concentrated_greeks(position: LiquidityPosition, price: float) -> LiquidityGreeks:
    """
    Solve L once for the position and evaluate delta and gamma at price.

    Like the underlying formulas, no range check is applied.
    """
    liquidity = virtual_liquidity(position.p_a, position.p_b, position.r_a, position.r_b)
    return LiquidityGreeks(
        virtual_liquidity=float(liquidity),
        delta=float(concentrated_delta(liquidity, price, position.p_b)),
        gamma=float(concentrated_gamma(liquidity, price)),
    )
