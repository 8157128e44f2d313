"""
Greeks for squeeth, the ETH^2 power perpetual.

Derived from the squeethlab return model: the mark price scales with the
square of the ETH price and drifts with the normalization factor, with an
implied-volatility premium of exp(iv^2 * FUNDING_PERIOD).
"""

from __future__ import annotations

from dataclasses import dataclass

from quantgreeks.core.models import SqueethPosition

from .._numeric import ArrayLike, FloatResult, as_float64, as_result, ieee

FUNDING_PERIOD = 17.5 / 365.0
SCALING_FACTOR = 10000.0
# Fixed literal rather than math.e; published squeeth figures use it.
EULERS_NUMBER = 2.718281828459


def _vol_premium(iv: ArrayLike):
    return EULERS_NUMBER ** (iv ** 2 * FUNDING_PERIOD)


def sqth_to_usd(eth_price: ArrayLike, normalization_factor: ArrayLike, iv: ArrayLike) -> FloatResult:
    """
    Squeeth price in USD.

    Args:
        eth_price: ETH price in USD
        normalization_factor: Cumulative funding normalization factor
        iv: Implied volatility

    Returns:
        oSQTH mark price in USD
    """
    eth_price, normalization_factor, iv = as_float64(eth_price, normalization_factor, iv)
    with ieee():
        return as_result(
            (normalization_factor * (eth_price ** 2)) * _vol_premium(iv) / SCALING_FACTOR
        )


def sqth_delta(eth_price: ArrayLike, normalization_factor: ArrayLike, iv: ArrayLike) -> FloatResult:
    """Delta of a squeeth position with respect to the ETH price."""
    eth_price, normalization_factor, iv = as_float64(eth_price, normalization_factor, iv)
    with ieee():
        return as_result(
            2.0 * normalization_factor * eth_price * _vol_premium(iv) / SCALING_FACTOR
        )


def sqth_gamma(normalization_factor: ArrayLike, iv: ArrayLike) -> FloatResult:
    """Gamma of a squeeth position; independent of the ETH price."""
    normalization_factor, iv = as_float64(normalization_factor, iv)
    with ieee():
        return as_result(2.0 * normalization_factor * _vol_premium(iv) / SCALING_FACTOR)


def sqth_theta(eth_price: ArrayLike, normalization_factor: ArrayLike, iv: ArrayLike) -> FloatResult:
    """Theta of a squeeth position, per year."""
    (iv,) = as_float64(iv)
    with ieee():
        return as_result(iv ** 2 * sqth_to_usd(eth_price, normalization_factor, iv))


def sqth_vega(eth_price: ArrayLike, normalization_factor: ArrayLike, iv: ArrayLike) -> FloatResult:
    """Vega of a squeeth position, per year."""
    (iv,) = as_float64(iv)
    with ieee():
        return as_result(
            2.0 * iv * FUNDING_PERIOD * sqth_to_usd(eth_price, normalization_factor, iv)
        )


@dataclass
class SqueethGreeks:
    """Price and Greeks of one oSQTH unit."""
    price: float
    delta: float
    gamma: float
    theta: float      # Per year
    vega: float       # Per year


def squeeth_greeks(position: SqueethPosition) -> SqueethGreeks:
    """Evaluate the price and every Greek of a squeeth position."""
    eth_price, nf, iv = position.eth_price, position.normalization_factor, position.iv
    return SqueethGreeks(
        price=float(sqth_to_usd(eth_price, nf, iv)),
        delta=float(sqth_delta(eth_price, nf, iv)),
        gamma=float(sqth_gamma(nf, iv)),
        theta=float(sqth_theta(eth_price, nf, iv)),
        vega=float(sqth_vega(eth_price, nf, iv)),
    )
