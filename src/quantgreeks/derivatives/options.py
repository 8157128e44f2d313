"""
High-level European option analytics built on the closed-form formulas.

This module provides:
- OptionGreeks container and calculate_greeks (one d1 shared by all Greeks)
- Implied volatility via Brent's method
- Put-call parity gap for the pricing convention used here
- OptionPricer, a spot/rate/dividend-bound facade with chain pricing
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from scipy.optimize import brentq

from quantgreeks.config import get_logger, get_settings
from quantgreeks.core.models import OptionParameters, OptionType

from .common import d1 as compute_d1
from .common import d2_from_d1
from .greeks.first import (
    delta_call_from_d1,
    delta_put_from_d1,
    lambda_from_delta,
    rho_call_from_d2,
    rho_put_from_d2,
    theta_call_from_d1,
    theta_put_from_d1,
    vega_from_d1,
)
from .greeks.second import gamma_from_d1
from .price import euro_call, euro_put

logger = get_logger("derivatives.options")

OptionTypeLike = Union[OptionType, str]


@dataclass
class OptionGreeks:
    """Container for option Greeks."""
    delta: float      # Rate of change of option price w.r.t. spot price
    gamma: float      # Rate of change of delta w.r.t. spot price
    theta: float      # Time decay (per day)
    vega: float       # Sensitivity to volatility (per 1% move)
    rho: float        # Sensitivity to interest rate (per 1% move)

    # Only available when the option value is known
    lambda_: Optional[float] = None   # Elasticity, delta * s0 / v


def calculate_greeks(
    params: OptionParameters,
    option_type: OptionTypeLike,
    days_per_year: Optional[float] = None,
    option_value: Optional[float] = None,
) -> OptionGreeks:
    """
    Calculate all Greeks for an option.

    d1 is computed once and every Greek is derived from it, so the values
    are identical to the individual greek functions.

    Args:
        params: Contract parameters
        option_type: "call" or "put"
        days_per_year: Theta day count, defaults to Settings.DAYS_PER_YEAR
        option_value: Current option value; enables lambda

    Returns:
        OptionGreeks dataclass with all calculated Greeks

    Raises:
        ValueError: If option_type is not "call" or "put"
    """
    option_type = OptionType(option_type)
    if days_per_year is None:
        days_per_year = get_settings().DAYS_PER_YEAR

    s0, x, t, r, q, sigma = params.as_tuple()
    d1 = compute_d1(s0, x, t, r, q, sigma)
    d2 = d2_from_d1(t, sigma, d1)

    if option_type is OptionType.CALL:
        delta = delta_call_from_d1(t, q, d1)
        rho = rho_call_from_d2(x, t, r, d2)
        theta = theta_call_from_d1(s0, x, t, r, q, sigma, days_per_year, d1)
    else:
        delta = delta_put_from_d1(t, q, d1)
        rho = rho_put_from_d2(x, t, r, d2)
        theta = theta_put_from_d1(s0, x, t, r, q, sigma, days_per_year, d1)

    greeks = OptionGreeks(
        delta=float(delta),
        gamma=float(gamma_from_d1(s0, t, q, sigma, d1)),
        theta=float(theta),
        vega=float(vega_from_d1(s0, t, q, d1)),
        rho=float(rho),
    )

    if option_value is not None:
        greeks.lambda_ = float(lambda_from_delta(s0, option_value, delta))

    return greeks


def implied_volatility(
    option_price: float,
    s0: float,
    x: float,
    t: float,
    r: float,
    q: float,
    option_type: OptionTypeLike,
    precision: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> Optional[float]:
    """
    Calculate implied volatility using Brent's method.

    Searches [IV_LOWER_BOUND, IV_UPPER_BOUND] for the sigma at which
    euro_call / euro_put reproduces option_price.

    Args:
        option_price: Market price of the option
        s0: Underlying price
        x: Strike price
        t: Time to expiration as a fraction of the year
        r: Continuously compounded risk-free rate
        q: Continuously compounded dividend yield
        option_type: "call" or "put"
        precision: Desired precision for IV, defaults to Settings.IV_PRECISION
        max_iterations: Maximum iterations, defaults to Settings.IV_MAX_ITERATIONS

    Returns:
        Implied volatility as decimal, or None if not found
    """
    option_type = OptionType(option_type)
    settings = get_settings()
    precision = precision or settings.IV_PRECISION
    max_iterations = max_iterations or settings.IV_MAX_ITERATIONS

    if t <= 0:
        return None

    pricing_func = euro_call if option_type is OptionType.CALL else euro_put

    def objective(sigma: float) -> float:
        return float(pricing_func(s0, x, t, r, q, sigma)) - option_price

    lower, upper = settings.IV_LOWER_BOUND, settings.IV_UPPER_BOUND
    if objective(lower) > 0:
        logger.debug(f"Price {option_price} below the {option_type.value} price at sigma={lower}")
        return None

    try:
        iv = brentq(objective, lower, upper, xtol=precision, maxiter=max_iterations)
    except ValueError:
        # No root found in the interval
        logger.debug(f"No implied volatility in [{lower}, {upper}] for {option_type.value} at {option_price}")
        return None

    logger.debug(f"Implied volatility for {option_type.value} at {option_price}: {iv:.6f}")
    return float(iv)


def put_call_parity_gap(
    call_price: float,
    put_price: float,
    s0: float,
    x: float,
    t: float,
    r: float,
) -> float:
    """
    Deviation from put-call parity: (C - P) - (s0 - x*e^(-rt)).

    The pricing formulas leave the spot leg undiscounted by the dividend
    yield, so this relation holds for every q.
    """
    return (call_price - put_price) - (s0 - x * math.exp(-r * t))


class OptionPricer:
    """
    High-level option pricing interface.

    Example:
        pricer = OptionPricer(spot=64.68, rate=0.015, dividend=0.021)
        price = pricer.price_call(strike=65, expiry_days=23, vol=0.5051)
        greeks = pricer.greeks_call(strike=65, expiry_days=23, vol=0.5051)
    """

    def __init__(
        self,
        spot: float,
        rate: Optional[float] = None,
        dividend: Optional[float] = None,
        days_per_year: Optional[float] = None,
    ):
        """
        Initialize pricer with underlying parameters.

        Args:
            spot: Current spot price of underlying
            rate: Risk-free rate, defaults to Settings.DEFAULT_RATE
            dividend: Dividend yield, defaults to Settings.DEFAULT_DIVIDEND_YIELD
            days_per_year: Day count, defaults to Settings.DAYS_PER_YEAR
        """
        settings = get_settings()
        self.spot = spot
        self.rate = settings.DEFAULT_RATE if rate is None else rate
        self.dividend = settings.DEFAULT_DIVIDEND_YIELD if dividend is None else dividend
        self.days_per_year = days_per_year or settings.DAYS_PER_YEAR

    def _days_to_years(self, days: float) -> float:
        return days / self.days_per_year

    def params(self, strike: float, expiry_days: float, vol: float) -> OptionParameters:
        """Contract parameters for a strike / expiry / vol on this underlying."""
        return OptionParameters(
            s0=self.spot,
            x=strike,
            t=self._days_to_years(expiry_days),
            r=self.rate,
            q=self.dividend,
            sigma=vol,
        )

    def price_call(self, strike: float, expiry_days: float, vol: float) -> float:
        """Price a call option."""
        return float(euro_call(*self.params(strike, expiry_days, vol).as_tuple()))

    def price_put(self, strike: float, expiry_days: float, vol: float) -> float:
        """Price a put option."""
        return float(euro_put(*self.params(strike, expiry_days, vol).as_tuple()))

    def greeks_call(self, strike: float, expiry_days: float, vol: float) -> OptionGreeks:
        """Calculate Greeks for a call option."""
        return calculate_greeks(
            self.params(strike, expiry_days, vol), OptionType.CALL, self.days_per_year
        )

    def greeks_put(self, strike: float, expiry_days: float, vol: float) -> OptionGreeks:
        """Calculate Greeks for a put option."""
        return calculate_greeks(
            self.params(strike, expiry_days, vol), OptionType.PUT, self.days_per_year
        )

    def implied_vol_call(self, strike: float, expiry_days: float, market_price: float) -> Optional[float]:
        """Calculate implied volatility for a call option."""
        T = self._days_to_years(expiry_days)
        return implied_volatility(
            market_price, self.spot, strike, T, self.rate, self.dividend, OptionType.CALL
        )

    def implied_vol_put(self, strike: float, expiry_days: float, market_price: float) -> Optional[float]:
        """Calculate implied volatility for a put option."""
        T = self._days_to_years(expiry_days)
        return implied_volatility(
            market_price, self.spot, strike, T, self.rate, self.dividend, OptionType.PUT
        )

    def put_call_parity_check(
        self,
        call_price: float,
        put_price: float,
        strike: float,
        expiry_days: float,
        tolerance: float = 0.01,
    ) -> dict:
        """
        Check put-call parity: C - P = S - K*e^(-rT)

        Returns dict with expected difference, actual difference, and whether parity holds.
        """
        T = self._days_to_years(expiry_days)
        expected_diff = self.spot - strike * math.exp(-self.rate * T)
        actual_diff = call_price - put_price
        deviation = abs(put_call_parity_gap(call_price, put_price, self.spot, strike, T, self.rate))

        return {
            "expected_diff": expected_diff,
            "actual_diff": actual_diff,
            "deviation": deviation,
            "parity_holds": deviation <= tolerance * self.spot,
        }

    def price_chain(
        self,
        strikes: list[float],
        expiry_days: float,
        vol: float,
    ) -> list[dict]:
        """
        Price a full option chain for given strikes.

        Returns list of dicts with strike, call_price, put_price, and Greeks.
        """
        chain = []

        for K in strikes:
            params = self.params(K, expiry_days, vol)
            call_price = float(euro_call(*params.as_tuple()))
            put_price = float(euro_put(*params.as_tuple()))
            call_greeks = calculate_greeks(params, OptionType.CALL, self.days_per_year)
            put_greeks = calculate_greeks(params, OptionType.PUT, self.days_per_year)

            chain.append({
                "strike": K,
                "call_price": round(call_price, 4),
                "put_price": round(put_price, 4),
                "call_delta": round(call_greeks.delta, 4),
                "put_delta": round(put_greeks.delta, 4),
                "gamma": round(call_greeks.gamma, 6),
                "call_theta": round(call_greeks.theta, 4),
                "put_theta": round(put_greeks.theta, 4),
                "vega": round(call_greeks.vega, 4),
            })

        logger.debug(f"Priced chain of {len(chain)} strikes at {expiry_days}d, vol={vol}")
        return chain
