"""Parameter bundles for the pricing formulas, using Pydantic."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OptionType(str, Enum):
    """Option right."""
    CALL = "call"
    PUT = "put"


# =============================================================================
# Black-Scholes
# =============================================================================


class OptionParameters(BaseModel):
    """
    Immutable Black-Scholes contract parameters.

    Validates the domain once, upstream of the formulas, which never
    validate themselves.
    """
    model_config = ConfigDict(frozen=True)

    s0: float = Field(..., gt=0, description="Underlying price")
    x: float = Field(..., gt=0, description="Strike price")
    t: float = Field(..., gt=0, description="Time to expiry as a fraction of the year")
    r: float = Field(0.0, description="Continuously compounded risk-free rate")
    q: float = Field(0.0, description="Continuously compounded dividend yield")
    sigma: float = Field(..., ge=0, description="Volatility")

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        """Positional arguments in the order the formulas take them."""
        return (self.s0, self.x, self.t, self.r, self.q, self.sigma)


# =============================================================================
# Concentrated liquidity
# =============================================================================


class LiquidityPosition(BaseModel):
    """Bounded liquidity position over the price range [p_a, p_b]."""
    model_config = ConfigDict(frozen=True)

    p_a: float = Field(..., gt=0, description="Lower price of the tick range")
    p_b: float = Field(..., gt=0, description="Upper price of the tick range")
    r_a: float = Field(..., ge=0, description="Reserves of token a")
    r_b: float = Field(..., ge=0, description="Reserves of token b")

    @model_validator(mode="after")
    def check_range(self) -> "LiquidityPosition":
        if self.p_a >= self.p_b:
            raise ValueError(f"p_a must be below p_b, got p_a={self.p_a}, p_b={self.p_b}")
        return self

    def in_range(self, price: float) -> bool:
        """Whether the position is active (has gamma) at this price."""
        return self.p_a <= price <= self.p_b


# =============================================================================
# Squeeth
# =============================================================================


class SqueethPosition(BaseModel):
    """Market state for one oSQTH unit."""
    model_config = ConfigDict(frozen=True)

    eth_price: float = Field(..., gt=0, description="ETH price in USD")
    normalization_factor: float = Field(..., gt=0, description="Cumulative funding normalization factor")
    iv: float = Field(..., ge=0, description="Implied volatility")
