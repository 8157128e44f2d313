"""Core module exports."""

from .models import (
    LiquidityPosition,
    OptionParameters,
    OptionType,
    SqueethPosition,
)

__all__ = [
    "OptionType",
    "OptionParameters",
    "LiquidityPosition",
    "SqueethPosition",
]
