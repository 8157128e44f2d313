"""Floating point helpers for the closed-form formulas."""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Scalar inputs come back as numpy scalars, array inputs as arrays
FloatResult = Union[np.float64, NDArray[np.float64]]
Float32Result = Union[np.float32, NDArray[np.float32]]

__all__ = ["ArrayLike", "FloatResult", "Float32Result", "ieee", "as_result", "as_float64"]


def ieee() -> np.errstate:
    """
    Context in which degenerate inputs follow IEEE-754 semantics.

    Division by zero, log of a non-positive number and overflow yield
    inf/nan instead of warnings, and the values propagate to the caller.
    """
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def as_result(value: ArrayLike):
    """Unwrap 0-d arrays so scalar inputs give numpy scalars back."""
    return np.asarray(value)[()]


def as_float64(*values: ArrayLike) -> tuple[NDArray[np.float64], ...]:
    """Coerce scalars, sequences or arrays to float64 arrays."""
    return tuple(np.asarray(v, dtype=np.float64) for v in values)
