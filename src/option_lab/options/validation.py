"""Boundary precondition checks.

Invalid values are rejected with `InvalidInputError`, never clamped.
"""

from __future__ import annotations

import math

from option_lab.errors import InvalidInputError


def check_real(name: str, value: float) -> float:
    """Reject non-numeric, NaN and infinite values."""
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    try:
        as_float = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(as_float):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return as_float


def check_positive(name: str, value: float) -> float:
    as_float = check_real(name, value)
    if as_float <= 0:
        raise InvalidInputError(f"{name} must be > 0, got {value!r}")
    return as_float


def check_non_negative(name: str, value: float) -> float:
    as_float = check_real(name, value)
    if as_float < 0:
        raise InvalidInputError(f"{name} must be >= 0, got {value!r}")
    return as_float


def check_leverage(leverage: float, max_leverage: float) -> float:
    """Leverage must lie in `[1, max_leverage]`."""
    as_float = check_real("leverage", leverage)
    if not 1.0 <= as_float <= max_leverage:
        raise InvalidInputError(
            f"leverage must be in [1, {max_leverage}], got {leverage!r}"
        )
    return as_float
