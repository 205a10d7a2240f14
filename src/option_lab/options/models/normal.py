"""Standard normal density and cumulative distribution."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike
from scipy.special import erf

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)
_SQRT_2 = math.sqrt(2.0)


def _as_output(values: np.ndarray, x: ArrayLike) -> float | np.ndarray:
    if np.ndim(x) == 0:
        return float(values)
    return values


def norm_pdf(x: ArrayLike) -> float | np.ndarray:
    """Standard normal density `exp(-x^2/2) / sqrt(2*pi)`."""
    arr = np.asarray(x, dtype=float)
    return _as_output(np.exp(-0.5 * arr * arr) * _INV_SQRT_2PI, x)


def norm_cdf(x: ArrayLike) -> float | np.ndarray:
    """Standard normal CDF via `0.5 * (1 + erf(x / sqrt(2)))`.

    Negative inputs are evaluated as `1 - cdf(|x|)` so that
    `cdf(-x) == 1 - cdf(x)` holds by construction.
    """
    arr = np.asarray(x, dtype=float)
    upper = 0.5 * (1.0 + erf(np.abs(arr) / _SQRT_2))
    return _as_output(np.where(arr < 0, 1.0 - upper, upper), x)
