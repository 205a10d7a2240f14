"""Black-Scholes pricing and Greeks for European options (no dividends).

`T` is in years. Degenerate inputs are priced through limiting cases:
- `T == 0`: intrinsic value; only delta survives, with an at-the-money
  tie-break of +/-0.5.
- `sigma == 0`: discounted deterministic payoff on the forward
  `F = S * exp(r * T)`; delta is the discounted in-the-money indicator and
  the other Greeks are zero.
"""

from __future__ import annotations

import math

from option_lab.errors import InvalidInputError
from option_lab.options.models.normal import norm_cdf, norm_pdf
from option_lab.options.types import (
    OptionType,
    OptionTypeInput,
    normalize_option_type,
)
from option_lab.options.validation import (
    check_non_negative,
    check_positive,
    check_real,
)


def _check_inputs(S: float, K: float, T: float, sigma: float, r: float) -> None:
    check_positive("spot", S)
    check_positive("strike", K)
    check_non_negative("time_to_expiry", T)
    check_non_negative("volatility", sigma)
    check_real("risk_free_rate", r)


def intrinsic_value(S: float, K: float, option_type: OptionTypeInput = "call") -> float:
    """Exercise value `max(0, S-K)` for calls, `max(0, K-S)` for puts."""
    if normalize_option_type(option_type) == OptionType.CALL:
        return max(0.0, S - K)
    return max(0.0, K - S)


def bs_d1_d2(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> tuple[float, float]:
    """Compute d1 and d2; only defined for positive `T` and `sigma`."""
    if T <= 0 or sigma <= 0:
        raise InvalidInputError("T and sigma must be positive")
    sqrt_t = math.sqrt(T)
    d1 = (math.log(S / K) + (r + 0.5 * sigma**2) * T) / (sigma * sqrt_t)
    d2 = d1 - sigma * sqrt_t
    return d1, d2


def bs_price(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    option_type: OptionTypeInput = "call",
) -> float:
    """Black-Scholes price, never negative."""
    _check_inputs(S, K, T, sigma, r)
    opt_type = normalize_option_type(option_type)

    if T == 0:
        return intrinsic_value(S, K, opt_type)

    discount = math.exp(-r * T)
    if sigma == 0:
        forward = S * math.exp(r * T)
        return intrinsic_value(forward, K, opt_type) * discount

    d1, d2 = bs_d1_d2(S, K, T, sigma, r)
    if opt_type == OptionType.CALL:
        price = S * norm_cdf(d1) - K * discount * norm_cdf(d2)
    else:
        price = K * discount * norm_cdf(-d2) - S * norm_cdf(-d1)
    # Deep OTM with large rates can round slightly below zero.
    return max(0.0, float(price))


def bs_delta(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    option_type: OptionTypeInput = "call",
) -> float:
    """Black-Scholes delta."""
    _check_inputs(S, K, T, sigma, r)
    opt_type = normalize_option_type(option_type)
    is_call = opt_type == OptionType.CALL

    if T == 0:
        if S == K:
            return 0.5 if is_call else -0.5
        if is_call:
            return 1.0 if S > K else 0.0
        return -1.0 if S < K else 0.0

    if sigma == 0:
        discount = math.exp(-r * T)
        forward = S * math.exp(r * T)
        if is_call:
            return discount if forward > K else 0.0
        return -discount if forward < K else 0.0

    d1, _ = bs_d1_d2(S, K, T, sigma, r)
    if is_call:
        return float(norm_cdf(d1))
    return float(norm_cdf(d1) - 1.0)


def bs_gamma(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> float:
    """Black-Scholes gamma (same for calls and puts)."""
    _check_inputs(S, K, T, sigma, r)
    if sigma == 0 or T == 0:
        return 0.0
    d1, _ = bs_d1_d2(S, K, T, sigma, r)
    return float(norm_pdf(d1) / (S * sigma * math.sqrt(T)))


def bs_vega(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> float:
    """Black-Scholes vega per +1.0 volatility."""
    _check_inputs(S, K, T, sigma, r)
    if sigma == 0 or T == 0:
        return 0.0
    d1, _ = bs_d1_d2(S, K, T, sigma, r)
    return float(S * norm_pdf(d1) * math.sqrt(T))


def bs_theta(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    option_type: OptionTypeInput = "call",
) -> float:
    """Black-Scholes theta per +1.0 calendar year."""
    _check_inputs(S, K, T, sigma, r)
    opt_type = normalize_option_type(option_type)
    if sigma == 0 or T == 0:
        return 0.0
    d1, d2 = bs_d1_d2(S, K, T, sigma, r)
    decay = -(S * norm_pdf(d1) * sigma) / (2 * math.sqrt(T))
    carry = r * K * math.exp(-r * T)

    if opt_type == OptionType.CALL:
        return float(decay - carry * norm_cdf(d2))
    return float(decay + carry * norm_cdf(-d2))


def bs_rho(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    option_type: OptionTypeInput = "call",
) -> float:
    """Black-Scholes rho per +1.0 rate."""
    _check_inputs(S, K, T, sigma, r)
    opt_type = normalize_option_type(option_type)
    if sigma == 0 or T == 0:
        return 0.0
    _, d2 = bs_d1_d2(S, K, T, sigma, r)
    if opt_type == OptionType.CALL:
        return float(K * T * math.exp(-r * T) * norm_cdf(d2))
    return float(-K * T * math.exp(-r * T) * norm_cdf(-d2))


def bs_greeks(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    option_type: OptionTypeInput = "call",
) -> dict[str, float]:
    """Return Black-Scholes price and Greeks for one option."""
    return {
        "price": bs_price(S, K, T, sigma, r, option_type),
        "delta": bs_delta(S, K, T, sigma, r, option_type),
        "gamma": bs_gamma(S, K, T, sigma, r),
        "theta": bs_theta(S, K, T, sigma, r, option_type),
        "vega": bs_vega(S, K, T, sigma, r),
        "rho": bs_rho(S, K, T, sigma, r, option_type),
    }
