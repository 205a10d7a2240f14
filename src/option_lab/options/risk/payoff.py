"""Expiry payoff of a maker (short) multi-leg position.

At expiry the unlevered maker P&L is piecewise-linear in the underlying price:

    pnl(P) = total_premium - sum(quantity * multiplier * intrinsic(P))

Leveraged figures scale losses (not profits) by leverage and floor them at the
pledged collateral. Percentage returns for charts are clamped separately and
never feed back into the liquidation solver.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from option_lab.config.constants import DEFAULT_CONSTANTS, EngineConstants
from option_lab.options.risk.aggregation import PositionAggregator
from option_lab.options.risk.collateral import CollateralSizer
from option_lab.options.types import Leg
from option_lab.options.validation import (
    check_leverage,
    check_non_negative,
    check_positive,
)

PAYOFF_COLUMNS = ["price", "pnl", "return_pct", "display_return_pct"]


def expiry_payout(
    legs: Sequence[Leg],
    price: float,
    constants: EngineConstants = DEFAULT_CONSTANTS,
) -> float:
    """Cash owed by the maker at expiry if the underlying settles at `price`."""
    payout = 0.0
    for leg in legs:
        if leg.is_call:
            intrinsic = max(0.0, price - leg.strike)
        else:
            intrinsic = max(0.0, leg.strike - price)
        payout += leg.quantity * constants.contract_multiplier * intrinsic
    return payout


def expiry_pnl(
    legs: Sequence[Leg],
    price: float,
    constants: EngineConstants = DEFAULT_CONSTANTS,
) -> float:
    """Unlevered maker P&L at expiry."""
    premium = PositionAggregator(constants).total_premium(legs)
    return premium - expiry_payout(legs, price, constants)


def apply_leverage(pnl: float, collateral_provided: float, leverage: float) -> float:
    """Scale losses by leverage and floor them at `-collateral_provided`."""
    if pnl >= 0:
        return pnl
    return max(pnl * leverage, -collateral_provided)


def leveraged_pnl(
    legs: Sequence[Leg],
    price: float,
    collateral_provided: float,
    leverage: float,
    constants: EngineConstants = DEFAULT_CONSTANTS,
) -> float:
    """Maker P&L at expiry with leveraged losses floored at the collateral."""
    collateral = check_non_negative("collateral_provided", collateral_provided)
    lev = check_leverage(leverage, constants.max_leverage)
    return apply_leverage(expiry_pnl(legs, price, constants), collateral, lev)


def payoff_curve(
    legs: Sequence[Leg],
    collateral_provided: float,
    leverage: float,
    *,
    range_pct: float = 0.3,
    steps: int = 100,
    constants: EngineConstants = DEFAULT_CONSTANTS,
) -> pd.DataFrame:
    """Tabulate leveraged expiry P&L around the quantity-weighted average strike.

    The grid spans `avg_strike * (1 +/- range_pct)` (floored at zero) in
    `steps` intervals. Columns:
    - `pnl`: leveraged, collateral-floored P&L
    - `return_pct`: uncapped `pnl / collateral * 100`, NaN without collateral
    - `display_return_pct`: `return_pct` clamped to [-100, 100], 0 without
      collateral
    """
    collateral = check_non_negative("collateral_provided", collateral_provided)
    lev = check_leverage(leverage, constants.max_leverage)
    check_positive("range_pct", range_pct)
    if steps < 1:
        raise ValueError("steps must be >= 1")
    if not legs:
        return pd.DataFrame(columns=PAYOFF_COLUMNS, dtype=float)

    quantities = np.array([leg.quantity for leg in legs], dtype=float)
    strikes = np.array([leg.strike for leg in legs], dtype=float)
    avg_strike = float(np.average(strikes, weights=quantities))

    prices = np.linspace(
        max(avg_strike * (1.0 - range_pct), 0.0),
        avg_strike * (1.0 + range_pct),
        steps + 1,
    )
    pnl = np.array(
        [apply_leverage(expiry_pnl(legs, p, constants), collateral, lev) for p in prices]
    )

    if collateral == 0:
        return_pct = np.full_like(pnl, np.nan)
        display_pct = np.zeros_like(pnl)
    else:
        return_pct = pnl / collateral * 100.0
        display_pct = np.clip(return_pct, -100.0, 100.0)

    return pd.DataFrame(
        {
            "price": prices,
            "pnl": pnl,
            "return_pct": return_pct,
            "display_return_pct": display_pct,
        },
        columns=PAYOFF_COLUMNS,
    )


def max_profit(
    legs: Sequence[Leg], constants: EngineConstants = DEFAULT_CONSTANTS
) -> float:
    """Best case for the maker: every leg expires worthless."""
    return PositionAggregator(constants).total_premium(legs)


def max_profit_pct(
    legs: Sequence[Leg],
    collateral_provided: float,
    constants: EngineConstants = DEFAULT_CONSTANTS,
) -> float:
    """Max profit as a percent of collateral, capped at 100."""
    collateral = check_non_negative("collateral_provided", collateral_provided)
    if collateral == 0:
        return 0.0
    return min(max_profit(legs, constants) / collateral * 100.0, 100.0)


def max_loss(
    legs: Sequence[Leg],
    collateral_provided: float,
    leverage: float,
    constants: EngineConstants = DEFAULT_CONSTANTS,
) -> float:
    """Leveraged worst-case requirement, capped at the pledged collateral."""
    collateral = check_non_negative("collateral_provided", collateral_provided)
    lev = check_leverage(leverage, constants.max_leverage)
    risk = CollateralSizer(constants).required_collateral(legs) * lev
    return min(risk, collateral)
