"""Maker risk building blocks: aggregation, collateral and liquidation."""

from ..types import Leg, PositionSide
from .aggregation import PositionAggregator
from .collateral import CollateralSizer
from .costs import (
    average_entry_price,
    borrow_cost,
    borrow_fee,
    hourly_interest_rate,
    max_profit_potential,
    option_creation_fee,
)
from .liquidation import LiquidationSolver
from .payoff import (
    expiry_payout,
    expiry_pnl,
    leveraged_pnl,
    max_loss,
    max_profit,
    max_profit_pct,
    payoff_curve,
)
from .types import AggregatePosition, CollateralState, LiquidationPrices

__all__ = [
    "Leg",
    "PositionSide",
    "AggregatePosition",
    "CollateralState",
    "LiquidationPrices",
    "PositionAggregator",
    "CollateralSizer",
    "LiquidationSolver",
    "expiry_payout",
    "expiry_pnl",
    "leveraged_pnl",
    "payoff_curve",
    "max_profit",
    "max_profit_pct",
    "max_loss",
    "hourly_interest_rate",
    "borrow_cost",
    "borrow_fee",
    "option_creation_fee",
    "max_profit_potential",
    "average_entry_price",
]
