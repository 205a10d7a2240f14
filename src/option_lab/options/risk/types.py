"""Result types produced by the maker risk components."""

from __future__ import annotations

from dataclasses import dataclass, field

from option_lab.options.types import Greeks, Leg


@dataclass(frozen=True)
class AggregatePosition:
    """Roll-up of a multi-leg position, rebuilt from its legs on every request."""

    total_premium: float = 0.0
    net_greeks: Greeks = field(default_factory=Greeks.zero)
    legs: tuple[Leg, ...] = ()


@dataclass(frozen=True)
class CollateralState:
    """Collateral adequacy for one position at a chosen leverage.

    `required_collateral` already carries the leverage factor; sufficiency
    compares it against `collateral_provided * leverage`.
    """

    collateral_provided: float
    leverage: float
    required_collateral: float
    is_sufficient: bool

    @property
    def position_size(self) -> float:
        """Buying power implied by the pledged collateral and leverage."""
        return self.collateral_provided * self.leverage


@dataclass(frozen=True)
class LiquidationPrices:
    """Underlying prices at which pledged collateral is fully consumed.

    A side is None when the position cannot lose enough in that direction
    within the search range.
    """

    upward: float | None = None
    downward: float | None = None
