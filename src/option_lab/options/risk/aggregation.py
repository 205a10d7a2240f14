"""Multi-leg roll-up of premium and Greeks for maker positions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from option_lab.config.constants import DEFAULT_CONSTANTS, EngineConstants
from option_lab.options.engines import BlackScholesPricer, PriceModel
from option_lab.options.risk.types import AggregatePosition
from option_lab.options.types import (
    Greeks,
    Leg,
    OptionSpec,
    PositionSide,
    PricingResult,
)


@dataclass(frozen=True)
class PositionAggregator:
    """Fold legs into total premium and net Greeks.

    `total_premium = sum(premium * quantity * contract_multiplier)` and
    `net_greeks = sum(leg.greeks * quantity)`. The aggregator is
    direction-agnostic: leg Greeks are summed with whatever sign they carry.
    Sums run in input order.
    """

    constants: EngineConstants = field(default=DEFAULT_CONSTANTS)

    def total_premium(self, legs: Sequence[Leg]) -> float:
        total = 0.0
        for leg in legs:
            total += leg.premium * leg.quantity * self.constants.contract_multiplier
        return total

    def aggregate(self, legs: Sequence[Leg]) -> AggregatePosition:
        """Build a fresh `AggregatePosition`; empty input gives all zeros."""
        net = Greeks.zero()
        for leg in legs:
            if leg.greeks is not None:
                net = net + leg.greeks.scaled(leg.quantity)

        return AggregatePosition(
            total_premium=self.total_premium(legs),
            net_greeks=net,
            legs=tuple(legs),
        )

    @staticmethod
    def attach_greeks(
        leg: Leg,
        pricing: PricingResult,
        side: PositionSide = PositionSide.SHORT,
    ) -> Leg:
        """Return a copy of `leg` carrying per-contract Greeks signed by `side`."""
        if not isinstance(side, PositionSide):
            raise ValueError("side must be PositionSide.SHORT or PositionSide.LONG")
        return replace(leg, greeks=pricing.greeks.scaled(int(side)))

    def price_legs(
        self,
        legs: Sequence[Leg],
        *,
        spot: float,
        time_to_expiry_seconds: int,
        volatility: float,
        risk_free_rate: float = 0.0,
        side: PositionSide = PositionSide.SHORT,
        pricer: PriceModel | None = None,
    ) -> tuple[Leg, ...]:
        """Price every leg against one market snapshot and attach its Greeks.

        Premiums are left untouched; they are the maker's quoted prices.
        """
        engine = pricer if pricer is not None else BlackScholesPricer(self.constants)
        priced = []
        for leg in legs:
            spec = OptionSpec(
                option_type=leg.option_type,
                strike=leg.strike,
                spot=spot,
                time_to_expiry_seconds=time_to_expiry_seconds,
                volatility=volatility,
                risk_free_rate=risk_free_rate,
            )
            priced.append(self.attach_greeks(leg, engine.price(spec), side))
        return tuple(priced)
