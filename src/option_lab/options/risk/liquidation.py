"""Liquidation prices of leveraged maker positions at expiry.

Liquidation happens where leveraged losses consume the pledged collateral:

    leverage * max(0, -pnl(P)) == collateral  <=>  pnl(P) == -collateral / leverage

`pnl` is the unlevered expiry P&L (see `risk.payoff`), piecewise-linear with
breakpoints at the strikes. Each direction is searched independently from spot:
- inside the strike range, the first strike whose P&L reaches the target
  brackets the crossing, which is then located by bisection on that linear
  segment;
- beyond the outermost strike the P&L is linear, so the crossing is inverted
  in closed form.
The search covers `[0, spot * liquidation_search_multiplier]`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from option_lab.config.constants import DEFAULT_CONSTANTS, EngineConstants
from option_lab.errors import ConvergenceError
from option_lab.options.risk.aggregation import PositionAggregator
from option_lab.options.risk.payoff import expiry_payout
from option_lab.options.risk.types import LiquidationPrices
from option_lab.options.types import Leg
from option_lab.options.validation import (
    check_leverage,
    check_non_negative,
    check_positive,
)

logger = logging.getLogger(__name__)

PnlFn = Callable[[float], float]


@dataclass(frozen=True)
class LiquidationSolver:
    """Find upward/downward liquidation prices for a multi-leg maker position."""

    constants: EngineConstants = field(default=DEFAULT_CONSTANTS)

    def solve(
        self,
        legs: Sequence[Leg],
        collateral_provided: float,
        leverage: float,
        spot: float,
    ) -> LiquidationPrices:
        """Return the liquidation price on each side of `spot`.

        A side is None when the loss target is not reached inside the search
        range. No legs or no collateral yields no liquidation prices.

        Raises:
            InvalidInputError: negative collateral, non-positive spot, or
                leverage outside `[1, max_leverage]`.
            ConvergenceError: bisection exhausted its step budget.
        """
        collateral = check_non_negative("collateral_provided", collateral_provided)
        lev = check_leverage(leverage, self.constants.max_leverage)
        spot = check_positive("spot", spot)

        if not legs or collateral == 0:
            return LiquidationPrices()

        premium = PositionAggregator(self.constants).total_premium(legs)

        def pnl(price: float) -> float:
            return premium - expiry_payout(legs, price, self.constants)

        target = -collateral / lev
        upper_bound = spot * self.constants.liquidation_search_multiplier
        tol = spot * self.constants.liquidation_rel_tol
        logger.debug(
            "liquidation search spot=%.4f target_pnl=%.4f range=[0, %.4f]",
            spot,
            target,
            upper_bound,
        )

        return LiquidationPrices(
            upward=self._search_up(legs, pnl, target, spot, upper_bound, tol),
            downward=self._search_down(legs, pnl, target, spot, tol),
        )

    def _search_up(
        self,
        legs: Sequence[Leg],
        pnl: PnlFn,
        target: float,
        spot: float,
        upper_bound: float,
        tol: float,
    ) -> float | None:
        if pnl(spot) <= target:
            return spot

        strikes = sorted({leg.strike for leg in legs})
        near = spot
        for strike in strikes:
            if not spot < strike < upper_bound:
                continue
            if pnl(strike) <= target:
                logger.debug("upward bracket [%.4f, %.4f]", near, strike)
                return self._bisect(pnl, target, near, strike, tol)
            near = strike

        if near < strikes[-1]:
            # Remaining strikes lie beyond the bound; last segment is still linear.
            if pnl(upper_bound) <= target:
                return self._bisect(pnl, target, near, upper_bound, tol)
            return None

        # Above every strike only calls lose, at a constant rate.
        slope = -self.constants.contract_multiplier * sum(
            leg.quantity for leg in legs if leg.is_call
        )
        if slope >= 0:
            return None
        price = near + (target - pnl(near)) / slope
        return price if price <= upper_bound else None

    def _search_down(
        self,
        legs: Sequence[Leg],
        pnl: PnlFn,
        target: float,
        spot: float,
        tol: float,
    ) -> float | None:
        if pnl(spot) <= target:
            return spot

        near = spot
        for strike in sorted({leg.strike for leg in legs}, reverse=True):
            if not strike < spot:
                continue
            if pnl(strike) <= target:
                logger.debug("downward bracket [%.4f, %.4f]", strike, near)
                return self._bisect(pnl, target, near, strike, tol)
            near = strike

        # Below every strike only puts lose, at a constant rate.
        slope = self.constants.contract_multiplier * sum(
            leg.quantity for leg in legs if not leg.is_call
        )
        if slope <= 0:
            return None
        price = near - (pnl(near) - target) / slope
        return price if price >= 0 else None

    def _bisect(
        self,
        pnl: PnlFn,
        target: float,
        near: float,
        far: float,
        tol: float,
    ) -> float:
        """Locate `pnl(P) == target` between `near` (above target) and `far`.

        `pnl` must be monotonic on the bracket.
        """
        for _ in range(self.constants.liquidation_max_iter):
            if abs(far - near) <= tol:
                return 0.5 * (near + far)
            mid = 0.5 * (near + far)
            if pnl(mid) <= target:
                far = mid
            else:
                near = mid

        if abs(far - near) <= tol:
            return 0.5 * (near + far)

        logger.error(
            "liquidation bisection did not converge: bracket=[%.8f, %.8f] tol=%.3g",
            min(near, far),
            max(near, far),
            tol,
        )
        raise ConvergenceError(
            f"liquidation search did not converge within "
            f"{self.constants.liquidation_max_iter} steps"
        )
