"""Collateral requirement and leverage sizing for short option legs.

The requirement is a product policy, not a margin model:
- short put: `strike * quantity * multiplier` (underlying goes to zero)
- short call: `(k * strike - strike) * quantity * multiplier` where
  `k = EngineConstants.call_worst_case_multiplier` (2.0 by default) is an
  assumed worst-case upside. Call losses beyond that level are not covered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from option_lab.config.constants import DEFAULT_CONSTANTS, EngineConstants
from option_lab.options.risk.types import CollateralState
from option_lab.options.types import Leg
from option_lab.options.validation import check_leverage, check_non_negative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollateralSizer:
    """Size collateral and leverage for a list of maker legs."""

    constants: EngineConstants = field(default=DEFAULT_CONSTANTS)

    def leg_requirement(self, leg: Leg) -> float:
        """Unlevered worst-case collateral for one leg."""
        notional = leg.quantity * self.constants.contract_multiplier
        if leg.is_call:
            worst_case = self.constants.call_worst_case_multiplier * leg.strike
            return (worst_case - leg.strike) * notional
        return leg.strike * notional

    def required_collateral(self, legs: Sequence[Leg]) -> float:
        """Unlevered requirement summed across legs."""
        total = 0.0
        for leg in legs:
            total += self.leg_requirement(leg)
        return total

    def size(
        self,
        legs: Sequence[Leg],
        collateral_provided: float,
        leverage: float,
    ) -> CollateralState:
        """Return the leveraged requirement and whether collateral covers it.

        Leverage scales both sides, so the verdict is equivalent to
        `collateral_provided >= required_collateral(legs)`.

        Raises:
            InvalidInputError: negative collateral or leverage outside
                `[1, max_leverage]`.
        """
        collateral = check_non_negative("collateral_provided", collateral_provided)
        lev = check_leverage(leverage, self.constants.max_leverage)

        required = self.required_collateral(legs) * lev
        state = CollateralState(
            collateral_provided=collateral,
            leverage=lev,
            required_collateral=required,
            is_sufficient=collateral * lev >= required,
        )
        logger.debug(
            "collateral=%.2f leverage=%.2f required=%.2f sufficient=%s",
            collateral,
            lev,
            required,
            state.is_sufficient,
        )
        return state

    def optimal_leverage(
        self,
        legs: Sequence[Leg],
        collateral_provided: float,
    ) -> float:
        """Leverage that fully uses the pledged collateral, clamped to `[1, max]`.

        Zero collateral cannot size a position and returns 1.0.
        """
        collateral = check_non_negative("collateral_provided", collateral_provided)
        if collateral == 0:
            return 1.0
        ratio = self.required_collateral(legs) / collateral
        return min(max(ratio, 1.0), self.constants.max_leverage)

    def min_collateral_required(self, legs: Sequence[Leg]) -> float:
        """Smallest collateral accepted at maximum leverage."""
        return self.required_collateral(legs) / self.constants.max_leverage

    @staticmethod
    def remaining_collateral(collateral_needed: float, position_size: float) -> float:
        """Requirement still uncovered once `position_size` has been pledged.

        `needed * (1 - min(position_size / needed, 1))`; a non-positive
        position size leaves the full requirement.
        """
        needed = check_non_negative("collateral_needed", collateral_needed)
        size = check_non_negative("position_size", position_size)
        if needed == 0:
            return 0.0
        if size <= 0:
            return needed
        coverage = min(size / needed, 1.0)
        return needed * (1.0 - coverage)
