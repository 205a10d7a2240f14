"""Named product constants consumed by the pricing and risk engine.

The surrounding product tunes these per asset, so every component reads them
from an `EngineConstants` instance instead of hard-coding literals.
"""

from __future__ import annotations

from dataclasses import dataclass

SECONDS_PER_YEAR = 31_536_000  # 365-day year
CONTRACT_MULTIPLIER = 100.0
MAX_LEVERAGE = 5.0
CALL_WORST_CASE_MULTIPLIER = 2.0


@dataclass(frozen=True)
class EngineConstants:
    """Tunable constants for pricing, collateral sizing and liquidation search.

    Attributes:
        seconds_per_year: Annualization divisor for seconds-to-expiry inputs.
        contract_multiplier: Underlying units per option contract.
        max_leverage: Upper bound of the accepted leverage range `[1, max]`.
        call_worst_case_multiplier: Assumed worst-case upside for short calls,
            as a multiple of strike. A product heuristic, not a risk bound.
        liquidation_search_multiplier: Upward search bound as a multiple of
            spot (`[0, spot * multiplier]`).
        liquidation_max_iter: Bisection step budget.
        liquidation_rel_tol: Bisection tolerance relative to spot.
        days_per_year: Divisor used for per-day theta display.
        vol_point: Volatility change used for per-point vega display.
    """

    seconds_per_year: float = SECONDS_PER_YEAR
    contract_multiplier: float = CONTRACT_MULTIPLIER
    max_leverage: float = MAX_LEVERAGE
    call_worst_case_multiplier: float = CALL_WORST_CASE_MULTIPLIER
    liquidation_search_multiplier: float = 10.0
    liquidation_max_iter: int = 100
    liquidation_rel_tol: float = 1e-6
    days_per_year: float = 365.0
    vol_point: float = 0.01

    def __post_init__(self) -> None:
        if self.seconds_per_year <= 0:
            raise ValueError("seconds_per_year must be > 0")
        if self.contract_multiplier <= 0:
            raise ValueError("contract_multiplier must be > 0")
        if self.max_leverage < 1.0:
            raise ValueError("max_leverage must be >= 1.0")
        if self.call_worst_case_multiplier < 1.0:
            raise ValueError("call_worst_case_multiplier must be >= 1.0")
        if self.liquidation_search_multiplier <= 1.0:
            raise ValueError("liquidation_search_multiplier must be > 1.0")
        if self.liquidation_max_iter < 1:
            raise ValueError("liquidation_max_iter must be >= 1")
        if not 0 < self.liquidation_rel_tol < 1:
            raise ValueError("liquidation_rel_tol must be in (0, 1)")
        if self.days_per_year <= 0:
            raise ValueError("days_per_year must be > 0")
        if self.vol_point <= 0:
            raise ValueError("vol_point must be > 0")


@dataclass(frozen=True)
class CostConstants:
    """Fee and financing rates used for maker profit estimates.

    Units:
    - `base_annual_interest_rate`: annual rate in decimals on borrowed capital
    - `option_creation_fee`: flat fee per option mint, in SOL
    - `borrow_fee_rate`: one-off fee as a fraction of the borrowed amount
    - `transaction_cost_sol`: network cost per transaction, in SOL
    """

    base_annual_interest_rate: float = 0.1456
    option_creation_fee: float = 0.01
    borrow_fee_rate: float = 0.00035
    transaction_cost_sol: float = 0.02

    def __post_init__(self) -> None:
        for name in (
            "base_annual_interest_rate",
            "option_creation_fee",
            "borrow_fee_rate",
            "transaction_cost_sol",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")


DEFAULT_CONSTANTS = EngineConstants()
DEFAULT_COSTS = CostConstants()
