"""Option pricing models, engines, risk components and shared types."""

from .engines import BlackScholesPricer, PriceModel
from .models import (
    bs_d1_d2,
    bs_delta,
    bs_gamma,
    bs_greeks,
    bs_price,
    bs_rho,
    bs_theta,
    bs_vega,
    intrinsic_value,
    norm_cdf,
    norm_pdf,
)
from .risk import (
    AggregatePosition,
    CollateralSizer,
    CollateralState,
    LiquidationPrices,
    LiquidationSolver,
    PositionAggregator,
    expiry_pnl,
    leveraged_pnl,
    max_loss,
    max_profit,
    max_profit_pct,
    payoff_curve,
)
from .types import (
    Greeks,
    Leg,
    OptionSpec,
    OptionType,
    OptionTypeInput,
    PositionSide,
    PricingResult,
    normalize_option_type,
)

__all__ = [
    "OptionType",
    "OptionTypeInput",
    "normalize_option_type",
    "PositionSide",
    "OptionSpec",
    "Greeks",
    "PricingResult",
    "Leg",
    "PriceModel",
    "BlackScholesPricer",
    "norm_pdf",
    "norm_cdf",
    "intrinsic_value",
    "bs_d1_d2",
    "bs_price",
    "bs_delta",
    "bs_gamma",
    "bs_vega",
    "bs_theta",
    "bs_rho",
    "bs_greeks",
    "AggregatePosition",
    "CollateralState",
    "LiquidationPrices",
    "PositionAggregator",
    "CollateralSizer",
    "LiquidationSolver",
    "expiry_pnl",
    "leveraged_pnl",
    "payoff_curve",
    "max_profit",
    "max_profit_pct",
    "max_loss",
]
