"""End-to-end maker position example.

This script walks one short strangle through the engine:
1) load constants for an asset from `config/engine.yml`,
2) price each leg and attach short-side Greeks,
3) roll the legs into premium and net Greeks,
4) size collateral/leverage and solve liquidation prices,
5) print the expiry payoff table.
"""

from __future__ import annotations

import argparse
import logging

from option_lab.config import load_engine_config, setup_logging_from_config
from option_lab.options import (
    CollateralSizer,
    Leg,
    LiquidationSolver,
    PositionAggregator,
    payoff_curve,
)

logger = logging.getLogger("maker_position")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maker position risk summary.")
    parser.add_argument("--config", type=str, default="config/engine.yml")
    parser.add_argument("--asset", type=str, default="SOL")
    parser.add_argument("--spot", type=float, default=150.0)
    parser.add_argument("--collateral", type=float, default=6_000.0)
    parser.add_argument("--volatility", type=float, default=0.65)
    parser.add_argument("--days", type=int, default=14)
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    config = load_engine_config(args.config, asset=args.asset)
    setup_logging_from_config(config.logging)
    constants = config.constants

    legs = [
        Leg(quantity=1.0, option_type="put", strike=130.0, premium=2.1, asset=args.asset),
        Leg(quantity=0.5, option_type="call", strike=175.0, premium=1.6, asset=args.asset),
    ]

    aggregator = PositionAggregator(constants)
    legs = list(
        aggregator.price_legs(
            legs,
            spot=args.spot,
            time_to_expiry_seconds=args.days * 86_400,
            volatility=args.volatility,
            risk_free_rate=0.05,
        )
    )
    position = aggregator.aggregate(legs)
    logger.info(
        "Premium %.2f | delta %.3f | theta/day %.3f | vega/pt %.3f",
        position.total_premium,
        position.net_greeks.delta,
        position.net_greeks.theta_per_day(constants),
        position.net_greeks.vega_per_point(constants),
    )

    sizer = CollateralSizer(constants)
    leverage = sizer.optimal_leverage(legs, args.collateral)
    state = sizer.size(legs, args.collateral, leverage)
    logger.info(
        "Leverage %.2fx | required %.2f | sufficient=%s",
        state.leverage,
        state.required_collateral,
        state.is_sufficient,
    )

    prices = LiquidationSolver(constants).solve(legs, args.collateral, leverage, args.spot)
    logger.info("Liquidation down=%s up=%s", prices.downward, prices.upward)

    curve = payoff_curve(legs, args.collateral, leverage, steps=12, constants=constants)
    print(curve.round(2).to_string(index=False))


if __name__ == "__main__":
    main()
