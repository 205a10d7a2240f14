"""Black-Scholes pricing engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from option_lab.config.constants import DEFAULT_CONSTANTS, EngineConstants
from option_lab.options.models.black_scholes import bs_greeks
from option_lab.options.types import Greeks, OptionSpec, PricingResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlackScholesPricer:
    """Exact Black-Scholes pricer backed by analytical formulas.

    Stateless: every call recomputes from the given spec, so one instance can be
    shared across callers.
    """

    constants: EngineConstants = field(default=DEFAULT_CONSTANTS)

    def price(self, spec: OptionSpec) -> PricingResult:
        T = spec.time_to_expiry_years(self.constants)
        out = bs_greeks(
            S=spec.spot,
            K=spec.strike,
            T=T,
            sigma=spec.volatility,
            r=spec.risk_free_rate,
            option_type=spec.option_type,
        )
        result = PricingResult(
            price=out["price"],
            greeks=Greeks(
                delta=out["delta"],
                gamma=out["gamma"],
                theta=out["theta"],
                vega=out["vega"],
                rho=out["rho"],
            ),
        )
        logger.debug(
            "priced %s K=%.4f S=%.4f T=%.6fy vol=%.4f r=%.4f -> price=%.6f delta=%.4f",
            spec.option_type.value,
            spec.strike,
            spec.spot,
            T,
            spec.volatility,
            spec.risk_free_rate,
            result.price,
            result.delta,
        )
        return result
