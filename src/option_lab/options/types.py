"""Shared option-pricing dataclasses and aliases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Literal, TypeAlias

from option_lab.config.constants import DEFAULT_CONSTANTS, EngineConstants
from option_lab.errors import InvalidInputError
from option_lab.options.validation import (
    check_non_negative,
    check_positive,
    check_real,
)


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"


# Tolerant input type accepted at system boundaries (form values/tests).
OptionTypeInput: TypeAlias = OptionType | Literal["call", "put", "C", "P"]


def normalize_option_type(option_type: OptionTypeInput | str) -> OptionType:
    """Normalize option type labels ('call', 'Put', 'C', ...) to `OptionType`."""
    label = str(option_type).strip().lower()
    if label in ("call", "c"):
        return OptionType.CALL
    if label in ("put", "p"):
        return OptionType.PUT
    raise InvalidInputError("option_type must be one of {'call', 'put', 'C', 'P'}")


class PositionSide(IntEnum):
    """Signed position direction used when attaching Greeks to legs."""

    SHORT = -1
    LONG = 1


@dataclass(frozen=True)
class OptionSpec:
    """Contract and market inputs required for pricing one European option.

    `time_to_expiry_seconds` is converted to years with
    `EngineConstants.seconds_per_year`. Zero time and zero volatility are valid
    and priced through closed-form limiting cases.
    """

    option_type: OptionTypeInput
    strike: float
    spot: float
    time_to_expiry_seconds: int
    volatility: float
    risk_free_rate: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "option_type", normalize_option_type(self.option_type))
        check_positive("strike", self.strike)
        check_positive("spot", self.spot)
        check_non_negative("time_to_expiry_seconds", self.time_to_expiry_seconds)
        check_non_negative("volatility", self.volatility)
        check_real("risk_free_rate", self.risk_free_rate)

    @property
    def is_call(self) -> bool:
        return self.option_type == OptionType.CALL

    def time_to_expiry_years(
        self, constants: EngineConstants = DEFAULT_CONSTANTS
    ) -> float:
        return self.time_to_expiry_seconds / constants.seconds_per_year


@dataclass(frozen=True, slots=True)
class Greeks:
    """First/second-order sensitivities.

    `theta` is per year and `vega` is per +1.0 volatility; use
    `theta_per_day` / `vega_per_point` for display units.
    """

    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0
    rho: float = 0.0

    @classmethod
    def zero(cls) -> Greeks:
        return cls()

    def scaled(self, factor: float) -> Greeks:
        """Return Greeks scaled by a scalar position multiplier."""
        return Greeks(
            delta=self.delta * factor,
            gamma=self.gamma * factor,
            theta=self.theta * factor,
            vega=self.vega * factor,
            rho=self.rho * factor,
        )

    def __add__(self, other: Greeks) -> Greeks:
        if not isinstance(other, Greeks):
            return NotImplemented
        return Greeks(
            delta=self.delta + other.delta,
            gamma=self.gamma + other.gamma,
            theta=self.theta + other.theta,
            vega=self.vega + other.vega,
            rho=self.rho + other.rho,
        )

    def theta_per_day(self, constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
        return self.theta / constants.days_per_year

    def vega_per_point(self, constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
        return self.vega * constants.vol_point


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Option value and sensitivities for one contract."""

    price: float
    greeks: Greeks

    @property
    def delta(self) -> float:
        return self.greeks.delta

    @property
    def gamma(self) -> float:
        return self.greeks.gamma

    @property
    def theta(self) -> float:
        return self.greeks.theta

    @property
    def vega(self) -> float:
        return self.greeks.vega

    @property
    def rho(self) -> float:
        return self.greeks.rho


@dataclass(frozen=True)
class Leg:
    """One option line item of a maker position.

    `quantity` is in contracts (fractional allowed); cash figures multiply it by
    `EngineConstants.contract_multiplier`. `greeks` are per-contract and already
    signed by the caller (see `PositionAggregator.attach_greeks`); legs without
    Greeks contribute zero sensitivity. `asset` is an opaque identifier.
    """

    quantity: float
    option_type: OptionTypeInput
    strike: float
    premium: float
    asset: str = ""
    greeks: Greeks | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "option_type", normalize_option_type(self.option_type))
        check_positive("quantity", self.quantity)
        check_positive("strike", self.strike)
        check_non_negative("premium", self.premium)

    @property
    def is_call(self) -> bool:
        return self.option_type == OptionType.CALL
