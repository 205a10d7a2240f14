"""Interface for option-pricing engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from option_lab.options.types import OptionSpec, PricingResult


@runtime_checkable
class PriceModel(Protocol):
    """Minimum pricing capability required by risk helpers."""

    def price(self, spec: OptionSpec) -> PricingResult:
        """Return option value and sensitivities for one contract."""
