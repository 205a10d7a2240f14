"""Pricing engines used by the maker risk components."""

from .base import PriceModel
from .bs_pricer import BlackScholesPricer

__all__ = ["PriceModel", "BlackScholesPricer"]
