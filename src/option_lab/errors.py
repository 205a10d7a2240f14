"""Exception types raised by the pricing and risk engine."""

from __future__ import annotations


class OptionLabError(Exception):
    """Base class for engine errors."""


class InvalidInputError(OptionLabError, ValueError):
    """Input rejected at the API boundary before any computation."""


class ConvergenceError(OptionLabError, RuntimeError):
    """Numerical search did not reach its tolerance within the step budget."""
