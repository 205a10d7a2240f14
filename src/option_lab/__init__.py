"""Option pricing and maker risk engine."""

from .errors import ConvergenceError, InvalidInputError, OptionLabError

__all__ = ["OptionLabError", "InvalidInputError", "ConvergenceError"]
