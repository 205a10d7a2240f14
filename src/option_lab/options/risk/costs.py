"""Financing and fee figures shown alongside maker positions."""

from __future__ import annotations

from option_lab.config.constants import DEFAULT_COSTS, CostConstants
from option_lab.options.validation import check_non_negative


def hourly_interest_rate(annual_rate: float | None = None) -> float:
    """Convert an annual rate (default: product base rate) to an hourly rate."""
    if annual_rate is None:
        annual_rate = DEFAULT_COSTS.base_annual_interest_rate
    return check_non_negative("annual_rate", annual_rate) / (365 * 24)


def borrow_cost(amount_borrowed: float, hourly_rate: float, hours: float) -> float:
    """Simple (non-compounding) interest on borrowed capital."""
    check_non_negative("amount_borrowed", amount_borrowed)
    check_non_negative("hourly_rate", hourly_rate)
    check_non_negative("hours", hours)
    return amount_borrowed * hourly_rate * hours


def borrow_fee(amount_borrowed: float, costs: CostConstants = DEFAULT_COSTS) -> float:
    check_non_negative("amount_borrowed", amount_borrowed)
    return amount_borrowed * costs.borrow_fee_rate


def option_creation_fee(costs: CostConstants = DEFAULT_COSTS) -> float:
    """Flat mint fee, in SOL."""
    return costs.option_creation_fee


def max_profit_potential(
    total_premium: float,
    borrowing_cost: float,
    creation_fee: float,
    *,
    transaction_cost: float | None = None,
    sol_price: float = 1.0,
    costs: CostConstants = DEFAULT_COSTS,
) -> float:
    """Premium net of financing, mint fee and SOL-denominated transaction cost.

    `transaction_cost` is in SOL and converted with `sol_price` (USD per SOL).
    """
    if transaction_cost is None:
        transaction_cost = costs.transaction_cost_sol
    check_non_negative("sol_price", sol_price)
    return total_premium - borrowing_cost - creation_fee - transaction_cost * sol_price


def average_entry_price(
    previous_avg_price: float,
    previous_filled_quantity: float,
    new_fill_price: float,
    new_fill_quantity: float,
) -> float:
    """Quantity-weighted average entry price after a new fill.

    Without prior fills the new price is returned; an empty new fill keeps the
    previous average.
    """
    if previous_filled_quantity <= 0 or previous_avg_price <= 0:
        return new_fill_price
    if new_fill_quantity <= 0:
        return previous_avg_price

    total_quantity = previous_filled_quantity + new_fill_quantity
    weighted = (
        previous_avg_price * previous_filled_quantity
        + new_fill_price * new_fill_quantity
    )
    return weighted / total_quantity
