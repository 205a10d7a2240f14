import pytest

from option_lab.config import EngineConstants
from option_lab.errors import ConvergenceError, InvalidInputError
from option_lab.options import Leg, LiquidationPrices, LiquidationSolver, leveraged_pnl


def _put(strike, quantity=1.0, premium=0.0):
    return Leg(quantity=quantity, option_type="put", strike=strike, premium=premium)


def _call(strike, quantity=1.0, premium=0.0):
    return Leg(quantity=quantity, option_type="call", strike=strike, premium=premium)


def test_single_short_put_liquidates_below_strike_only():
    # pnl(P) = 500 - 100 * (100 - P) reaches -100 at P = 94.
    prices = LiquidationSolver().solve(
        [_put(100.0, premium=5.0)], collateral_provided=100.0, leverage=1.0, spot=100.0
    )

    assert prices.upward is None
    assert prices.downward == pytest.approx(94.0, abs=1e-4)


def test_leverage_moves_liquidation_closer_to_spot():
    prices = LiquidationSolver().solve(
        [_put(100.0, premium=5.0)], collateral_provided=100.0, leverage=2.0, spot=100.0
    )
    assert prices.downward == pytest.approx(94.5, abs=1e-4)


def test_single_short_call_closed_form_above_strike():
    prices = LiquidationSolver().solve(
        [_call(100.0, premium=5.0)], collateral_provided=1_000.0, leverage=2.0, spot=100.0
    )

    assert prices.upward == pytest.approx(110.0, abs=1e-9)
    assert prices.downward is None


def test_upward_bisection_between_strikes():
    legs = [_call(100.0, premium=1.0), _call(120.0, premium=1.0)]
    prices = LiquidationSolver().solve(legs, collateral_provided=1_000.0, leverage=1.0, spot=80.0)

    assert prices.upward == pytest.approx(112.0, abs=80.0 * 1e-6)
    assert prices.downward is None


def test_downward_bisection_between_strikes():
    legs = [_put(100.0, quantity=2.0), _put(80.0)]
    prices = LiquidationSolver().solve(legs, collateral_provided=1_500.0, leverage=1.0, spot=110.0)

    assert prices.downward == pytest.approx(92.5, abs=110.0 * 1e-6)
    assert prices.upward is None


def test_downward_closed_form_below_lowest_strike():
    legs = [_put(100.0, premium=1.0), _put(90.0, premium=1.0)]
    prices = LiquidationSolver().solve(legs, collateral_provided=1_000.0, leverage=1.0, spot=110.0)
    assert prices.downward == pytest.approx(89.0, abs=1e-9)


def test_short_strangle_has_both_sides_ordered_around_spot():
    legs = [_put(90.0, premium=2.0), _call(110.0, premium=2.0)]
    solver = LiquidationSolver()

    for spot in (85.0, 95.0, 100.0, 105.0, 115.0):
        prices = solver.solve(legs, collateral_provided=2_000.0, leverage=3.0, spot=spot)
        assert prices.upward is not None and prices.downward is not None
        assert prices.downward <= spot <= prices.upward


def test_liquidation_price_exhausts_collateral():
    legs = [_put(95.0, quantity=1.5, premium=3.0), _call(105.0, quantity=0.5, premium=2.0)]
    collateral, leverage = 1_200.0, 2.0
    prices = LiquidationSolver().solve(legs, collateral, leverage, spot=100.0)

    for price in (prices.upward, prices.downward):
        assert price is not None
        assert leveraged_pnl(legs, price, collateral, leverage) == pytest.approx(
            -collateral, abs=1.0
        )


def test_already_liquidated_position_returns_spot():
    prices = LiquidationSolver().solve([_put(100.0)], collateral_provided=1_000.0, leverage=1.0, spot=50.0)
    assert prices == LiquidationPrices(upward=50.0, downward=50.0)


def test_unreachable_targets_are_none():
    solver = LiquidationSolver()

    tiny_call = solver.solve([_call(100.0, quantity=0.01)], 10_000.0, 1.0, spot=100.0)
    assert tiny_call.upward is None

    deep_put = solver.solve([_put(100.0, premium=5.0)], 100_000.0, 1.0, spot=100.0)
    assert deep_put.downward is None


def test_search_bound_follows_configuration():
    solver = LiquidationSolver(EngineConstants(liquidation_search_multiplier=200.0))
    prices = solver.solve([_call(100.0, quantity=0.01)], 10_000.0, 1.0, spot=100.0)
    assert prices.upward == pytest.approx(10_100.0)


def test_no_legs_or_no_collateral_has_no_liquidation():
    solver = LiquidationSolver()
    assert solver.solve([], 1_000.0, 1.0, spot=100.0) == LiquidationPrices()
    assert solver.solve([_put(100.0)], 0.0, 1.0, spot=100.0) == LiquidationPrices()


def test_bisection_budget_exhaustion_raises():
    solver = LiquidationSolver(EngineConstants(liquidation_max_iter=1))
    legs = [_call(100.0, premium=1.0), _call(120.0, premium=1.0)]
    with pytest.raises(ConvergenceError, match="did not converge"):
        solver.solve(legs, collateral_provided=1_000.0, leverage=1.0, spot=80.0)


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        (dict(collateral_provided=-1.0, leverage=1.0, spot=100.0), "collateral_provided"),
        (dict(collateral_provided=100.0, leverage=6.0, spot=100.0), "leverage"),
        (dict(collateral_provided=100.0, leverage=1.0, spot=0.0), "spot"),
    ],
)
def test_solver_rejects_invalid_inputs(kwargs, field):
    with pytest.raises(InvalidInputError, match=field):
        LiquidationSolver().solve([_put(100.0)], **kwargs)
