import logging
from dataclasses import FrozenInstanceError

import pytest

from option_lab.config import EngineConstants
from option_lab.errors import InvalidInputError
from option_lab.options import (
    BlackScholesPricer,
    Greeks,
    OptionSpec,
    OptionType,
    PriceModel,
    PricingResult,
    bs_greeks,
)


def _spec(**overrides) -> OptionSpec:
    kwargs = dict(
        option_type=OptionType.PUT,
        strike=95.0,
        spot=101.0,
        time_to_expiry_seconds=3_600 * 24 * 45,
        volatility=0.6,
        risk_free_rate=0.03,
    )
    kwargs.update(overrides)
    return OptionSpec(**kwargs)


def test_black_scholes_pricer_matches_functional_greeks_api():
    spec = _spec()
    out = BlackScholesPricer().price(spec)
    ref = bs_greeks(
        S=spec.spot,
        K=spec.strike,
        T=spec.time_to_expiry_seconds / 31_536_000,
        sigma=spec.volatility,
        r=spec.risk_free_rate,
        option_type=spec.option_type,
    )

    assert out.price == pytest.approx(ref["price"])
    assert out.greeks.delta == pytest.approx(ref["delta"])
    assert out.greeks.gamma == pytest.approx(ref["gamma"])
    assert out.greeks.vega == pytest.approx(ref["vega"])
    assert out.greeks.theta == pytest.approx(ref["theta"])
    assert out.rho == pytest.approx(ref["rho"])
    assert out.delta == out.greeks.delta


def test_pricer_uses_configured_annualization():
    spec = _spec(time_to_expiry_seconds=31_536_000)
    default = BlackScholesPricer().price(spec)
    leap = BlackScholesPricer(EngineConstants(seconds_per_year=31_622_400)).price(spec)
    ref = bs_greeks(101.0, 95.0, 31_536_000 / 31_622_400, 0.6, 0.03, "put")

    assert leap.price == pytest.approx(ref["price"])
    assert leap.price != pytest.approx(default.price)


def test_pricer_satisfies_price_model_protocol():
    class ConstantPricer:
        def price(self, spec: OptionSpec) -> PricingResult:
            return PricingResult(price=1.0, greeks=Greeks())

    assert isinstance(BlackScholesPricer(), PriceModel)
    assert isinstance(ConstantPricer(), PriceModel)


def test_pricer_logs_each_request_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="option_lab.options.engines.bs_pricer"):
        BlackScholesPricer().price(_spec())
        BlackScholesPricer().price(_spec())

    records = [r for r in caplog.records if r.name.endswith("bs_pricer")]
    assert len(records) == 2
    assert "priced put" in records[0].getMessage()


def test_greeks_display_units():
    greeks = Greeks(delta=0.5, gamma=0.02, theta=-36.5, vega=12.0, rho=3.0)
    assert greeks.theta_per_day() == pytest.approx(-0.1)
    assert greeks.vega_per_point() == pytest.approx(0.12)


def test_greeks_scale_and_add():
    a = Greeks(delta=0.5, gamma=0.1, theta=-2.0, vega=4.0, rho=1.0)
    b = a.scaled(-2.0)
    total = a + b
    assert b.delta == pytest.approx(-1.0)
    assert total == Greeks(delta=-0.5, gamma=-0.1, theta=2.0, vega=-4.0, rho=-1.0)
    assert Greeks.zero() == Greeks()


@pytest.mark.parametrize(
    ("label", "expected"),
    [("C", OptionType.CALL), ("call", OptionType.CALL), ("Put", OptionType.PUT), ("P", OptionType.PUT)],
)
def test_option_spec_normalizes_option_type(label, expected):
    spec = _spec(option_type=label)
    assert spec.option_type is expected
    assert spec.is_call is (expected == OptionType.CALL)


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"strike": 0.0}, "strike"),
        ({"spot": -5.0}, "spot"),
        ({"time_to_expiry_seconds": -1}, "time_to_expiry_seconds"),
        ({"volatility": -0.1}, "volatility"),
        ({"volatility": float("nan")}, "volatility"),
        ({"risk_free_rate": float("inf")}, "risk_free_rate"),
        ({"option_type": "straddle"}, "option_type"),
    ],
)
def test_option_spec_rejects_invalid_inputs(overrides, field):
    with pytest.raises(InvalidInputError, match=field):
        _spec(**overrides)


def test_option_spec_accepts_zero_time_and_zero_vol():
    spec = _spec(time_to_expiry_seconds=0, volatility=0.0)
    out = BlackScholesPricer().price(spec)
    assert out.price == 0.0
    assert out.delta == 0.0


def test_option_spec_is_immutable():
    spec = _spec()
    with pytest.raises(FrozenInstanceError):
        spec.strike = 10.0  # type: ignore[misc]


def test_invalid_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        _spec(strike=-1.0)
