import dataclasses

import pytest

from crr_pricing.options import (
    CoefficientMethod,
    OptionType,
    PricingParameters,
    ValidationError,
    crr_option_value,
)

BASE = dict(
    asset_price=100.0,
    strike=95.0,
    time_step=0.5,
    volatility=0.3,
    risk_free_rate=0.08,
    option_type=OptionType.PUT,
    steps=25,
)


def test_labels_are_normalized_on_construction():
    params = PricingParameters(**{**BASE, "option_type": "P"})
    assert params.option_type is OptionType.PUT
    assert params.coefficients is CoefficientMethod.FACTORIAL

    params = PricingParameters(**{**BASE, "coefficients": "binomial_pmf"})
    assert params.coefficients is CoefficientMethod.BINOMIAL_PMF


def test_parameters_are_immutable():
    params = PricingParameters(**BASE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.steps = 10  # type: ignore[misc]


def test_replace_revalidates():
    params = PricingParameters(**BASE)
    assert dataclasses.replace(params, steps=40).steps == 40
    with pytest.raises(ValidationError, match="steps must be >= 1"):
        dataclasses.replace(params, steps=0)


def test_option_value_delegates_to_crr():
    params = PricingParameters(**BASE)
    assert params.option_value() == crr_option_value(params)


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("steps", 0, "steps must be >= 1"),
        ("steps", -3, "steps must be >= 1"),
        ("steps", 2.5, "steps must be an integer"),
        ("steps", True, "steps must be an integer"),
        ("time_step", 0.0, "time_step must be > 0"),
        ("time_step", -1.0, "time_step must be > 0"),
        ("volatility", -0.1, "volatility must be >= 0"),
        ("asset_price", -1.0, "asset_price must be >= 0"),
        ("strike", -5.0, "strike must be >= 0"),
        ("risk_free_rate", float("nan"), "risk_free_rate must be finite"),
        ("volatility", float("inf"), "volatility must be finite"),
        ("option_type", "straddle", "option_type must be one of"),
        ("coefficients", "pascal", "pascal"),
    ],
)
def test_invalid_inputs_raise_validation_error(field, value, message):
    with pytest.raises(ValidationError, match=message):
        PricingParameters(**{**BASE, field: value})


def test_validation_error_is_a_value_error():
    assert issubclass(ValidationError, ValueError)


def test_negative_rate_is_allowed():
    params = PricingParameters(**{**BASE, "risk_free_rate": -0.01})
    assert params.option_value() > 0


def test_numeric_strings_are_coerced_to_float():
    params = PricingParameters(**{**BASE, "strike": "95", "volatility": "0.3"})
    assert params.strike == 95.0
    assert params.volatility == 0.3
    assert isinstance(params.strike, float)


@pytest.mark.parametrize("value", ["ninety-five", None, [95.0]])
def test_non_numeric_inputs_raise_validation_error(value):
    with pytest.raises(ValidationError, match="strike must be a real number"):
        PricingParameters(**{**BASE, "strike": value})
