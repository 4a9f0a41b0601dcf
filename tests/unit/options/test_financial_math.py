import math

import numpy as np
import pytest

from crr_pricing.options import CoefficientMethod
from crr_pricing.options.models import (
    MAX_FACTORIAL_STEPS,
    binomial_coefficient,
    binomial_weights,
    factorial,
    factorials,
    future_value,
    present_value,
)


def test_factorial_small_values():
    assert factorial(0) == 1.0
    assert factorial(1) == 1.0
    assert factorial(5) == 120.0
    assert isinstance(factorial(3), float)


def test_factorial_saturates_past_170():
    assert math.isfinite(factorial(MAX_FACTORIAL_STEPS))
    assert factorial(MAX_FACTORIAL_STEPS + 1) == math.inf


def test_factorials_match_scalar_loop():
    expected = [factorial(k) for k in range(MAX_FACTORIAL_STEPS + 1)]
    np.testing.assert_array_equal(factorials(MAX_FACTORIAL_STEPS), expected)
    np.testing.assert_array_equal(factorials(0), [1.0])


def test_binomial_coefficient_takes_k_first():
    assert binomial_coefficient(2, 5) == 10.0
    assert binomial_coefficient(0, 7) == 1.0
    assert binomial_coefficient(7, 7) == 1.0


def test_binomial_coefficient_is_nan_after_overflow():
    assert math.isnan(binomial_coefficient(0, MAX_FACTORIAL_STEPS + 1))


def test_future_value_compounds_discretely():
    assert future_value(100.0, 0.08, 2.0) == pytest.approx(116.64)
    assert future_value(1.0, 0.08, 0.5) == pytest.approx(math.sqrt(1.08))


def test_present_value_discounts_continuously():
    assert present_value(100.0, 0.05, 1.0) == pytest.approx(100.0 * math.exp(-0.05))
    assert present_value(100.0, 0.0, 3.0) == 100.0


@pytest.mark.parametrize("method", list(CoefficientMethod))
def test_binomial_weights_sum_to_one(method: CoefficientMethod):
    weights = binomial_weights(40, 0.47, method)
    assert weights.shape == (41,)
    assert weights.sum() == pytest.approx(1.0, abs=1e-12)
    assert (weights >= 0).all()


def test_binomial_weight_methods_agree_inside_factorial_range():
    fact = binomial_weights(150, 0.52, CoefficientMethod.FACTORIAL)
    pmf = binomial_weights(150, 0.52, "binomial_pmf")
    np.testing.assert_allclose(fact, pmf, rtol=1e-9, atol=1e-300)


def test_factorial_weights_degrade_to_nan_past_ceiling():
    weights = binomial_weights(MAX_FACTORIAL_STEPS + 1, 0.5, "factorial")
    assert np.isnan(weights).all()

    stable = binomial_weights(MAX_FACTORIAL_STEPS + 1, 0.5, "binomial_pmf")
    assert stable.sum() == pytest.approx(1.0)


def test_unknown_coefficient_method_raises():
    with pytest.raises(ValueError):
        binomial_weights(10, 0.5, "pascal")
