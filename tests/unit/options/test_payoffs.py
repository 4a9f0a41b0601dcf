import numpy as np
import pytest

from crr_pricing.options import OptionType, call_payoff, payoff, put_payoff


def test_call_and_put_payoffs():
    assert call_payoff(110.0, 100.0) == 10.0
    assert call_payoff(90.0, 100.0) == 0.0
    assert put_payoff(90.0, 100.0) == 10.0
    assert put_payoff(110.0, 100.0) == 0.0


def test_payoff_is_vectorized_over_spots():
    spots = np.array([80.0, 95.0, 120.0])
    np.testing.assert_array_equal(payoff(spots, 95.0, OptionType.CALL), [0.0, 0.0, 25.0])
    np.testing.assert_array_equal(payoff(spots, 95.0, OptionType.PUT), [15.0, 0.0, 0.0])


@pytest.mark.parametrize(
    ("label", "expected"),
    [("call", 5.0), ("C", 5.0), ("put", 0.0), ("P", 0.0)],
)
def test_payoff_accepts_label_aliases(label, expected):
    assert payoff(100.0, 95.0, label) == expected


def test_payoff_rejects_unknown_side():
    with pytest.raises(ValueError, match="option_type must be one of"):
        payoff(100.0, 95.0, "straddle")
