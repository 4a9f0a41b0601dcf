"""Terminal payoffs for vanilla European options."""

from __future__ import annotations

import numpy as np

from crr_pricing.options.types import OptionType, OptionTypeInput, normalize_option_type


def call_payoff(spot: np.ndarray | float, strike: float) -> np.ndarray | float:
    return np.maximum(0.0, spot - strike)


def put_payoff(spot: np.ndarray | float, strike: float) -> np.ndarray | float:
    return np.maximum(0.0, strike - spot)


def payoff(
    spot: np.ndarray | float,
    strike: float,
    option_type: OptionTypeInput,
) -> np.ndarray | float:
    """Exercise value at expiry for one side; unknown labels raise ValueError."""
    opt_type = normalize_option_type(option_type)
    if opt_type is OptionType.CALL:
        return call_payoff(spot, strike)
    return put_payoff(spot, strike)
