"""Black-Scholes reference prices for European options."""

from __future__ import annotations

import numpy as np
from scipy.stats import norm

from crr_pricing.options.types import OptionType, OptionTypeInput, normalize_option_type


def tree_carry_yield(r: float) -> float:
    """Dividend yield that makes Black-Scholes drift match the CRR tree.

    The tree grows at `log1p(r)` per year but discounts at `r`, which is the
    same as a continuous yield of `r - log1p(r)`.
    """
    return float(r - np.log1p(r))


def bs_d1_d2(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    q: float = 0.0,
) -> tuple[float, float]:
    """Compute d1 and d2 for Black-Scholes with continuous dividend yield."""
    if T <= 0 or sigma <= 0:
        raise ValueError("T and sigma must be positive")
    d1 = (np.log(S / K) + (r - q + 0.5 * sigma**2) * T) / (sigma * np.sqrt(T))
    d2 = d1 - sigma * np.sqrt(T)
    return d1, d2


def bs_price(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    q: float = 0.0,
    option_type: OptionTypeInput = OptionType.CALL,
) -> float:
    """Black-Scholes price with continuous dividend yield."""
    opt_type = normalize_option_type(option_type)
    d1, d2 = bs_d1_d2(S, K, T, sigma, r, q)

    if opt_type is OptionType.CALL:
        return float(
            S * np.exp(-q * T) * norm.cdf(d1) - K * np.exp(-r * T) * norm.cdf(d2)
        )
    return float(
        K * np.exp(-r * T) * norm.cdf(-d2) - S * np.exp(-q * T) * norm.cdf(-d1)
    )
