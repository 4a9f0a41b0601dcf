"""CRR binomial-tree pricing for European options.

The tree is never materialized: the value is the discounted, probability
weighted sum of payoffs over the `steps + 1` terminal nodes, which equals
backward induction for European exercise.

Compounding convention: the per-step growth factor is the discrete
`(1 + r) ** (T / steps)` while the final discount is continuous `exp(-r T)`.
Outputs depend on this mix, so it is kept as-is; the put-call parity implied
by the model is therefore `C - P = S (1 + r)^T e^{-rT} - K e^{-rT}`.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from crr_pricing.options.models.financial_math import (
    MAX_FACTORIAL_STEPS,
    binomial_weights,
    future_value,
    present_value,
)
from crr_pricing.options.models.payoffs import payoff
from crr_pricing.options.types import CoefficientMethod, PricingParameters

logger = logging.getLogger(__name__)


def up_factor(t: float, sigma: float, n: int) -> float:
    return float(np.exp(sigma * np.sqrt(t / n)))


def down_factor(t: float, sigma: float, n: int) -> float:
    return float(np.exp(-sigma * np.sqrt(t / n)))


def risk_neutral_probability(t: float, sigma: float, n: int, r: float) -> float:
    """Per-step up probability `(g - d) / (u - d)` with `g = (1 + r)^(t/n)`.

    Not clipped to `[0, 1]`; with zero volatility the denominator vanishes.
    """
    g = future_value(1.0, r, t / n)
    u = up_factor(t, sigma, n)
    d = down_factor(t, sigma, n)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(g - d, u - d))


def terminal_prices(S: float, u: float, d: float, n: int) -> np.ndarray:
    """Asset prices at expiry indexed by the number of up-moves."""
    j = np.arange(n + 1)
    return S * np.power(u, j) * np.power(d, n - j)


def _deterministic_value(params: PricingParameters) -> float:
    # Zero volatility: the tree collapses onto the forward path.
    forward = future_value(params.asset_price, params.risk_free_rate, params.time_step)
    value = payoff(forward, params.strike, params.option_type)
    return float(present_value(value, params.risk_free_rate, params.time_step))


def crr_option_value(params: PricingParameters) -> float:
    """Price a European option with a Cox-Ross-Rubenstein tree.

    Zero volatility is priced as the discounted payoff on the deterministic
    forward path `S (1 + r)^T`, the limit of the tree as volatility -> 0.

    Args:
        params: Validated pricing inputs.

    Returns:
        Present value for one option. With factorial coefficients and more
        than 170 steps the result is NaN (float64 factorial overflow).
    """
    if params.volatility == 0:
        return _deterministic_value(params)

    S = params.asset_price
    K = params.strike
    T = params.time_step
    r = params.risk_free_rate
    n = params.steps

    u = up_factor(T, params.volatility, n)
    d = down_factor(T, params.volatility, n)
    p = risk_neutral_probability(T, params.volatility, n, r)
    logger.debug("CRR n=%d u=%.12g d=%.12g p=%.12g", n, u, d, p)

    if not 0.0 <= p <= 1.0:
        logger.debug("Risk-neutral probability %.6g lies outside [0, 1]", p)

    payoffs = payoff(terminal_prices(S, u, d, n), K, params.option_type)
    weights = binomial_weights(n, p, params.coefficients)

    with np.errstate(invalid="ignore", over="ignore"):
        # Sequential sum over nodes j = 0..n (np.sum would reorder pairwise).
        total = float(np.cumsum(weights * payoffs)[-1])

    value = float(present_value(total, r, T))
    if not math.isfinite(value):
        if (
            params.coefficients is CoefficientMethod.FACTORIAL
            and n > MAX_FACTORIAL_STEPS
        ):
            logger.warning(
                "Non-finite CRR value for steps=%d: factorial coefficients "
                "overflow past %d steps; use coefficients='binomial_pmf'",
                n,
                MAX_FACTORIAL_STEPS,
            )
        else:
            logger.warning("Non-finite CRR value for steps=%d (p=%.6g)", n, p)
    return value
