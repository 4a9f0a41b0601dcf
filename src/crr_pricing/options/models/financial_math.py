"""Financial math helpers shared by the binomial model.

Factorials are accumulated in float64, so `factorial(n)` saturates to `inf`
for `n > 170`. Coefficients built from them inherit that ceiling; use
`CoefficientMethod.BINOMIAL_PMF` to price deeper trees.
"""

from __future__ import annotations

import numpy as np
from scipy.stats import binom

from crr_pricing.options.types import CoefficientMethod, CoefficientMethodInput

# Largest n with a finite float64 factorial.
MAX_FACTORIAL_STEPS = 170


def factorial(n: int) -> float:
    """Return `n!` as a float built by iterative multiplication."""
    d = 1.0
    for j in range(1, n + 1):
        d *= j
    return d


def factorials(n: int) -> np.ndarray:
    """Return `[0!, 1!, ..., n!]` with the same sequential float products."""
    out = np.ones(n + 1, dtype=float)
    if n > 0:
        with np.errstate(over="ignore"):
            out[1:] = np.cumprod(np.arange(1, n + 1, dtype=float))
    return out


def binomial_coefficient(k: int, n: int) -> float:
    """`C(n, k)` via factorials; note the argument order (k first)."""
    return factorial(n) / (factorial(k) * factorial(n - k))


def future_value(P: float, r: float, n: float) -> float:
    """Discretely compounded value of `P` after `n` periods at rate `r`."""
    return P * np.power(1.0 + r, n)


def present_value(F: float, r: float, n: float) -> float:
    """Continuously discounted value of `F` received after `n` years."""
    return F / np.exp(r * n)


def binomial_weights(
    n: int,
    p: float,
    method: CoefficientMethodInput = CoefficientMethod.FACTORIAL,
) -> np.ndarray:
    """Return the `n + 1` risk-neutral weights `C(n, j) p^j (1-p)^(n-j)`.

    Args:
        n: Number of tree steps.
        p: Per-step up probability.
        method: `factorial` reproduces float64 factorial coefficients (NaN past
            170 steps); `binomial_pmf` uses scipy's log-space pmf.

    Returns:
        Array of weights indexed by number of up-moves.
    """
    method = CoefficientMethod(method)
    j = np.arange(n + 1)

    if method is CoefficientMethod.BINOMIAL_PMF:
        return binom.pmf(j, n, p)

    fact = factorials(n)
    with np.errstate(over="ignore", invalid="ignore"):
        coeffs = fact[n] / (fact[j] * fact[n - j])
        return coeffs * np.power(p, j) * np.power(1.0 - p, n - j)
