"""Steps-ladder diagnostics: CRR value as a function of tree resolution.

Each rung is an independent valuation, so the ladder can be evaluated in a
thread pool. Rows always come back in ladder order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path

import numpy as np
import pandas as pd

from crr_pricing.options.models.binomial_tree import crr_option_value
from crr_pricing.options.models.black_scholes import bs_price, tree_carry_yield
from crr_pricing.options.types import PricingParameters, ValidationError

logger = logging.getLogger(__name__)

LADDER_COLUMNS: tuple[str, ...] = ("steps", "value", "black_scholes", "error")


def steps_ladder(start: int, stop: int) -> range:
    """Inclusive range of step counts `start..stop`."""
    if start < 1:
        raise ValidationError("steps ladder must start at >= 1")
    if stop < start:
        raise ValidationError("steps ladder stop must be >= start")
    return range(start, stop + 1)


def price_ladder(
    params: PricingParameters,
    steps: Iterable[int],
    *,
    max_workers: int = 1,
) -> list[float]:
    """Return `option_value` for `params` at each step count in `steps`."""
    rungs = [replace(params, steps=int(n)) for n in steps]

    if max_workers <= 1:
        return [crr_option_value(rung) for rung in rungs]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(crr_option_value, rungs))


def reference_price(params: PricingParameters) -> float:
    """Carry-adjusted Black-Scholes price the tree converges to.

    NaN when volatility, strike or spot is zero, where the closed form is
    undefined (`log(S / K)`, division by `sigma`).
    """
    if params.volatility <= 0 or params.strike <= 0 or params.asset_price <= 0:
        return float("nan")
    return bs_price(
        S=params.asset_price,
        K=params.strike,
        T=params.time_step,
        sigma=params.volatility,
        r=params.risk_free_rate,
        q=tree_carry_yield(params.risk_free_rate),
        option_type=params.option_type,
    )


def convergence_table(
    params: PricingParameters,
    steps: Sequence[int],
    *,
    max_workers: int = 1,
) -> pd.DataFrame:
    """Tabulate CRR values against the Black-Scholes limit for each step count."""
    values = price_ladder(params, steps, max_workers=max_workers)
    reference = reference_price(params)

    table = pd.DataFrame(
        {
            "steps": np.asarray(list(steps), dtype=int),
            "value": np.asarray(values, dtype=float),
        }
    )
    table["black_scholes"] = reference
    table["error"] = table["value"] - table["black_scholes"]

    n_bad = int((~np.isfinite(table["value"])).sum())
    if n_bad:
        logger.warning("%d of %d ladder values are not finite", n_bad, len(table))
    return table.loc[:, list(LADDER_COLUMNS)]


def format_ladder_rows(table: pd.DataFrame) -> list[str]:
    """Render `steps,value` lines, one per rung."""
    return [
        f"{int(n)},{float(v)!r}" for n, v in zip(table["steps"], table["value"])
    ]


def write_convergence_csv(table: pd.DataFrame, path: str | Path) -> Path:
    """Persist the ladder table as CSV and return the written path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(out, index=False)
    logger.info("Wrote %d ladder rows -> %s", len(table), out)
    return out
