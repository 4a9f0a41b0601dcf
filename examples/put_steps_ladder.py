"""Minimal library usage: value a European put for 2..170 tree steps.

Prints `steps,value` lines, then compares the deepest factorial-weight tree
with a 1000-step tree using scipy's stable binomial weights.
"""

from __future__ import annotations

from dataclasses import replace

from crr_pricing.options import (
    OptionType,
    PricingParameters,
    convergence_table,
    format_ladder_rows,
    steps_ladder,
)


def main() -> None:
    params = PricingParameters(
        asset_price=100.0,
        strike=95.0,
        time_step=0.5,
        volatility=0.3,
        risk_free_rate=0.08,
        option_type=OptionType.PUT,
        steps=2,
    )

    table = convergence_table(params, steps_ladder(2, 170))
    for row in format_ladder_rows(table):
        print(row)

    deep = replace(params, steps=1000, coefficients="binomial_pmf").option_value()
    print(f"\n170 steps (factorial): {table['value'].iloc[-1]:.6f}")
    print(f"1000 steps (binomial_pmf): {deep:.6f}")
    print(f"Black-Scholes limit: {table['black_scholes'].iloc[0]:.6f}")


if __name__ == "__main__":
    main()
