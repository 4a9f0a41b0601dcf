"""Black-Scholes pricing engine."""

from __future__ import annotations

from dataclasses import dataclass

from crr_pricing.options.models.black_scholes import bs_price, tree_carry_yield
from crr_pricing.options.types import MarketState, OptionSpec


@dataclass(frozen=True)
class BlackScholesPricer:
    """Closed-form pricer used as the continuous-time reference.

    With `match_tree_carry=True` the dividend yield is set so the drift equals
    the binomial tree's discrete growth rate, making the two comparable when
    the rate is non-zero.
    """

    match_tree_carry: bool = False

    def price(self, spec: OptionSpec, state: MarketState) -> float:
        q = tree_carry_yield(state.rate) if self.match_tree_carry else 0.0
        return bs_price(
            S=state.spot,
            K=spec.strike,
            T=spec.time_to_expiry,
            sigma=state.volatility,
            r=state.rate,
            q=q,
            option_type=spec.option_type,
        )
