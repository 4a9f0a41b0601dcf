"""Binomial-tree pricing engine for European options."""

from __future__ import annotations

from dataclasses import dataclass

from crr_pricing.options.models.binomial_tree import crr_option_value
from crr_pricing.options.types import (
    CoefficientMethod,
    CoefficientMethodInput,
    MarketState,
    OptionSpec,
    PricingParameters,
    ValidationError,
)


@dataclass(frozen=True)
class BinomialTreePricer:
    """CRR tree pricer for European exercise.

    Only `price(...)` is implemented; the engine holds the tree resolution and
    the coefficient method, contract and market inputs come per call.
    """

    steps: int = 100
    coefficients: CoefficientMethodInput = CoefficientMethod.FACTORIAL

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValidationError("steps must be >= 1")

    def parameters(self, spec: OptionSpec, state: MarketState) -> PricingParameters:
        return PricingParameters(
            asset_price=state.spot,
            strike=spec.strike,
            time_step=spec.time_to_expiry,
            volatility=state.volatility,
            risk_free_rate=state.rate,
            option_type=spec.option_type,
            steps=self.steps,
            coefficients=self.coefficients,
        )

    def price(self, spec: OptionSpec, state: MarketState) -> float:
        return crr_option_value(self.parameters(spec, state))
