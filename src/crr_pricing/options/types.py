"""Shared option-pricing dataclasses, enums and aliases."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from numbers import Integral
from typing import Literal, TypeAlias


class ValidationError(ValueError):
    """Raised when pricing inputs fall outside the model's domain."""


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"


class CoefficientMethod(StrEnum):
    """How binomial node weights are computed."""

    FACTORIAL = "factorial"
    BINOMIAL_PMF = "binomial_pmf"


# Tolerant input types accepted at system boundaries (config files/CLI/tests).
OptionTypeInput: TypeAlias = OptionType | Literal["call", "put", "C", "P"]
CoefficientMethodInput: TypeAlias = (
    CoefficientMethod | Literal["factorial", "binomial_pmf"]
)


def normalize_option_type(option_type: OptionTypeInput) -> OptionType:
    """Normalize option type labels to `OptionType.CALL` / `OptionType.PUT`."""
    if option_type in ("call", "C"):
        return OptionType.CALL
    if option_type in ("put", "P"):
        return OptionType.PUT
    raise ValueError("option_type must be one of {'call', 'put', 'C', 'P'}")


@dataclass(frozen=True)
class PricingParameters:
    """Inputs for one CRR valuation of a European option.

    `time_step` is the time to expiry in years (the whole horizon, split into
    `steps` equal periods). Instances are validated on construction and never
    mutated; use `dataclasses.replace` to vary one field.
    """

    asset_price: float
    strike: float
    time_step: float
    volatility: float
    risk_free_rate: float
    option_type: OptionTypeInput
    steps: int
    coefficients: CoefficientMethodInput = CoefficientMethod.FACTORIAL

    def __post_init__(self) -> None:
        try:
            opt_type = normalize_option_type(self.option_type)
            method = CoefficientMethod(self.coefficients)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        object.__setattr__(self, "option_type", opt_type)
        object.__setattr__(self, "coefficients", method)

        for name in (
            "asset_price",
            "strike",
            "time_step",
            "volatility",
            "risk_free_rate",
        ):
            try:
                value = float(getattr(self, name))
            except (TypeError, ValueError) as e:
                raise ValidationError(f"{name} must be a real number") from e
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be finite")
            object.__setattr__(self, name, value)

        if isinstance(self.steps, bool) or not isinstance(self.steps, Integral):
            raise ValidationError("steps must be an integer")
        if self.steps < 1:
            raise ValidationError("steps must be >= 1")
        if self.time_step <= 0:
            raise ValidationError("time_step must be > 0")
        if self.volatility < 0:
            raise ValidationError("volatility must be >= 0")
        if self.asset_price < 0:
            raise ValidationError("asset_price must be >= 0")
        if self.strike < 0:
            raise ValidationError("strike must be >= 0")

    def option_value(self) -> float:
        """Present value of the option under the CRR binomial model."""
        # Deferred: binomial_tree imports this module for PricingParameters.
        from crr_pricing.options.models.binomial_tree import crr_option_value

        return crr_option_value(self)


@dataclass(frozen=True)
class OptionSpec:
    """Contract terms required for pricing one vanilla option."""

    strike: float
    time_to_expiry: float
    option_type: OptionTypeInput


@dataclass(frozen=True)
class MarketState:
    """Market inputs used by pricing engines."""

    spot: float
    volatility: float
    rate: float = 0.0
