"""European option pricing: CRR binomial model, engines and shared types."""

from .convergence import (
    convergence_table,
    format_ladder_rows,
    price_ladder,
    reference_price,
    steps_ladder,
    write_convergence_csv,
)
from .engines import BinomialTreePricer, BlackScholesPricer, PriceModel
from .models import (
    binomial_coefficient,
    bs_price,
    call_payoff,
    crr_option_value,
    factorial,
    future_value,
    payoff,
    present_value,
    put_payoff,
    tree_carry_yield,
)
from .types import (
    CoefficientMethod,
    CoefficientMethodInput,
    MarketState,
    OptionSpec,
    OptionType,
    OptionTypeInput,
    PricingParameters,
    ValidationError,
    normalize_option_type,
)

__all__ = [
    "OptionType",
    "OptionTypeInput",
    "CoefficientMethod",
    "CoefficientMethodInput",
    "PricingParameters",
    "OptionSpec",
    "MarketState",
    "ValidationError",
    "normalize_option_type",
    "PriceModel",
    "BinomialTreePricer",
    "BlackScholesPricer",
    "crr_option_value",
    "bs_price",
    "tree_carry_yield",
    "factorial",
    "binomial_coefficient",
    "future_value",
    "present_value",
    "call_payoff",
    "put_payoff",
    "payoff",
    "steps_ladder",
    "price_ladder",
    "reference_price",
    "convergence_table",
    "format_ladder_rows",
    "write_convergence_csv",
]
