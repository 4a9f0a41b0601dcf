"""Binomial, payoff and closed-form option-pricing models."""

from .binomial_tree import (
    crr_option_value,
    down_factor,
    risk_neutral_probability,
    terminal_prices,
    up_factor,
)
from .black_scholes import bs_d1_d2, bs_price, tree_carry_yield
from .financial_math import (
    MAX_FACTORIAL_STEPS,
    binomial_coefficient,
    binomial_weights,
    factorial,
    factorials,
    future_value,
    present_value,
)
from .payoffs import call_payoff, payoff, put_payoff

__all__ = [
    "crr_option_value",
    "up_factor",
    "down_factor",
    "risk_neutral_probability",
    "terminal_prices",
    "bs_d1_d2",
    "bs_price",
    "tree_carry_yield",
    "MAX_FACTORIAL_STEPS",
    "factorial",
    "factorials",
    "binomial_coefficient",
    "binomial_weights",
    "future_value",
    "present_value",
    "call_payoff",
    "put_payoff",
    "payoff",
]
