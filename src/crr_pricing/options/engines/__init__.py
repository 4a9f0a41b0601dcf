"""Pricing engines behind a shared `PriceModel` protocol."""

from .base import PriceModel
from .binomial_tree_pricer import BinomialTreePricer
from .bs_pricer import BlackScholesPricer

__all__ = [
    "PriceModel",
    "BinomialTreePricer",
    "BlackScholesPricer",
]
