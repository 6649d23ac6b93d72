"""
Strategy package for Strategy Resolver.

Each strategy declares which context it applies to and, once constructed
with its parameters, executes to produce a result mapping.
"""

from strategy_resolver.strategies.base import BaseStrategy, base_result, extend_result
from strategy_resolver.strategies.paper import PaperQuantityStrategy, PaperWeightStrategy
from strategy_resolver.strategies.quantity import QuantityStrategy

__all__ = [
    "BaseStrategy",
    "PaperQuantityStrategy",
    "PaperWeightStrategy",
    "QuantityStrategy",
    "base_result",
    "extend_result",
]
