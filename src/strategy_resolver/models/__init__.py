"""
Data models for Strategy Resolver.

This package contains Pydantic models for the resolution context and
for describing registered strategies.
"""

from strategy_resolver.models.context import Context
from strategy_resolver.models.strategy import StrategyDescriptor

__all__ = [
    "Context",
    "StrategyDescriptor",
]
