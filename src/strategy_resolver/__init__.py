"""
Strategy Resolver

A small library and CLI that selects one of several interchangeable
strategy classes from two discriminator values, plus a lazily created
database connection singleton.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("strategy-resolver")
except PackageNotFoundError:
    __version__ = "0.1.0"

from strategy_resolver.connection import DatabaseConnection
from strategy_resolver.models.context import Context
from strategy_resolver.models.strategy import StrategyDescriptor
from strategy_resolver.resolver import (
    STRATEGIES,
    NoStrategyFoundError,
    StrategyParameterError,
    StrategyResolver,
    StrategyResolverError,
    build_strategy,
    resolve_strategy,
)
from strategy_resolver.strategies import (
    BaseStrategy,
    PaperQuantityStrategy,
    PaperWeightStrategy,
    QuantityStrategy,
)

# Public API exports
__all__ = [
    "__version__",
    "BaseStrategy",
    "Context",
    "DatabaseConnection",
    "NoStrategyFoundError",
    "PaperQuantityStrategy",
    "PaperWeightStrategy",
    "QuantityStrategy",
    "STRATEGIES",
    "StrategyDescriptor",
    "StrategyParameterError",
    "StrategyResolver",
    "StrategyResolverError",
    "build_strategy",
    "resolve_strategy",
]
