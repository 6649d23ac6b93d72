"""
Strategy resolution.

Maps a pair of discriminator values onto the strategy class that handles
them by scanning a fixed, ordered registry.
"""

import logging
from typing import Any, Mapping

from strategy_resolver.models.context import Context
from strategy_resolver.models.strategy import StrategyDescriptor
from strategy_resolver.strategies import (
    BaseStrategy,
    PaperQuantityStrategy,
    PaperWeightStrategy,
    QuantityStrategy,
)

logger = logging.getLogger(__name__)


class StrategyResolverError(Exception):
    """Base exception for strategy resolution errors."""
    pass


class NoStrategyFoundError(StrategyResolverError):
    """Raised when no registered strategy applies to a context."""

    def __init__(self, context: Context) -> None:
        self.context = context
        super().__init__(f"No strategy found for context: {context}")


class StrategyParameterError(StrategyResolverError):
    """Raised when a strategy is built with the wrong parameters."""
    pass


# Scanned in order; the first applicable strategy wins.
STRATEGIES: tuple[type[BaseStrategy], ...] = (
    QuantityStrategy,
    PaperQuantityStrategy,
    PaperWeightStrategy,
)


class StrategyResolver:
    """
    Resolve the strategy class for a discriminator pair.

    The resolver returns the class itself; the caller constructs it with
    the input payload and the strategy's own keyword parameters.
    """

    def __init__(self, condition_alpha: str, condition_beta: str) -> None:
        """
        Initialize the resolver.

        Args:
            condition_alpha: Primary discriminator.
            condition_beta: Secondary discriminator.
        """
        self.condition_alpha = condition_alpha
        self.condition_beta = condition_beta

    def resolve(self) -> type[BaseStrategy]:
        """
        Find the first registered strategy applicable to the context.

        Returns:
            The matching strategy class.

        Raises:
            NoStrategyFoundError: If no registered strategy applies.
        """
        context = self._build_context()
        for strategy_class in STRATEGIES:
            if strategy_class.applicable(context):
                logger.debug("Resolved %s for %s", strategy_class.__name__, context)
                return strategy_class

        raise NoStrategyFoundError(context)

    @staticmethod
    def available() -> list[StrategyDescriptor]:
        """Describe every registered strategy in registry order."""
        return [strategy_class.describe() for strategy_class in STRATEGIES]

    def _build_context(self) -> Context:
        return Context(
            condition_alpha=self.condition_alpha,
            condition_beta=self.condition_beta,
        )


def resolve_strategy(condition_alpha: str, condition_beta: str) -> type[BaseStrategy]:
    """Shortcut for ``StrategyResolver(...).resolve()``."""
    return StrategyResolver(
        condition_alpha=condition_alpha,
        condition_beta=condition_beta,
    ).resolve()


def build_strategy(
    strategy_class: type[BaseStrategy],
    input: Mapping[str, Any],
    params: Mapping[str, str],
) -> BaseStrategy:
    """
    Construct a strategy from loosely typed parameters.

    Args:
        strategy_class: The resolved strategy class.
        input: Payload passed through to the strategy.
        params: Keyword parameters, e.g. parsed from the command line.

    Returns:
        The constructed strategy.

    Raises:
        StrategyParameterError: If ``params`` does not name exactly the
            parameters the strategy requires.
    """
    required = set(strategy_class.parameters)
    supplied = set(params)

    missing = sorted(required - supplied)
    unexpected = sorted(supplied - required)
    if missing or unexpected:
        problems = []
        if missing:
            problems.append(f"missing {', '.join(missing)}")
        if unexpected:
            problems.append(f"unexpected {', '.join(unexpected)}")
        raise StrategyParameterError(
            f"Invalid parameters for {strategy_class.__name__}: {'; '.join(problems)}"
        )

    return strategy_class(input, **params)
