"""
Base formatter and formatter registry.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from strategy_resolver.models.strategy import StrategyDescriptor


class BaseFormatter(ABC):
    """
    Abstract base class for output formatters.

    Subclasses must implement format_result() and format_strategies() methods.
    """

    @abstractmethod
    def format_result(self, result: dict[str, Any]) -> str:
        """
        Format a strategy result mapping.

        Args:
            result: The mapping returned by a strategy's execute().

        Returns:
            Formatted string representation.
        """
        pass

    @abstractmethod
    def format_strategies(self, strategies: list["StrategyDescriptor"]) -> str:
        """
        Format a list of strategy descriptors.

        Args:
            strategies: Descriptors in registry order.

        Returns:
            Formatted string representation.
        """
        pass


# Formatter registry
_FORMATTERS: dict[str, type[BaseFormatter]] = {}


def register_formatter(name: str) -> Callable[[type[BaseFormatter]], type[BaseFormatter]]:
    """
    Decorator to register a formatter.

    Args:
        name: The name to register the formatter under.

    Returns:
        Decorator function.
    """
    def decorator(cls: type[BaseFormatter]) -> type[BaseFormatter]:
        _FORMATTERS[name] = cls
        return cls
    return decorator


def get_formatter(name: str, **kwargs: Any) -> BaseFormatter:
    """
    Get a formatter instance by name.

    Args:
        name: The formatter name (e.g., "text", "json", "yaml").
        **kwargs: Passed to the formatter constructor.

    Returns:
        An instance of the requested formatter.

    Raises:
        ValueError: If the formatter name is not recognized.
    """
    # Import formatters to ensure they're registered
    from strategy_resolver.output import (  # noqa: F401
        json_output,
        text_output,
        yaml_output,
    )

    if name not in _FORMATTERS:
        available = ", ".join(_FORMATTERS.keys())
        raise ValueError(f"Unknown formatter: {name}. Available: {available}")

    return _FORMATTERS[name](**kwargs)
