"""
Base strategy class and result builders.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from strategy_resolver.models.context import Context
from strategy_resolver.models.strategy import StrategyDescriptor


def base_result(input: Mapping[str, Any]) -> dict[str, Any]:
    """
    Seed a result mapping with the original input payload.

    Args:
        input: The payload the strategy was constructed with.

    Returns:
        A new mapping holding only the ``input`` field.
    """
    return {"input": input}


def extend_result(result: Mapping[str, Any], **fields: Any) -> dict[str, Any]:
    """
    Layer strategy-specific fields over an existing result.

    Args:
        result: The result to extend. It is left untouched.
        **fields: Fields to append, in order.

    Returns:
        A new mapping with the items of ``result`` followed by ``fields``.
    """
    extended = dict(result)
    extended.update(fields)
    return extended


class BaseStrategy(ABC):
    """
    Abstract base class for strategies.

    Subclasses must implement applicable() and execute(), and list the
    keyword parameters their constructor requires in ``parameters``.
    """

    parameters: tuple[str, ...] = ()

    def __init__(self, input: Mapping[str, Any]) -> None:
        """
        Initialize the strategy.

        Args:
            input: Arbitrary caller-supplied payload.
        """
        self.input = input

    @classmethod
    @abstractmethod
    def applicable(cls, context: Context) -> bool:
        """
        Check whether this strategy handles the given context.

        Args:
            context: The discriminator pair to test.

        Returns:
            True if the strategy applies to the context.
        """
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """
        Run the strategy.

        Returns:
            The result mapping, owned by the caller.
        """
        raise NotImplementedError("Subclasses must implement this method")

    @classmethod
    def describe(cls) -> StrategyDescriptor:
        """Build a descriptor for this strategy class."""
        doc = (cls.__doc__ or "").strip()
        return StrategyDescriptor(
            name=cls.__name__,
            parameters=list(cls.parameters),
            summary=doc.splitlines()[0] if doc else "",
        )

    def _build_result(self) -> dict[str, Any]:
        return base_result(self.input)
