"""
Quantity strategy.
"""

import logging
from typing import Any, Mapping

from strategy_resolver.models.context import Context
from strategy_resolver.strategies.base import BaseStrategy, extend_result

logger = logging.getLogger(__name__)


class QuantityStrategy(BaseStrategy):
    """Handles plain quantity requests for paper."""

    parameters = ("quantity_type",)

    def __init__(self, input: Mapping[str, Any], *, quantity_type: str) -> None:
        super().__init__(input)
        self.quantity_type = quantity_type

    @classmethod
    def applicable(cls, context: Context) -> bool:
        return context.condition_alpha == "paper" and context.condition_beta == "quantity"

    def execute(self) -> dict[str, Any]:
        logger.info("Executing quantity strategy with quantity type: %s", self.quantity_type)
        return extend_result(self._build_result(), quantity_type=self.quantity_type)
