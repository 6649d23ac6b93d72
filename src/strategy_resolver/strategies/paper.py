"""
Paper-specific strategies.
"""

import logging
from typing import Any, Mapping

from strategy_resolver.models.context import Context
from strategy_resolver.strategies.base import BaseStrategy, extend_result

logger = logging.getLogger(__name__)


class PaperQuantityStrategy(BaseStrategy):
    """Handles paper quantities expressed as a sheet format."""

    parameters = ("paper_quantity_type",)

    def __init__(self, input: Mapping[str, Any], *, paper_quantity_type: str) -> None:
        super().__init__(input)
        self.paper_quantity_type = paper_quantity_type

    @classmethod
    def applicable(cls, context: Context) -> bool:
        return context.condition_alpha == "paper" and context.condition_beta == "paper_quantity"

    def execute(self) -> dict[str, Any]:
        logger.info(
            "Executing paper quantity strategy with quantity type: %s",
            self.paper_quantity_type,
        )
        return extend_result(self._build_result(), paper_quantity_type=self.paper_quantity_type)


class PaperWeightStrategy(BaseStrategy):
    """Handles paper weights."""

    parameters = ("weight_type",)

    def __init__(self, input: Mapping[str, Any], *, weight_type: str) -> None:
        super().__init__(input)
        self.weight_type = weight_type

    @classmethod
    def applicable(cls, context: Context) -> bool:
        return context.condition_alpha == "paper" and context.condition_beta == "paper_weight"

    def execute(self) -> dict[str, Any]:
        logger.info("Executing paper weight strategy with weight type: %s", self.weight_type)
        return extend_result(self._build_result(), weight_type=self.weight_type)
