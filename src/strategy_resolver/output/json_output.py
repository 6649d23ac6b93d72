"""
JSON output formatter.
"""

import json
from typing import Any

from strategy_resolver.models.strategy import StrategyDescriptor
from strategy_resolver.output.formatters import BaseFormatter, register_formatter


@register_formatter("json")
class JsonFormatter(BaseFormatter):
    """
    Format output as JSON.
    """

    def __init__(self, indent: int = 2, **_: Any) -> None:
        """
        Initialize the JSON formatter.

        Args:
            indent: JSON indentation level.
        """
        self.indent = indent

    def format_result(self, result: dict[str, Any]) -> str:
        """Format a result mapping as JSON."""
        return json.dumps(result, indent=self.indent, default=str) + "\n"

    def format_strategies(self, strategies: list[StrategyDescriptor]) -> str:
        """Format strategy descriptors as JSON."""
        data = {
            "total": len(strategies),
            "strategies": [descriptor.model_dump() for descriptor in strategies],
        }

        return json.dumps(data, indent=self.indent, default=str) + "\n"
