"""
YAML output formatter.
"""

from typing import Any

import yaml

from strategy_resolver.models.strategy import StrategyDescriptor
from strategy_resolver.output.formatters import BaseFormatter, register_formatter


@register_formatter("yaml")
class YamlFormatter(BaseFormatter):
    """
    Format output as YAML.
    """

    def __init__(self, **_: Any) -> None:
        pass

    def format_result(self, result: dict[str, Any]) -> str:
        """Format a result mapping as YAML."""
        return yaml.safe_dump(result, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def format_strategies(self, strategies: list[StrategyDescriptor]) -> str:
        """Format strategy descriptors as YAML."""
        data = {
            "total": len(strategies),
            "strategies": [descriptor.model_dump() for descriptor in strategies],
        }

        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
