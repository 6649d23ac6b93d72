"""
Output package for Strategy Resolver.

This package contains formatters for displaying strategy results and
the strategy registry in various formats (text, JSON, YAML).
"""

from strategy_resolver.output.formatters import (
    BaseFormatter,
    get_formatter,
)
from strategy_resolver.output.json_output import JsonFormatter
from strategy_resolver.output.text_output import TextFormatter
from strategy_resolver.output.yaml_output import YamlFormatter

__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "TextFormatter",
    "YamlFormatter",
    "get_formatter",
]
