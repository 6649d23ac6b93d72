"""
Human-readable text output formatter.
"""

from io import StringIO
from typing import Any

from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table

from strategy_resolver.models.strategy import StrategyDescriptor
from strategy_resolver.output.formatters import BaseFormatter, register_formatter


@register_formatter("text")
class TextFormatter(BaseFormatter):
    """
    Format output as human-readable text using Rich.
    """

    def __init__(self, colorize: bool = True, **_: Any) -> None:
        """
        Initialize the text formatter.

        Args:
            colorize: Whether to use colors in output.
        """
        self.colorize = colorize

    def _console(self, output: StringIO) -> Console:
        return Console(file=output, force_terminal=self.colorize, no_color=not self.colorize, width=120)

    def format_result(self, result: dict[str, Any]) -> str:
        """Format a result mapping as a two-column table."""
        output = StringIO()
        console = self._console(output)

        table = Table(title="Strategy Result", show_header=True, header_style="bold")
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        for field, value in result.items():
            table.add_row(field, Pretty(value))

        console.print(table)
        return output.getvalue()

    def format_strategies(self, strategies: list[StrategyDescriptor]) -> str:
        """Format strategy descriptors as a table in registry order."""
        output = StringIO()
        console = self._console(output)

        if not strategies:
            console.print("No strategies registered.")
            return output.getvalue()

        table = Table(title=f"Registered Strategies ({len(strategies)})", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Strategy", style="cyan")
        table.add_column("Parameters", style="green")
        table.add_column("Summary")

        for position, descriptor in enumerate(strategies, start=1):
            table.add_row(
                str(position),
                descriptor.name,
                ", ".join(descriptor.parameters),
                descriptor.summary,
            )

        console.print(table)
        return output.getvalue()
