"""
Logging configuration for the command-line interface.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger with a Rich handler."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
