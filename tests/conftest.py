"""
Pytest configuration and shared fixtures.
"""

import logging
from typing import Iterator

import pytest

from strategy_resolver.connection import DatabaseConnection

KNOWN_ALPHAS = ["paper", "plastic", "metal"]
KNOWN_BETAS = ["quantity", "paper_quantity", "paper_weight", "weight"]


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo logging changes made by the CLI's setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def fresh_connection() -> Iterator[None]:
    """Give every test its own database connection singleton."""
    DatabaseConnection.reset()
    yield
    DatabaseConnection.reset()


@pytest.fixture
def sample_input() -> dict:
    """A typical input payload."""
    return {"quantity": 10}


@pytest.fixture
def discriminator_pairs() -> list[tuple[str, str]]:
    """Every alpha/beta combination used for exhaustive predicate checks."""
    return [(alpha, beta) for alpha in KNOWN_ALPHAS for beta in KNOWN_BETAS]
