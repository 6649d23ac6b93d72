"""
Unit tests for data models.
"""

import pytest
from pydantic import ValidationError

from strategy_resolver.models.context import Context
from strategy_resolver.models.strategy import StrategyDescriptor


class TestContext:
    """Tests for the Context model."""

    def test_create_context(self) -> None:
        """Test creating a context."""
        context = Context(condition_alpha="paper", condition_beta="quantity")

        assert context.condition_alpha == "paper"
        assert context.condition_beta == "quantity"

    def test_context_is_immutable(self) -> None:
        """Test that context fields cannot be reassigned."""
        context = Context(condition_alpha="paper", condition_beta="quantity")

        with pytest.raises(ValidationError):
            context.condition_alpha = "plastic"

    def test_context_equality(self) -> None:
        """Test that contexts compare by value."""
        first = Context(condition_alpha="paper", condition_beta="quantity")
        second = Context(condition_alpha="paper", condition_beta="quantity")

        assert first == second
        assert hash(first) == hash(second)

    def test_context_requires_both_fields(self) -> None:
        """Test that both discriminators are required."""
        with pytest.raises(ValidationError):
            Context(condition_alpha="paper")

    def test_context_str_names_both_fields(self) -> None:
        """Test the diagnostic string representation."""
        context = Context(condition_alpha="plastic", condition_beta="quantity")

        assert str(context) == "condition_alpha='plastic', condition_beta='quantity'"


class TestStrategyDescriptor:
    """Tests for the StrategyDescriptor model."""

    def test_defaults(self) -> None:
        """Test descriptor defaults."""
        descriptor = StrategyDescriptor(name="SomeStrategy")

        assert descriptor.parameters == []
        assert descriptor.summary == ""

    def test_descriptor_is_immutable(self) -> None:
        """Test that descriptors cannot be modified."""
        descriptor = StrategyDescriptor(name="SomeStrategy", parameters=["a"])

        with pytest.raises(ValidationError):
            descriptor.name = "Other"
