"""
Unit tests for output formatters.
"""

import json

import pytest
import yaml

from strategy_resolver.models.strategy import StrategyDescriptor
from strategy_resolver.output.formatters import get_formatter
from strategy_resolver.output.json_output import JsonFormatter
from strategy_resolver.output.text_output import TextFormatter
from strategy_resolver.output.yaml_output import YamlFormatter


@pytest.fixture
def sample_result() -> dict:
    """A result as returned by PaperQuantityStrategy."""
    return {"input": {"quantity": 10}, "paper_quantity_type": "A4"}


@pytest.fixture
def sample_descriptors() -> list[StrategyDescriptor]:
    """Descriptors for two strategies."""
    return [
        StrategyDescriptor(name="QuantityStrategy", parameters=["quantity_type"], summary="Quantities."),
        StrategyDescriptor(name="PaperWeightStrategy", parameters=["weight_type"], summary="Weights."),
    ]


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format_result(self, sample_result: dict) -> None:
        """Test that the result round-trips through JSON."""
        output = JsonFormatter().format_result(sample_result)

        assert json.loads(output) == sample_result

    def test_format_result_keeps_field_order(self, sample_result: dict) -> None:
        """Test that input comes first."""
        output = JsonFormatter(indent=None).format_result(sample_result)

        assert output.index('"input"') < output.index('"paper_quantity_type"')

    def test_format_strategies(self, sample_descriptors: list[StrategyDescriptor]) -> None:
        """Test listing strategies as JSON."""
        data = json.loads(JsonFormatter().format_strategies(sample_descriptors))

        assert data["total"] == 2
        assert [s["name"] for s in data["strategies"]] == ["QuantityStrategy", "PaperWeightStrategy"]
        assert data["strategies"][1]["parameters"] == ["weight_type"]


class TestYamlFormatter:
    """Tests for YamlFormatter."""

    def test_format_result(self, sample_result: dict) -> None:
        """Test that the result parses back from YAML."""
        output = YamlFormatter().format_result(sample_result)

        assert yaml.safe_load(output) == sample_result
        assert output.startswith("input:")

    def test_format_strategies(self, sample_descriptors: list[StrategyDescriptor]) -> None:
        """Test listing strategies as YAML."""
        data = yaml.safe_load(YamlFormatter().format_strategies(sample_descriptors))

        assert data["total"] == 2
        assert data["strategies"][0]["summary"] == "Quantities."


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_format_result(self, sample_result: dict) -> None:
        """Test the result table."""
        output = TextFormatter(colorize=False).format_result(sample_result)

        assert "Strategy Result" in output
        assert "paper_quantity_type" in output
        assert "A4" in output
        assert "'quantity': 10" in output

    def test_format_strategies(self, sample_descriptors: list[StrategyDescriptor]) -> None:
        """Test the strategy table."""
        output = TextFormatter(colorize=False).format_strategies(sample_descriptors)

        assert "Registered Strategies (2)" in output
        assert "PaperWeightStrategy" in output
        assert "weight_type" in output

    def test_format_no_strategies(self) -> None:
        """Test the empty registry message."""
        output = TextFormatter(colorize=False).format_strategies([])

        assert "No strategies registered." in output

    def test_no_ansi_codes_without_color(self, sample_result: dict) -> None:
        """Test that colorize=False produces plain text."""
        output = TextFormatter(colorize=False).format_result(sample_result)

        assert "\x1b[" not in output


class TestGetFormatter:
    """Tests for the formatter registry."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("text", TextFormatter), ("json", JsonFormatter), ("yaml", YamlFormatter)],
    )
    def test_get_registered_formatter(self, name: str, expected: type) -> None:
        """Test looking up each registered formatter."""
        assert isinstance(get_formatter(name), expected)

    def test_passes_options(self) -> None:
        """Test that constructor options reach the formatter."""
        formatter = get_formatter("text", colorize=False)

        assert isinstance(formatter, TextFormatter)
        assert formatter.colorize is False

    def test_unknown_formatter(self) -> None:
        """Test that unknown names list the available formatters."""
        with pytest.raises(ValueError, match="Unknown formatter: html"):
            get_formatter("html")
