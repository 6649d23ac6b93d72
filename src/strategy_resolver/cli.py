"""
Command-line interface for Strategy Resolver.

This module provides the CLI using Click framework for argument parsing
and walks the resolve, construct and execute sequence.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from strategy_resolver import __version__
from strategy_resolver.config import Config, find_config_file, load_config
from strategy_resolver.logging_setup import setup_logging

console = Console(stderr=True)

FORMAT_CHOICES = ["text", "json", "yaml"]


def _parse_params(values: tuple[str, ...]) -> dict[str, str]:
    """Turn NAME=VALUE pairs into a mapping."""
    params: dict[str, str] = {}
    for value in values:
        name, sep, param_value = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=VALUE, got {value!r}", param_hint="--param")
        name = name.strip()
        if name in params:
            raise click.BadParameter(f"Parameter {name!r} given more than once", param_hint="--param")
        params[name] = param_value
    return params


def _emit(formatted_output: str, output: Optional[Path]) -> None:
    if output:
        output.write_text(formatted_output, encoding="utf-8")
        console.print(f"[green]Results written to:[/green] {escape(str(output))}")
    else:
        sys.stdout.write(formatted_output)
        sys.stdout.flush()


@click.group()
@click.version_option(version=__version__, prog_name="strategy-resolver")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Strategy Resolver - Pick and run the strategy for a pair of conditions."""
    ctx.ensure_object(dict)
    config_path = config or find_config_file(Path.cwd())
    try:
        loaded = load_config(config_path) if config_path else Config()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()

    if verbose:
        loaded.logging.verbose = True
    setup_logging(verbose=loaded.logging.verbose, quiet=loaded.logging.quiet)
    ctx.obj["config"] = loaded


@cli.command()
@click.argument("condition_alpha")
@click.argument("condition_beta")
def resolve(condition_alpha: str, condition_beta: str) -> None:
    """Show which strategy handles CONDITION_ALPHA and CONDITION_BETA."""
    from strategy_resolver.resolver import StrategyResolver, StrategyResolverError

    resolver = StrategyResolver(condition_alpha=condition_alpha, condition_beta=condition_beta)
    try:
        strategy_class = resolver.resolve()
    except StrategyResolverError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()

    descriptor = strategy_class.describe()
    click.echo(f"Strategy: {descriptor.name}")
    click.echo(f"Parameters: {', '.join(descriptor.parameters)}")


@cli.command()
@click.argument("condition_alpha")
@click.argument("condition_beta")
@click.option(
    "--input",
    "-i",
    "input_json",
    default="{}",
    help="Input payload as a JSON object (default: {}).",
)
@click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    metavar="NAME=VALUE",
    help="Strategy parameter; repeat for each parameter.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default=None,
    help="Output format (default: from config, else text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
@click.pass_context
def execute(
    ctx: click.Context,
    condition_alpha: str,
    condition_beta: str,
    input_json: str,
    params: tuple[str, ...],
    output_format: Optional[str],
    output: Optional[Path],
) -> None:
    """Resolve the strategy for the conditions, run it and print the result."""
    from strategy_resolver.output.formatters import get_formatter
    from strategy_resolver.resolver import StrategyResolver, StrategyResolverError, build_strategy

    config: Config = ctx.obj["config"]

    try:
        payload = json.loads(input_json)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--input") from e
    if not isinstance(payload, dict):
        raise click.BadParameter("Input must be a JSON object", param_hint="--input")

    parsed_params = _parse_params(params)

    try:
        strategy_class = StrategyResolver(
            condition_alpha=condition_alpha,
            condition_beta=condition_beta,
        ).resolve()
        strategy = build_strategy(strategy_class, payload, parsed_params)
        result = strategy.execute()
    except StrategyResolverError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()

    formatter = get_formatter(output_format or config.output.format, colorize=config.output.colorize)
    try:
        _emit(formatter.format_result(result), output)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()


@cli.command("list")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default=None,
    help="Output format (default: from config, else text).",
)
@click.pass_context
def list_strategies(ctx: click.Context, output_format: Optional[str]) -> None:
    """List registered strategies in resolution order."""
    from strategy_resolver.output.formatters import get_formatter
    from strategy_resolver.resolver import StrategyResolver

    config: Config = ctx.obj["config"]
    formatter = get_formatter(output_format or config.output.format, colorize=config.output.colorize)
    _emit(formatter.format_strategies(StrategyResolver.available()), None)


@cli.command()
def connection() -> None:
    """Walk the shared database connection through connect and disconnect."""
    from strategy_resolver.connection import DatabaseConnection

    db_connection = DatabaseConnection.instance()
    click.echo(f"connected: {db_connection.connected}")

    db_connection.connect()
    click.echo(f"connected: {db_connection.connected}")

    db_connection.disconnect()
    click.echo(f"connected: {db_connection.connected}")


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
