"""Aggregation commands."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..errors import SayCheeseError
from ..pipeline import AggregationResult, AlternativeAggregator, TeluguAggregator, parse_categories, print_stage_summary
from ..ranking import print_ranked_items
from .common import ConfigOption, VerboseOption, load_cli_config, make_client

console = Console()


def _print_result(result: AggregationResult, as_json: bool) -> None:
    if as_json:
        console.print_json(json.dumps(result.to_response()))
        return

    for category in result.categories:
        print_ranked_items(category, result.buckets.get(category, []))

    print_stage_summary(result.stages)

    failed = [s for s in result.sources if not s.success]
    summary = (
        f"Region: {result.region} • Window: {result.window_days} days\n"
        f"Sources: {len(result.sources) - len(failed)}/{len(result.sources)} succeeded\n"
        f"Items: {result.total_items}"
    )
    if result.used_fallback:
        summary += "\n[yellow]No matches found, showing fallback content[/yellow]"
    console.print(Panel(summary, title="Aggregation", style="green" if not failed else "yellow"))

    if failed:
        console.print("\n[bold red]Failed sources:[/bold red]")
        for source in failed:
            console.print(f"  - {source.name}: {source.error}")


def telugu_command(
    region: str = typer.Option("Telugu", "--region", "-r", help="Region label"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Recency window in days", min=1, max=90),
    as_json: bool = typer.Option(False, "--json", help="Print the API response body"),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Fetch, classify and rank Telugu trending content."""
    config = load_cli_config(config_path, verbose)

    async def run() -> AggregationResult:
        async with make_client(config) as client:
            return await TeluguAggregator(config, client=client).aggregate(region, days)

    try:
        result = asyncio.run(run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
    except SayCheeseError as e:
        console.print(f"[red]Aggregation failed: {e}[/red]")
        raise typer.Exit(1)

    _print_result(result, as_json)


def alternative_command(
    region: str = typer.Option("IN", "--region", "-r", help="Region code"),
    categories: str = typer.Option("all,tech,news", "--categories", help="Comma-separated categories"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Recency window in days", min=1, max=90),
    as_json: bool = typer.Option(False, "--json", help="Print the API response body"),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Fetch and rank general trending content."""
    config = load_cli_config(config_path, verbose)

    async def run() -> AggregationResult:
        async with make_client(config) as client:
            return await AlternativeAggregator(config, client=client).aggregate(
                region, parse_categories(categories), days
            )

    try:
        result = asyncio.run(run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
    except SayCheeseError as e:
        console.print(f"[red]Aggregation failed: {e}[/red]")
        raise typer.Exit(1)

    _print_result(result, as_json)
