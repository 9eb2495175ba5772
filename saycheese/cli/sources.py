"""Sources management commands."""

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..ingestion import FetchResult, SourceAdapter, build_general_adapters, build_telugu_adapters
from .common import ConfigOption, VerboseOption, load_cli_config, make_client

console = Console()
sources_app = typer.Typer(help="Inspect configured sources")


@sources_app.command("list")
def sources_list(config_path: Optional[Path] = ConfigOption) -> None:
    """List all configured sources."""
    config = load_cli_config(config_path)
    sources = config.sources

    table = Table(title="Configured Sources")
    table.add_column("Pipeline", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Priority", style="green")
    table.add_column("Enabled", style="yellow")
    table.add_column("URL", style="blue")

    for pipeline, feeds, subreddits in (
        ("telugu", sources.telugu_feeds, sources.telugu_subreddits),
        ("general", sources.general_feeds, sources.general_subreddits),
    ):
        for feed in feeds:
            table.add_row(pipeline, feed.name, feed.priority.value, "✓" if feed.enabled else "✗", feed.url)
        for subreddit in subreddits:
            table.add_row(
                pipeline,
                f"r/{subreddit.name}",
                subreddit.priority.value,
                "✓" if subreddit.enabled else "✗",
                f"https://www.reddit.com/r/{subreddit.name}",
            )

    console.print(table)


def print_fetch_summary(results: List[FetchResult]) -> None:
    """Print summary of adapter fetch results."""
    table = Table(title="Fetch Results")
    table.add_column("Source", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Items", justify="right")
    table.add_column("Time", style="yellow")
    table.add_column("Error", style="dim")

    for result in results:
        table.add_row(
            result.adapter,
            "[green]ok[/green]" if result.success else "[red]failed[/red]",
            str(result.item_count),
            f"{result.duration_seconds:.1f}s",
            result.error or "",
        )

    console.print(table)
    successful = sum(1 for r in results if r.success)
    console.print(f"  Successful: [green]{successful}[/green]  Failed: [red]{len(results) - successful}[/red]")


@sources_app.command("test")
def sources_test(
    name: Optional[str] = typer.Argument(None, help="Source name to test (or test all)"),
    pipeline: str = typer.Option("telugu", "--pipeline", help="telugu or general"),
    region: str = typer.Option("IN", "--region", "-r", help="Region for general sources"),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Fetch each source once and report the outcome."""
    config = load_cli_config(config_path, verbose)
    if pipeline not in ("telugu", "general"):
        console.print(f"[red]Unknown pipeline: {pipeline}[/red]")
        raise typer.Exit(1)

    async def run() -> List[FetchResult]:
        async with make_client(config) as client:
            if pipeline == "telugu":
                adapters: List[SourceAdapter] = build_telugu_adapters(config, client)
            else:
                adapters = build_general_adapters(config, client, region)
            if name:
                adapters = [a for a in adapters if a.name.lower() == name.lower()]
            if not adapters:
                return []
            return list(await asyncio.gather(*(adapter.fetch() for adapter in adapters)))

    results = asyncio.run(run())
    if not results:
        console.print(f"[red]Source '{name}' not found.[/red]" if name else "[yellow]No sources enabled.[/yellow]")
        raise typer.Exit(1)

    print_fetch_summary(results)
