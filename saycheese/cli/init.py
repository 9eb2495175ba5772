"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, SourcesModel, create_default_sources, save_config, save_sources
from ..config.loader import DEFAULT_CONFIG_PATH

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_PATH.parent,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    seed_sources: bool = typer.Option(
        True,
        "--seed-sources/--no-seed-sources",
        help="Seed the built-in Telugu and general sources",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
) -> None:
    """Write default config.yaml and sources.yaml."""
    console.print(Panel.fit("SayCheese Trending - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"
    sources_path = config_dir / "sources.yaml"

    if not force and (config_path.exists() or sources_path.exists()):
        console.print(f"[red]Configuration already exists in {config_dir}. Use --force to overwrite.[/red]")
        raise typer.Exit(1)

    save_config(ConfigModel(), config_path)
    console.print(f"✅ Created config: {config_path}")

    sources = create_default_sources() if seed_sources else SourcesModel()
    save_sources(sources, sources_path)
    total = (
        len(sources.telugu_feeds)
        + len(sources.telugu_subreddits)
        + len(sources.general_feeds)
        + len(sources.general_subreddits)
    )
    console.print(f"✅ Created sources: {sources_path} ({total} sources)")

    console.print(
        Panel(
            f"[green]✅ SayCheese initialized![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Sources: {sources_path}\n\n"
            f"Optional API keys (or put them in .env):\n"
            f"  [bold]export NEWS_API_KEY=your_key[/bold]\n"
            f"  [bold]export GUARDIAN_API_KEY=your_key[/bold]\n\n"
            f"Next: [bold]saycheese telugu[/bold] or [bold]saycheese serve[/bold]",
            style="green",
        )
    )
