"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console

from ..config import Config
from ..errors import ConfigurationError
from ..logging_config import setup_logging

console = Console()


def load_cli_config(config_path: Optional[Path], verbose: bool = False) -> Config:
    """Load configuration and set up logging, exiting on configuration errors."""
    config = Config(config_path)
    try:
        settings = config.config
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else settings.log_level)
    return config


def make_client(config: Config) -> httpx.AsyncClient:
    """Shared HTTP client for one CLI invocation."""
    http = config.config.http
    return httpx.AsyncClient(
        headers={"User-Agent": http.user_agent},
        timeout=http.adapter_timeout_seconds,
    )


ConfigOption = typer.Option(None, "--config", "-c", help="Config file (default: ~/.config/saycheese/config.yaml)")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Debug logging")
