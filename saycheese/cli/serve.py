"""Serve command implementation."""

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from ..api import create_app
from .common import ConfigOption, VerboseOption, load_cli_config


def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(3000, "--port", "-p", help="Bind port"),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Run the HTTP API."""
    config = load_cli_config(config_path, verbose)
    app = create_app(config, configure_logging=False)
    uvicorn.run(app, host=host, port=port, log_config=None)
