"""Classify command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..classification import KeywordTaxonomy, TeluguClassifier, load_taxonomy

console = Console()


def classify_command(
    title: str = typer.Argument(..., help="Headline to classify"),
    description: str = typer.Option("", "--description", "-d", help="Summary text"),
    taxonomy: Optional[Path] = typer.Option(None, "--taxonomy", "-t", help="YAML keyword taxonomy"),
) -> None:
    """Show the Telugu classifier verdict for a headline."""
    if taxonomy is not None:
        try:
            keywords = load_taxonomy(taxonomy)
        except (FileNotFoundError, ValueError) as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
    else:
        keywords = KeywordTaxonomy()

    verdict = TeluguClassifier(keywords).classify(title, description)

    table = Table(title="Classification", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Match", "[green]yes[/green]" if verdict.is_match else "[red]no[/red]")
    table.add_row("Category", verdict.category.value)
    table.add_row("Confidence", verdict.level.value)
    table.add_row("Score", f"{verdict.score:.2f}")
    table.add_row("Indicators", ", ".join(verdict.indicators) or "-")
    console.print(table)
