"""Per-stage timing and statistics."""

import time
from typing import Dict, Iterable, Optional

from rich.console import Console
from rich.table import Table

console = Console()


class PipelineStage:
    """Represents a pipeline stage."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.success = False
        self.error: Optional[str] = None
        self.stats: Dict = {}

    def start(self):
        """Mark stage as started."""
        self.start_time = time.monotonic()

    def complete(self, stats: Optional[Dict] = None):
        """Mark stage as completed successfully."""
        self.end_time = time.monotonic()
        self.success = True
        if stats:
            self.stats.update(stats)

    def fail(self, error: str):
        """Mark stage as failed."""
        self.end_time = time.monotonic()
        self.success = False
        self.error = error

    @property
    def duration(self) -> float:
        """Get stage duration in seconds."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0


def print_stage_summary(stages: Iterable, title: str = "Pipeline Summary") -> None:
    """Print a table of stage outcomes (PipelineStage or StageReport objects)."""
    table = Table(title=title)
    table.add_column("Stage", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Duration", style="yellow")
    table.add_column("Details", style="dim")

    for stage in stages:
        status = "[green]ok[/green]" if stage.success else "[red]failed[/red]"
        duration = getattr(stage, "duration_seconds", None)
        if duration is None:
            duration = stage.duration
        details = ", ".join(f"{k}={v}" for k, v in stage.stats.items()) if stage.success else (stage.error or "")
        table.add_row(stage.name, status, f"{duration:.2f}s", details)

    console.print(table)
