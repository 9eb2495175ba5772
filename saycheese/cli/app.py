"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .classify import classify_command
from .init import init_command
from .run import alternative_command, telugu_command
from .serve import serve_command
from .sources import sources_app

app = typer.Typer(
    name="saycheese",
    help="SayCheese - Telugu and Indian trending content aggregator",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("telugu")(telugu_command)
app.command("alternative")(alternative_command)
app.command("classify")(classify_command)
app.command("serve")(serve_command)
app.add_typer(sources_app, name="sources", help="Inspect configured sources")


if __name__ == "__main__":
    app()
