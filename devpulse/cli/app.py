"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import articles_app
from .ingest import ingest_command
from .init import init_command
from .sources import sources_app
from .stats import stats_command

app = typer.Typer(
    name="devpulse",
    help="DevPulse - Developer news aggregator",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("ingest")(ingest_command)
app.command("stats")(stats_command)
app.add_typer(articles_app, name="articles", help="Browse and search articles")
app.add_typer(sources_app, name="sources", help="Inspect news sources")


if __name__ == "__main__":
    app()
