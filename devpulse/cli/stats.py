"""Stats command implementation."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config
from ..db import PostgresArticleStore
from ..errors import StoreError
from ..ranking import ArticleStats, collect_stats

console = Console()


def print_stats(stats: ArticleStats) -> None:
    """Print article statistics."""
    console.print(f"[bold]Total articles:[/bold] {stats.total_articles}")
    console.print(f"[bold]Added today:[/bold] {stats.today_articles}")

    table = Table(title="Articles by Source")
    table.add_column("Source", style="cyan")
    table.add_column("Articles", style="green", justify="right")
    for source, count in sorted(stats.source_stats.items(), key=lambda kv: -kv[1]):
        table.add_row(source, str(count))
    console.print(table)

    if stats.recent_articles:
        console.print("\n[bold]Most recent:[/bold]")
        for article in stats.recent_articles:
            console.print(f"  • [cyan]{article.source}[/cyan] {escape(article.title)}")


def stats_command() -> None:
    """Show article statistics."""
    config = Config()
    try:
        db_config = config.get_db_config()
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    store = PostgresArticleStore(db_config)

    try:
        stats = collect_stats(store)
    except StoreError as e:
        console.print(f"[red]Failed to load stats: {e}[/red]")
        raise typer.Exit(1)

    print_stats(stats)
