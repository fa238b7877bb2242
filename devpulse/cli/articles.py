"""Article browsing and search commands."""

from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config, ConfigModel
from ..errors import DevPulseError
from ..models import ALL_SOURCES, Article
from ..ranking import QueryResult
from ..service import build_service

console = Console()
articles_app = typer.Typer(help="Browse and search articles")


def print_articles(result: QueryResult, title: str, offset: int = 0) -> None:
    """Print one page of articles as a table."""
    if not result.items:
        console.print("[yellow]No articles found.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Source", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Score", style="green", justify="right")
    table.add_column("Tags", style="magenta")

    for position, article in enumerate(result.items, start=offset + 1):
        table.add_row(
            str(position),
            f"{article.source_icon or ''} {article.source}".strip(),
            _title_cell(article),
            str(article.score),
            ", ".join(article.tags),
        )

    console.print(table)
    if result.has_more:
        console.print(f"[dim]More results available: --offset {offset + len(result.items)}[/dim]")


def _title_cell(article: Article) -> str:
    return f"[link={article.url}]{escape(article.title)}[/link]"


def load_settings(config: Config) -> ConfigModel:
    """Load settings, exiting with a message when the config file is invalid."""
    try:
        return config.config
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@articles_app.command("list")
def articles_list(
    source: str = typer.Option(ALL_SOURCES, "--source", "-s", help="Only this source"),
    prefer_source: Optional[List[str]] = typer.Option(
        None,
        "--prefer-source",
        help="Preferred source (repeatable); overrides --source",
    ),
    prefer_tag: Optional[List[str]] = typer.Option(
        None,
        "--prefer-tag",
        "-t",
        help="Preferred tag (repeatable); matching articles rank first",
    ),
    offset: int = typer.Option(0, "--offset", help="Articles to skip"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Page size"),
) -> None:
    """List articles, newest first or ranked by preferred tags."""
    config = Config()
    settings = load_settings(config)
    preferred_sources = prefer_source if prefer_source is not None else settings.preferences.sources
    preferred_tags = prefer_tag if prefer_tag is not None else settings.preferences.tags

    try:
        service = build_service(config)
        result = service.list_articles(
            source=source,
            preferred_sources=preferred_sources,
            preferred_tags=preferred_tags,
            offset=offset,
            limit=limit or settings.query.page_size,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid query: {e}[/red]")
        raise typer.Exit(1)
    except DevPulseError as e:
        console.print(f"[red]Failed to list articles: {e}[/red]")
        raise typer.Exit(1)

    print_articles(result, "Articles", offset)


@articles_app.command("search")
def articles_search(
    query: str = typer.Argument(..., help="Search query"),
    offset: int = typer.Option(0, "--offset", help="Articles to skip"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Page size"),
    identity: str = typer.Option("cli", "--identity", help="Client identity used for rate limiting"),
) -> None:
    """Search articles by keyword."""
    config = Config()
    settings = load_settings(config)

    try:
        service = build_service(config)
        result = service.search(
            identity,
            query,
            offset=offset,
            limit=limit or settings.query.page_size,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid query: {e}[/red]")
        raise typer.Exit(1)
    except DevPulseError as e:
        console.print(f"[red]Search failed: {e}[/red]")
        raise typer.Exit(1)

    print_articles(result, f"Search: {query}", offset)
