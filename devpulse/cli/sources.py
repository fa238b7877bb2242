"""Sources inspection commands."""

import asyncio
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..ingestion import ADAPTERS, FetchResult, create_adapters

console = Console()
sources_app = typer.Typer(help="Inspect news sources")


@sources_app.command("list")
def sources_list() -> None:
    """List all known sources and whether they are enabled."""
    config = Config()
    enabled = set(config.config.ingestion.enabled_sources)

    table = Table(title="News Sources")
    table.add_column("Name", style="cyan")
    table.add_column("Icon")
    table.add_column("Min score", style="green", justify="right")
    table.add_column("Enabled", style="yellow")

    for name, adapter_cls in ADAPTERS.items():
        table.add_row(
            name,
            adapter_cls.icon or "",
            str(adapter_cls.min_score),
            "✓" if name in enabled else "✗",
        )

    console.print(table)


async def _fetch_all(adapters) -> List[FetchResult]:
    return await asyncio.gather(*(adapter.fetch() for adapter in adapters))


@sources_app.command("test")
def sources_test(
    name: Optional[str] = typer.Argument(None, help="Source name to test (or test all enabled)"),
) -> None:
    """Fetch each source once and report what came back."""
    config = Config()
    ingestion = config.config.ingestion.model_copy()

    if name:
        if name not in ADAPTERS:
            console.print(f"[red]Source '{name}' not found.[/red]")
            raise typer.Exit(1)
        ingestion.enabled_sources = [name]

    adapters = create_adapters(ingestion, github_token=config.get_github_token())
    results = asyncio.run(_fetch_all(adapters))

    failed = False
    for result in results:
        if result.success:
            console.print(
                f"[green]✅ {result.source_name}: OK "
                f"({result.item_count} kept of {result.raw_count})[/green]"
            )
        else:
            failed = True
            console.print(f"[red]❌ {result.source_name}: Failed - {result.error}[/red]")

    if failed:
        raise typer.Exit(1)
