"""Ingest command implementation."""

import asyncio

import typer
from rich.console import Console

from ..config import Config
from ..db import InMemoryArticleStore, close_connection_pool, validate_connection
from ..errors import DevPulseError, IngestionFailed, RateLimitExceeded
from ..pipeline import print_ingestion_summary
from ..service import build_service

console = Console()


def ingest_command(
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Fetch and enrich into a throwaway in-memory store",
    ),
    identity: str = typer.Option(
        "cli",
        "--identity",
        help="Client identity used for rate limiting",
    ),
) -> None:
    """Fetch all sources and upsert articles."""
    try:
        config = Config()

        if dry_run:
            store = InMemoryArticleStore()
            console.print("[dim]Dry run: articles will not be persisted[/dim]")
        else:
            console.print("[dim]Checking database connection...[/dim]")
            if not validate_connection(config.get_db_config()):
                console.print("[red]❌ Database connection failed![/red]")
                console.print("Please check your database configuration and ensure Postgres is running.")
                raise typer.Exit(1)
            store = None

        service = build_service(config, store=store)
        console.print(f"[bold]Fetching from {len(service.coordinator.adapters)} sources...[/bold]")
        result = asyncio.run(service.trigger_ingestion(identity))
        print_ingestion_summary(result)

    except RateLimitExceeded as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except IngestionFailed as e:
        console.print(f"[red]Ingestion failed: {e}[/red]")
        console.print(f"  Committed before failure: inserted {e.inserted}, updated {e.updated}")
        raise typer.Exit(1)
    except (DevPulseError, ValueError) as e:
        console.print(f"[red]Ingestion failed: {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Ingestion interrupted by user[/yellow]")
        raise typer.Exit(1)
    finally:
        close_connection_pool()
