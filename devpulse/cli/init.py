"""Init command implementation."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from psycopg.errors import DatabaseError
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_PATH, ConfigModel, save_config
from ..db import init_database, validate_connection
from ..ingestion import ADAPTERS

console = Console()
PASSWORD_ENV = "DEVPULSE_DB_PASSWORD"


def setup_database(db_config: Dict[str, Any]) -> None:
    """Check connectivity and create the schema, exiting on failure."""
    console.print("\n[bold]Testing database connection...[/bold]")
    if not validate_connection(db_config):
        console.print(
            "[red]❌ Cannot reach Postgres.[/red] Check that it is running and that "
            f"[bold]{PASSWORD_ENV}[/bold] holds the password."
        )
        raise typer.Exit(1)

    try:
        init_database(db_config)
    except DatabaseError as e:
        console.print(f"[red]❌ Schema creation failed: {e}[/red]")
        raise typer.Exit(1)
    console.print("✅ Articles table and indexes ready")


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_PATH.parent,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("devpulse", "--db-name", help="Database name"),
    db_user: str = typer.Option("devpulse", "--db-user", help="Database user"),
    sources: Optional[List[str]] = typer.Option(
        None,
        "--source",
        "-s",
        help="Enable only these sources (repeatable). Default: all",
    ),
    skip_db: bool = typer.Option(
        False,
        "--skip-db",
        help="Write configuration without touching the database",
    ),
) -> None:
    """Initialize DevPulse configuration and database."""
    console.print(Panel.fit("DevPulse - Initialization", style="bold blue"))

    unknown = [s for s in sources or [] if s not in ADAPTERS]
    if unknown:
        console.print(
            f"[red]Unknown source(s): {', '.join(unknown)}. "
            f"Available: {', '.join(ADAPTERS)}[/red]"
        )
        raise typer.Exit(1)

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"

    config = ConfigModel(
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": PASSWORD_ENV,
        },
    )
    if sources:
        config.ingestion.enabled_sources = list(sources)

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if skip_db:
        console.print("[yellow]Skipping database setup[/yellow]")
    else:
        setup_database(config.postgres.model_dump())

    console.print(
        Panel(
            f"[green]✅ DevPulse initialized![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Sources: {', '.join(config.ingestion.enabled_sources)}\n\n"
            f"Next steps:\n"
            f"1. Set database password: [bold]export {PASSWORD_ENV}=...[/bold]\n"
            f"2. Optionally set an LLM key for summaries and search: [bold]export OPENAI_API_KEY=...[/bold]\n"
            f"3. Fetch articles: [bold]devpulse ingest[/bold]",
            style="green",
        )
    )
