"""Quill CLI application using Typer.

Command-line utilities for the Quill backend: database setup, sample
data, secret generation and development tokens.
"""

import asyncio
import secrets
from datetime import timedelta

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from quill.infrastructure.persistence.sqlalchemy.engine import create_engine
from quill.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_url,
    drop_tables,
)
from quill.presentation.cli.seed import seed_database
from quill_auth import ProviderTokenService
from quill_config.settings import get_settings

app = typer.Typer(
    name="quill",
    help="Quill - multi-author blogging backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create subcommand groups
db_app = typer.Typer(name="db", help="Database management", no_args_is_help=True)
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
token_app = typer.Typer(
    name="token",
    help="Development access tokens",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(secrets_app)
app.add_typer(token_app)


async def _with_engine(action) -> None:
    engine = create_engine(get_settings().database_url)
    try:
        await action(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create all database tables (existing tables are left alone)."""
    console.print(f"Database: [bold]{display_url(get_settings().database_url)}[/bold]")
    asyncio.run(_with_engine(create_tables))
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all database tables (USE WITH CAUTION!)."""
    console.print(f"Database: [bold]{display_url(get_settings().database_url)}[/bold]")

    if not force:
        console.print("[yellow]WARNING: This will DELETE ALL DATA![/yellow]")
        if not typer.confirm("Continue?"):
            console.print("Aborted.")
            raise typer.Exit(code=1)

    asyncio.run(_with_engine(drop_tables))
    console.print("[green]Database tables dropped.[/green]")


@db_app.command("seed")
def db_seed() -> None:
    """Insert sample categories, a test user and published posts."""

    async def _seed(engine) -> None:
        await create_tables(engine)
        result = await seed_database(engine)

        table = Table(title="Seed data")
        table.add_column("Kind")
        table.add_column("Created")
        table.add_column("Skipped", justify="right")
        table.add_row(
            "Categories",
            ", ".join(result.categories) or "-",
            str(sum(1 for s in result.skipped if s.startswith("category:"))),
        )
        table.add_row(
            "Posts",
            ", ".join(result.posts) or "-",
            str(sum(1 for s in result.skipped if s.startswith("post:"))),
        )
        console.print(table)

    asyncio.run(_with_engine(_seed))


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Quill configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Quill Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # Must match the secret the auth provider signs tokens with in production
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]AUTH_JWT_SECRET[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@token_app.command("issue")
def issue_token(
    user_id: str = typer.Option(..., "--user-id", help="Subject (provider user id)"),
    email: str = typer.Option(..., "--email", help="Email claim"),
    full_name: str | None = typer.Option(None, "--full-name", help="Display name"),
    hours: int = typer.Option(1, "--hours", min=1, help="Token lifetime in hours"),
) -> None:
    """Mint a development token signed with AUTH_JWT_SECRET."""
    settings = get_settings()
    service = ProviderTokenService(
        secret_key=settings.auth_jwt_secret.get_secret_value(),
        audience=settings.auth_jwt_audience,
    )
    token = service.create_access_token(
        subject=user_id,
        email=email,
        full_name=full_name,
        expires_delta=timedelta(hours=hours),
    )
    console.print(token, soft_wrap=True)


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "quill.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
