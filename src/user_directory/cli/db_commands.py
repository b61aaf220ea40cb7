"""Database provisioning CLI commands."""

import typer
from rich.markup import escape
from sqlalchemy.exc import SQLAlchemyError

from src.user_directory.runtime.init_db import init_db

from .utils import console, get_db_session_service

db_app = typer.Typer(help="Create tables and seed initial users")


@db_app.command("init")
def init() -> None:
    """Create all tables and insert the configured seed users."""
    try:
        inserted = init_db(get_db_session_service())
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to initialize database: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Database initialized ({inserted} seed user(s) inserted)[/green]")
