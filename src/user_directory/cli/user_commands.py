"""User directory lookup CLI commands."""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from src.user_directory.core.errors import StorageUnavailableError
from src.user_directory.core.services import UserDirectoryService
from src.user_directory.entities.core._base import ID_MAX, ID_MIN
from src.user_directory.entities.core.user import User, UserRepository

from .utils import console, get_db_session_service

users_app = typer.Typer(help="Look up users in the directory")


def _users_table(users: list[User], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Email", style="blue")
    table.add_column("Role", style="magenta")

    for user in users:
        table.add_row(str(user.id), user.email, user.role.value)
    return table


@users_app.command("list")
def list_users() -> None:
    """List all users in the directory."""
    db = get_db_session_service()
    try:
        with db.session_scope() as session:
            users = UserDirectoryService(UserRepository(session)).get_all_users()
    except StorageUnavailableError as e:
        console.print(f"[red]❌ Failed to list users: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    console.print(_users_table(users, "Users"))
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("show")
def show_user(
    user_id: Optional[int] = typer.Option(
        None, "--id", "-i", min=ID_MIN, max=ID_MAX, help="User ID"
    ),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Exact email address"),
) -> None:
    """Show a single user, looked up by id or by email."""
    if (user_id is None) == (email is None):
        console.print("[red]❌ Provide exactly one of --id or --email[/red]")
        raise typer.Exit(code=1)

    db = get_db_session_service()
    try:
        with db.session_scope() as session:
            directory = UserDirectoryService(UserRepository(session))
            if user_id is not None:
                user = directory.get_user_by_id(user_id)
            else:
                user = directory.get_user_by_email(email)
    except StorageUnavailableError as e:
        console.print(f"[red]❌ Failed to look up user: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if user is None:
        key = f"id {user_id}" if user_id is not None else f"email '{email}'"
        console.print(f"[yellow]No user with {key}[/yellow]")
        raise typer.Exit(code=1)

    console.print(_users_table([user], f"User {user.id}"))
