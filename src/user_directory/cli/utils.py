"""Shared utilities for CLI commands."""

from rich.console import Console

from src.user_directory.core.services import DbSessionService
from src.user_directory.runtime.context import get_config

console = Console()


def get_db_session_service() -> DbSessionService:
    """Build a database service from the current configuration."""
    return DbSessionService(get_config())
