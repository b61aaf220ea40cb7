"""Database initialization script."""

from src.user_directory.core.services.database.db_manage import DbManageService
from src.user_directory.core.services.database.db_session import DbSessionService
from src.user_directory.runtime.context import get_config


def init_db(db_session_service: DbSessionService | None = None) -> int:
    """Create all database tables, then seed configured users when enabled.

    Returns:
        Number of seed users inserted
    """
    config = get_config()
    db_manage_service = DbManageService(db_session_service or DbSessionService(config))
    db_manage_service.create_all()

    if not config.seed.enabled:
        return 0
    return db_manage_service.seed_users(config.seed.users)


if __name__ == "__main__":
    init_db()
