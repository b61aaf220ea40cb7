"""Schema creation and initial data provisioning."""

from collections.abc import Iterable

from loguru import logger
from sqlmodel import SQLModel, select

from src.user_directory.core.services.database.db_session import DbSessionService
from src.user_directory.runtime.config.config_data import SeedUserConfig


class DbManageService:
    def __init__(self, db_session_service: DbSessionService):
        self._db = db_session_service

    def create_all(self) -> None:
        """Create all database tables."""
        from src.user_directory.entities.core.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._db.engine)
        logger.info("Database initialized with tables.")

    def seed_users(self, users: Iterable[SeedUserConfig]) -> int:
        """Insert seed users whose email is not yet present.

        Ids are assigned by the database. Running the seed twice inserts
        nothing the second time.

        Returns:
            Number of users inserted
        """
        from src.user_directory.entities.core.user import UserTable

        inserted = 0
        with self._db.session_scope() as session:
            for seed_user in users:
                existing = session.exec(
                    select(UserTable).where(UserTable.email == seed_user.email)
                ).first()
                if existing is not None:
                    logger.debug("Seed user {} already present", seed_user.email)
                    continue

                session.add(
                    UserTable(
                        email=seed_user.email,
                        password_hash=seed_user.password_hash,
                        role=seed_user.role,
                    )
                )
                # Flush so a duplicate email later in the same batch is seen
                session.flush()
                inserted += 1

        logger.info("Seeded {} user(s)", inserted)
        return inserted
