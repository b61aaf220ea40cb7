"""Tests for database session management, schema creation and seeding."""

import pytest
from sqlalchemy import inspect
from sqlmodel import select

from src.user_directory.core.services import DbManageService, DbSessionService
from src.user_directory.entities.core.user import Role, UserRepository, UserTable
from src.user_directory.runtime.config.config_data import ConfigData, SeedUserConfig
from src.user_directory.runtime.context import with_context
from src.user_directory.runtime.init_db import init_db


class TestDbSessionService:
    def test_health_check_succeeds(self, db_service: DbSessionService):
        assert db_service.health_check() is True

    def test_sessions_share_in_memory_database(self, db_service: DbSessionService):
        with db_service.session_scope() as session:
            session.add(UserTable(email="shared@example.com", password_hash="h"))

        with db_service.session_scope() as session:
            assert UserRepository(session).find_by_email("shared@example.com") is not None

    def test_session_scope_rolls_back_on_error(self, db_service: DbSessionService):
        with pytest.raises(RuntimeError):
            with db_service.session_scope() as session:
                session.add(UserTable(email="rolled-back@example.com", password_hash="h"))
                session.flush()
                raise RuntimeError("boom")

        with db_service.session_scope() as session:
            assert UserRepository(session).find_by_email("rolled-back@example.com") is None

    def test_file_database(self, tmp_path, test_config: ConfigData):
        test_config.database.url = f"sqlite:///{tmp_path / 'users.db'}"
        service = DbSessionService(test_config)
        try:
            DbManageService(service).create_all()
            assert service.health_check() is True
            assert (tmp_path / "users.db").exists()
        finally:
            service.dispose()


class TestDbManageService:
    def test_create_all_creates_users_table(self, tableless_db_service: DbSessionService):
        DbManageService(tableless_db_service).create_all()

        table_names = inspect(tableless_db_service.engine).get_table_names()
        assert "users" in table_names

    def test_seed_inserts_users(self, db_service: DbSessionService):
        seed = [
            SeedUserConfig(email="demo@localhost", password_hash="h"),
            SeedUserConfig(email="admin@localhost", password_hash="h2", role=Role.ADMIN),
        ]

        inserted = DbManageService(db_service).seed_users(seed)

        assert inserted == 2
        with db_service.session_scope() as session:
            users = UserRepository(session).list_all()
        assert {u.email for u in users} == {"demo@localhost", "admin@localhost"}
        assert len({u.id for u in users}) == 2

    def test_seed_is_idempotent(self, db_service: DbSessionService):
        seed = [SeedUserConfig(email="demo@localhost", password_hash="h")]
        manage = DbManageService(db_service)

        assert manage.seed_users(seed) == 1
        assert manage.seed_users(seed) == 0

        with db_service.session_scope() as session:
            rows = session.exec(select(UserTable)).all()
        assert len(rows) == 1

    def test_seed_skips_duplicate_email_in_batch(self, db_service: DbSessionService):
        seed = [
            SeedUserConfig(email="dup@localhost", password_hash="first"),
            SeedUserConfig(email="dup@localhost", password_hash="second"),
        ]

        assert DbManageService(db_service).seed_users(seed) == 1

        with db_service.session_scope() as session:
            user = UserRepository(session).find_by_email("dup@localhost")
        assert user is not None
        assert user.password_hash == "first"


class TestInitDb:
    def test_creates_tables_and_seeds(
        self, tableless_db_service: DbSessionService, test_config: ConfigData
    ):
        with with_context(test_config):
            inserted = init_db(tableless_db_service)

        assert inserted == 1
        with tableless_db_service.session_scope() as session:
            user = UserRepository(session).find_by_email("demo@localhost")
        assert user is not None
        assert user.id == 1

    def test_seeding_disabled(
        self, tableless_db_service: DbSessionService, test_config: ConfigData
    ):
        test_config.seed.enabled = False

        with with_context(test_config):
            inserted = init_db(tableless_db_service)

        assert inserted == 0
        with tableless_db_service.session_scope() as session:
            assert UserRepository(session).list_all() == []
