"""Tests for database configuration helpers."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.user_directory.runtime.config.config_data import DatabaseConfig


class TestDatabaseConfig:
    def test_defaults_to_sqlite_file(self):
        config = DatabaseConfig()

        assert config.is_sqlite
        assert not config.is_in_memory
        assert config.connection_string == "sqlite:///./user_directory.db"

    @pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
    def test_in_memory_detection(self, url: str):
        config = DatabaseConfig(url=url)

        assert config.is_in_memory

    def test_non_sqlite_url(self):
        config = DatabaseConfig(url="postgresql://app@db:5432/users")

        assert not config.is_sqlite
        assert not config.is_in_memory

    def test_password_from_url(self):
        config = DatabaseConfig(url="postgresql://app:secret@db:5432/users")

        assert config.password == "secret"
        assert config.connection_string == "postgresql://app:secret@db:5432/users"

    def test_password_from_file(self, tmp_path: Path):
        secret = tmp_path / "db_password"
        secret.write_text("from-file\n")
        config = DatabaseConfig(
            url="postgresql://app@db:5432/users", password_file=str(secret)
        )

        assert config.password == "from-file"
        assert config.connection_string == "postgresql://app:from-file@db:5432/users"

    def test_unreadable_password_file(self, tmp_path: Path):
        config = DatabaseConfig(
            url="postgresql://app@db:5432/users",
            password_file=str(tmp_path / "missing"),
        )

        with pytest.raises(ValueError, match="Failed to read database password"):
            _ = config.password

    def test_password_from_env_var(self):
        config = DatabaseConfig(
            url="postgresql://app@db:5432/users", password_env_var="DB_PASSWORD"
        )

        with patch.dict(os.environ, {"DB_PASSWORD": "from-env"}):
            assert config.connection_string == "postgresql://app:from-env@db:5432/users"

    def test_missing_env_var(self):
        config = DatabaseConfig(
            url="postgresql://app@db:5432/users", password_env_var="DB_PASSWORD"
        )

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DB_PASSWORD not set"):
                _ = config.password
