"""Unit tests for the user directory service."""

from unittest.mock import Mock

import pytest

from src.user_directory.core.errors import StorageUnavailableError
from src.user_directory.core.services import UserDirectoryService
from src.user_directory.core.storage.user_store import InMemoryUserStore, UserStore
from src.user_directory.entities.core.user import User


class TestUserDirectoryDelegation:
    """The service passes every call straight to its store."""

    @pytest.fixture
    def store(self) -> Mock:
        return Mock(spec=UserStore)

    def test_get_user_by_id_delegates(self, store: Mock, demo_user: User):
        store.find_by_id.return_value = demo_user

        result = UserDirectoryService(store).get_user_by_id(1)

        assert result is demo_user
        store.find_by_id.assert_called_once_with(1)

    def test_get_user_by_email_delegates(self, store: Mock, demo_user: User):
        store.find_by_email.return_value = demo_user

        result = UserDirectoryService(store).get_user_by_email("demo@localhost")

        assert result is demo_user
        store.find_by_email.assert_called_once_with("demo@localhost")

    def test_get_all_users_delegates(self, store: Mock, sample_users: list[User]):
        store.list_all.return_value = sample_users

        result = UserDirectoryService(store).get_all_users()

        assert result == sample_users
        store.list_all.assert_called_once_with()

    def test_not_found_is_none(self, store: Mock):
        store.find_by_id.return_value = None
        store.find_by_email.return_value = None
        service = UserDirectoryService(store)

        assert service.get_user_by_id(999) is None
        assert service.get_user_by_email("missing@x.com") is None

    @pytest.mark.parametrize(
        ("store_method", "call"),
        [
            ("find_by_id", lambda s: s.get_user_by_id(1)),
            ("find_by_email", lambda s: s.get_user_by_email("demo@localhost")),
            ("list_all", lambda s: s.get_all_users()),
        ],
    )
    def test_storage_unavailable_propagates(self, store: Mock, store_method: str, call):
        getattr(store, store_method).side_effect = StorageUnavailableError(
            "down", operation=store_method
        )

        with pytest.raises(StorageUnavailableError):
            call(UserDirectoryService(store))


class TestUserDirectoryScenario:
    """Demo-user scenario against the in-memory store."""

    @pytest.fixture
    def service(self, demo_user: User) -> UserDirectoryService:
        return UserDirectoryService(InMemoryUserStore([demo_user]))

    def test_lookup_demo_user_by_email(self, service: UserDirectoryService, demo_user: User):
        assert service.get_user_by_email("demo@localhost") == demo_user

    def test_lookup_missing_email(self, service: UserDirectoryService):
        assert service.get_user_by_email("missing@x.com") is None

    def test_lookup_demo_user_by_id(self, service: UserDirectoryService, demo_user: User):
        assert service.get_user_by_id(1) == demo_user

    def test_lookup_missing_id(self, service: UserDirectoryService):
        assert service.get_user_by_id(999) is None

    def test_all_users(self, service: UserDirectoryService, demo_user: User):
        assert service.get_all_users() == [demo_user]
