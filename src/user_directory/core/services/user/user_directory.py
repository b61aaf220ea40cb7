from loguru import logger

from src.user_directory.core.storage.user_store import UserStore
from src.user_directory.entities.core.user.entity import User


class UserDirectoryService:
    """Read-only directory of users.

    Delegates to the ``UserStore`` it is constructed with, so the storage
    backend can be swapped without touching callers. Absence is returned as
    ``None``; ``StorageUnavailableError`` from the store propagates unchanged.
    """

    def __init__(self, store: UserStore):
        self._store = store

    def get_user_by_id(self, user_id: int) -> User | None:
        user = self._store.find_by_id(user_id)
        if user is None:
            logger.debug("No user with id {}", user_id)
        return user

    def get_user_by_email(self, email: str) -> User | None:
        user = self._store.find_by_email(email)
        if user is None:
            logger.debug("No user with email {}", email)
        return user

    def get_all_users(self) -> list[User]:
        return self._store.list_all()
