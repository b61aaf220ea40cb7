"""User store interface and in-memory implementation.

The store owns the collection of user records and offers two lookup paths
(by id and by email) plus enumeration. The SQL-backed implementation lives
with the user entity (``entities.core.user.repository``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.user_directory.entities.core.user.entity import User


class UserStore(ABC):
    """Abstract interface for user storage backends."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with ``user_id``.

        Args:
            user_id: Store-assigned identifier

        Returns:
            The user, or None if no record has that id
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the user whose email equals ``email`` exactly.

        Args:
            email: Email address to match

        Returns:
            The user, or None if no record has that email
        """
        pass

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every stored user, in no particular order."""
        pass


class InMemoryUserStore(UserStore):
    """Dict-backed user store.

    Records are provisioned through the constructor; users without an id are
    assigned the next free integer id. The store is read-only afterwards.
    """

    def __init__(self, users: Iterable[User] = ()):
        self._by_id: dict[int, User] = {}
        self._id_by_email: dict[str, int] = {}

        users = list(users)
        # Explicit ids are reserved first so input order never matters
        taken = {user.id for user in users if user.id is not None}

        next_id = 1
        for user in users:
            if user.id is None:
                while next_id in taken:
                    next_id += 1
                taken.add(next_id)
                user = user.model_copy(update={"id": next_id})
            if user.id in self._by_id:
                raise ValueError(f"Duplicate user id: {user.id}")
            if user.email in self._id_by_email:
                raise ValueError(f"Duplicate user email: {user.email}")
            self._by_id[user.id] = user
            self._id_by_email[user.email] = user.id

    def find_by_id(self, user_id: int) -> User | None:
        user = self._by_id.get(user_id)
        return user.model_copy() if user is not None else None

    def find_by_email(self, email: str) -> User | None:
        user_id = self._id_by_email.get(email)
        if user_id is None:
            return None
        return self.find_by_id(user_id)

    def list_all(self) -> list[User]:
        return [user.model_copy() for user in self._by_id.values()]

    def __len__(self) -> int:
        return len(self._by_id)
