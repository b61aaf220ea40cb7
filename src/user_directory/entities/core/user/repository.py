"""User repository: SQL-backed user store."""

from loguru import logger
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from src.user_directory.core.errors import StorageUnavailableError
from src.user_directory.core.storage.user_store import UserStore
from src.user_directory.entities.core._base import ID_MAX, ID_MIN
from src.user_directory.entities.core.user.entity import User
from src.user_directory.entities.core.user.table import UserTable


class UserRepository(UserStore):
    """Data-access layer for users.

    Rows are mapped to ``User`` domain entities; callers never see
    ``UserTable`` instances. Connection-level failures surface as
    ``StorageUnavailableError``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, user_id: int) -> User | None:
        if not ID_MIN <= user_id <= ID_MAX:
            # No row can hold it, and the driver would reject the bind
            return None
        try:
            row = self._session.get(UserTable, user_id)
        except OperationalError as e:
            raise self._unavailable(e, "find_by_id") from e
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def find_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(UserTable.email == email)
        try:
            row = self._session.exec(statement).first()
        except OperationalError as e:
            raise self._unavailable(e, "find_by_email") from e
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        try:
            rows = self._session.exec(select(UserTable)).all()
        except OperationalError as e:
            raise self._unavailable(e, "list_all") from e
        return [User.model_validate(row, from_attributes=True) for row in rows]

    @staticmethod
    def _unavailable(exc: OperationalError, operation: str) -> StorageUnavailableError:
        logger.error(
            "User storage query failed",
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        return StorageUnavailableError.from_exception(exc, operation=operation)
