"""Error hierarchy for the user directory.

Exception Hierarchy:
    UserDirectoryError (base)
    └── StorageUnavailableError - the user store cannot be reached or queried

A lookup that finds nothing is not an error: stores return ``None``.
"""

from typing import Any


class UserDirectoryError(Exception):
    """Base exception for all user directory errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class StorageUnavailableError(UserDirectoryError):
    """The backing user store could not be reached or queried.

    Fatal for the current request; never retried by the directory.

    Attributes:
        operation: Store operation that failed (e.g. "find_by_id").
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation

    @classmethod
    def from_exception(
        cls, exc: Exception, *, operation: str | None = None
    ) -> "StorageUnavailableError":
        """Wrap a driver or ORM exception, keeping its type in ``details``."""
        return cls(
            f"User storage unavailable: {exc}",
            operation=operation,
            details={"error_type": type(exc).__name__},
        )
