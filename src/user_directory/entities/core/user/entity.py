"""User domain entity."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from src.user_directory.entities.core._base import Entity


class Role(str, Enum):
    """Role tag stored with each user. No role-based logic hangs off it."""

    USER = "USER"
    ADMIN = "ADMIN"


class User(Entity):
    """User entity representing an account in the directory.

    ``email`` is the alternate lookup key. ``password_hash`` is opaque: it is
    stored and returned but never validated or compared.
    """

    email: str = Field(description="User's email address")
    password_hash: str = Field(description="Opaque password hash")
    role: Role = Field(default=Role.USER, description="User's role tag")

    def __eq__(self, other: Any) -> bool:
        """Compare users by their stored attributes."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.email == other.email
            and self.password_hash == other.password_hash
            and self.role == other.role
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.email,
            self.password_hash,
            self.role,
        ))


class UserRead(BaseModel):
    """User as exposed over HTTP; the password hash is never serialized."""

    id: int
    email: str
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls.model_validate(user, from_attributes=True)
