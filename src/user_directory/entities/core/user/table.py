"""User database table model."""

from sqlalchemy import Column
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field

from src.user_directory.entities.core._base import EntityTable
from src.user_directory.entities.core.user.entity import Role


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Backing table keyed by ``id`` with a unique secondary index on ``email``.
    ``role`` is limited to the ``Role`` tags by a CHECK constraint, so every
    stored row maps onto a ``User``.
    """

    __tablename__ = "users"

    email: str = Field(index=True, unique=True)
    password_hash: str
    role: Role = Field(
        default=Role.USER,
        sa_column=Column(
            SAEnum(Role, name="user_role", create_constraint=True, validate_strings=True),
            nullable=False,
        ),
    )
