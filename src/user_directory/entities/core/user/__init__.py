"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- UserRead: Public (HTTP) representation, without the password hash
- UserTable: Database persistence model
- UserRepository: SQL-backed user store
"""

from .entity import Role, User, UserRead
from .repository import UserRepository
from .table import UserTable

__all__ = ["Role", "User", "UserRead", "UserTable", "UserRepository"]
