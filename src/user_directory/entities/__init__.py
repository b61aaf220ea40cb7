"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.user import Role, User, UserRead, UserRepository, UserTable

__all__ = [
    "Role",
    "User",
    "UserRead",
    "UserTable",
    "UserRepository",
]
