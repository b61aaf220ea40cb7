"""User storage abstractions."""

from .user_store import InMemoryUserStore, UserStore

__all__ = ["InMemoryUserStore", "UserStore"]
