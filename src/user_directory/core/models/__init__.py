"""Core models."""

from .principal import Principal

__all__ = ["Principal"]
