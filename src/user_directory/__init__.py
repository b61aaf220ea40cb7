"""User directory service.

Keyed lookup (by id or email) over a single user table, exposed through a
FastAPI application and a small CLI.
"""

__version__ = "0.1.0"
