"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from src.user_directory.api.http.app_data import ApplicationDependencies
from src.user_directory.core.models.principal import Principal
from src.user_directory.core.services import UserDirectoryService
from src.user_directory.core.storage.user_store import UserStore
from src.user_directory.entities.core.user import UserRepository
from src.user_directory.runtime.context import get_config


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies built at application startup."""
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield a database session for the duration of one request."""
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_user_store(db: Session = Depends(get_db_session)) -> UserStore:
    """Get the SQL-backed user store bound to the request's session."""
    return UserRepository(db)


def get_user_directory_service(
    store: UserStore = Depends(get_user_store),
) -> UserDirectoryService:
    """Get the User Directory service instance."""
    return UserDirectoryService(store)


def get_current_principal(request: Request) -> Principal:
    """Return the principal established by the upstream authenticator.

    Authentication happens outside this application; the authenticator
    forwards the identity in trusted headers (names come from
    ``security.principal_header`` and ``security.roles_header``).
    """
    security = get_config().security
    name = request.headers.get(security.principal_header)
    if not name:
        raise HTTPException(status_code=401, detail="Authentication required")
    return Principal.from_headers(name, request.headers.get(security.roles_header))
