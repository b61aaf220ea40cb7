"""User directory API router (read-only)."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from src.user_directory.api.http.deps import get_user_directory_service
from src.user_directory.core.services import UserDirectoryService
from src.user_directory.entities.core._base import ID_MAX, ID_MIN
from src.user_directory.entities.core.user import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRead])
def list_users(
    directory: UserDirectoryService = Depends(get_user_directory_service),
) -> list[UserRead]:
    """List all users."""
    return [UserRead.from_user(user) for user in directory.get_all_users()]


@router.get("/by-email", response_model=UserRead)
def get_user_by_email(
    email: str = Query(..., description="Exact email address to look up"),
    directory: UserDirectoryService = Depends(get_user_directory_service),
) -> UserRead:
    """Get a user by email."""
    user = directory.get_user_by_email(email)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserRead.from_user(user)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int = Path(..., ge=ID_MIN, le=ID_MAX, description="User ID"),
    directory: UserDirectoryService = Depends(get_user_directory_service),
) -> UserRead:
    """Get a user by ID."""
    user = directory.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserRead.from_user(user)
