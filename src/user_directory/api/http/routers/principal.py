"""Principal echo and greeting resource."""

import uuid

from fastapi import APIRouter, Depends

from src.user_directory.api.http.deps import get_current_principal
from src.user_directory.core.models.principal import Principal

router = APIRouter(tags=["principal"])


@router.get("/user", response_model=Principal)
def current_user(principal: Principal = Depends(get_current_principal)) -> Principal:
    """Echo the externally-authenticated principal."""
    return principal


@router.get("/resource")
def resource() -> dict[str, str]:
    """Greeting resource with a fresh random id on every call."""
    return {"id": str(uuid.uuid4()), "content": "Hello World"}
