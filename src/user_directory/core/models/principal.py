"""Principal established by the upstream authenticator."""

from pydantic import BaseModel, Field


class Principal(BaseModel):
    """Externally-authenticated identity, echoed back to the caller as-is."""

    name: str = Field(description="Authenticated principal name")
    roles: list[str] = Field(default_factory=list, description="Roles granted upstream")
    authenticated: bool = Field(default=True)

    @classmethod
    def from_headers(cls, name: str, roles_header: str | None) -> "Principal":
        roles = [role.strip() for role in (roles_header or "").split(",") if role.strip()]
        return cls(name=name, roles=roles)
