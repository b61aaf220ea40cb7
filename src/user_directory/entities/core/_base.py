from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

# Ids are 64-bit signed integers in every backend
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier."""

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier, assigned by the store on creation",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an autoincrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )
