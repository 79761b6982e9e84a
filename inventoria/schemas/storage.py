from pydantic import Field, field_validator
from typing import Optional

from inventoria.schemas.common import CamelModel


class StorageLocationCreate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = None


class StorageLocationUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = None


class StorageLocationResponse(CamelModel):
    id: str
    name: str
    location: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("id", "name", "location", mode="before")
    @classmethod
    def cell_to_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
