from pydantic import Field, field_validator
from typing import Optional

from inventoria.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)


class CategoryResponse(CamelModel):
    id: str
    name: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("id", "name", mode="before")
    @classmethod
    def cell_to_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
