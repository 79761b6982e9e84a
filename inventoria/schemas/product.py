from pydantic import Field, field_validator
from typing import Optional

from inventoria.schemas.common import CamelModel
from inventoria.services.code_generator import DEFAULT_BARCODE_TYPE


class ProductCreate(CamelModel):
    # name/category are checked by the service so the error keeps its wording
    name: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = Field(None, max_length=100)
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    sku: Optional[str] = Field(None, max_length=64)
    description: Optional[str] = None
    location: Optional[str] = None


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = Field(None, max_length=100)
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    sku: Optional[str] = Field(None, max_length=64)
    barcode_type: Optional[str] = Field(None, max_length=32)
    description: Optional[str] = None
    location: Optional[str] = None


class ProductResponse(CamelModel):
    id: str
    name: str
    category: str = ""
    price: float = 0
    stock: int = 0
    sku: str = ""
    qr_code_path: str = ""
    barcode_path: str = ""
    barcode_type: str = DEFAULT_BARCODE_TYPE
    description: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("id", "name", "category", "sku", "description", "location", mode="before")
    @classmethod
    def cell_to_text(cls, v):
        # Cells typed by hand in the spreadsheet may come back as numbers.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
