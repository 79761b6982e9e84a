from inventoria.schemas.common import (
    ApiResponse,
    CamelModel,
    HealthResponse,
    MessageResponse,
)
from inventoria.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from inventoria.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from inventoria.schemas.storage import (
    StorageLocationCreate,
    StorageLocationUpdate,
    StorageLocationResponse,
)
from inventoria.schemas.codes import (
    GenerateQRRequest,
    GenerateBarcodeRequest,
    QRCodeData,
    BarcodeData,
    BarcodeTypeResponse,
)
from inventoria.schemas.settings import (
    AppSettingsResponse,
    AppSettingsUpdate,
    DatabasePathRequest,
    SettingsResponse,
    DatabaseLocationResponse,
)

__all__ = [
    "ApiResponse",
    "CamelModel",
    "HealthResponse",
    "MessageResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "StorageLocationCreate",
    "StorageLocationUpdate",
    "StorageLocationResponse",
    "GenerateQRRequest",
    "GenerateBarcodeRequest",
    "QRCodeData",
    "BarcodeData",
    "BarcodeTypeResponse",
    "AppSettingsResponse",
    "AppSettingsUpdate",
    "DatabasePathRequest",
    "SettingsResponse",
    "DatabaseLocationResponse",
]
