from inventoria.utils.date_helpers import utc_timestamp
from inventoria.utils.identifiers import new_id, generate_sku, sku_initials
from inventoria.utils.validators import (
    is_blank,
    sanitize_filename_token,
)
from inventoria.utils.exceptions import (
    RecordNotFoundException,
    ProductNotFoundException,
    CategoryNotFoundException,
    StorageLocationNotFoundException,
    ValidationException,
    StorageException,
    UnsupportedSymbologyError,
    ArtifactGenerationError,
    ArtifactNotFoundException,
)

__all__ = [
    "utc_timestamp",
    "new_id",
    "generate_sku",
    "sku_initials",
    "is_blank",
    "sanitize_filename_token",
    "RecordNotFoundException",
    "ProductNotFoundException",
    "CategoryNotFoundException",
    "StorageLocationNotFoundException",
    "ValidationException",
    "StorageException",
    "UnsupportedSymbologyError",
    "ArtifactGenerationError",
    "ArtifactNotFoundException",
]
