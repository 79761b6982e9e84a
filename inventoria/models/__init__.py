from inventoria.models.base import Collection
from inventoria.models.product import PRODUCTS
from inventoria.models.category import CATEGORIES
from inventoria.models.storage import STORAGE_LOCATIONS

ALL_COLLECTIONS = (PRODUCTS, CATEGORIES, STORAGE_LOCATIONS)

__all__ = [
    "Collection",
    "PRODUCTS",
    "CATEGORIES",
    "STORAGE_LOCATIONS",
    "ALL_COLLECTIONS",
]
