"""
Business logic services
"""

from inventoria.services.product_service import ProductService, ProductResult
from inventoria.services.category_service import CategoryService
from inventoria.services.storage_service import StorageService
from inventoria.services.code_service import CodeService

__all__ = [
    "ProductService",
    "ProductResult",
    "CategoryService",
    "StorageService",
    "CodeService",
]
