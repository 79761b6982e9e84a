from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from inventoria.core.database import WorkbookStore
from inventoria.core.dependencies import get_store
from inventoria.schemas.common import ApiResponse, MessageResponse
from inventoria.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from inventoria.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=ApiResponse[List[ProductResponse]],
    response_model_exclude_none=True,
)
def list_products(
    search: Optional[str] = Query(None, max_length=100),
    category: Optional[str] = None,
    location: Optional[str] = None,
    store: WorkbookStore = Depends(get_store),
):
    service = ProductService(store)
    return {
        "success": True,
        "data": service.list_products(search=search, category=category, location=location),
    }


@router.get(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    response_model_exclude_none=True,
)
def get_product(product_id: str, store: WorkbookStore = Depends(get_store)):
    service = ProductService(store)
    return {"success": True, "data": service.get_product(product_id)}


@router.post(
    "",
    response_model=ApiResponse[ProductResponse],
    response_model_exclude_none=True,
    status_code=201,
)
def create_product(request: ProductCreate, store: WorkbookStore = Depends(get_store)):
    """
    Crée un produit ; sku généré depuis le nom s'il est absent.
    Le QR code et le code-barres sont générés dans la foulée.
    """
    service = ProductService(store)
    result = service.create_product(request.model_dump(exclude_unset=True))
    return {"success": True, "data": result.product, "warning": result.warning}


@router.put(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    response_model_exclude_none=True,
)
def update_product(
    product_id: str,
    request: ProductUpdate,
    store: WorkbookStore = Depends(get_store),
):
    """Modifier un produit"""
    service = ProductService(store)
    result = service.update_product(
        product_id, request.model_dump(exclude_unset=True, by_alias=True)
    )
    return {"success": True, "data": result.product, "warning": result.warning}


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: str, store: WorkbookStore = Depends(get_store)):
    service = ProductService(store)
    service.delete_product(product_id)
    return {
        "success": True,
        "message": "Product, QR code, and barcode deleted successfully",
    }
