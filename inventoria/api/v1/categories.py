from fastapi import APIRouter, Depends
from typing import List

from inventoria.core.database import WorkbookStore
from inventoria.core.dependencies import get_store
from inventoria.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from inventoria.schemas.common import ApiResponse, MessageResponse
from inventoria.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=ApiResponse[List[CategoryResponse]],
    response_model_exclude_none=True,
)
def list_categories(store: WorkbookStore = Depends(get_store)):
    service = CategoryService(store)
    return {"success": True, "data": service.list_categories()}


@router.get(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
)
def get_category(category_id: str, store: WorkbookStore = Depends(get_store)):
    service = CategoryService(store)
    return {"success": True, "data": service.get_category(category_id)}


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
    status_code=201,
)
def create_category(request: CategoryCreate, store: WorkbookStore = Depends(get_store)):
    service = CategoryService(store)
    return {"success": True, "data": service.create_category(request.model_dump())}


@router.put(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    response_model_exclude_none=True,
)
def update_category(
    category_id: str,
    request: CategoryUpdate,
    store: WorkbookStore = Depends(get_store),
):
    service = CategoryService(store)
    category = service.update_category(
        category_id, request.model_dump(exclude_unset=True, by_alias=True)
    )
    return {"success": True, "data": category}


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: str, store: WorkbookStore = Depends(get_store)):
    service = CategoryService(store)
    service.delete_category(category_id)
    return {"success": True, "message": "Category deleted successfully"}
