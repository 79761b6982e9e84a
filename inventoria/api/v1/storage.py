from fastapi import APIRouter, Depends
from typing import List

from inventoria.core.database import WorkbookStore
from inventoria.core.dependencies import get_store
from inventoria.schemas.common import ApiResponse, MessageResponse
from inventoria.schemas.storage import (
    StorageLocationCreate,
    StorageLocationResponse,
    StorageLocationUpdate,
)
from inventoria.services.storage_service import StorageService

router = APIRouter(prefix="/storage", tags=["Storage"])


@router.get(
    "",
    response_model=ApiResponse[List[StorageLocationResponse]],
    response_model_exclude_none=True,
)
def list_storage_locations(store: WorkbookStore = Depends(get_store)):
    service = StorageService(store)
    return {"success": True, "data": service.list_locations()}


@router.get(
    "/{location_id}",
    response_model=ApiResponse[StorageLocationResponse],
    response_model_exclude_none=True,
)
def get_storage_location(location_id: str, store: WorkbookStore = Depends(get_store)):
    service = StorageService(store)
    return {"success": True, "data": service.get_location(location_id)}


@router.post(
    "",
    response_model=ApiResponse[StorageLocationResponse],
    response_model_exclude_none=True,
    status_code=201,
)
def create_storage_location(
    request: StorageLocationCreate, store: WorkbookStore = Depends(get_store)
):
    service = StorageService(store)
    return {"success": True, "data": service.create_location(request.model_dump())}


@router.put(
    "/{location_id}",
    response_model=ApiResponse[StorageLocationResponse],
    response_model_exclude_none=True,
)
def update_storage_location(
    location_id: str,
    request: StorageLocationUpdate,
    store: WorkbookStore = Depends(get_store),
):
    service = StorageService(store)
    location = service.update_location(
        location_id, request.model_dump(exclude_unset=True, by_alias=True)
    )
    return {"success": True, "data": location}


@router.delete("/{location_id}", response_model=MessageResponse)
def delete_storage_location(location_id: str, store: WorkbookStore = Depends(get_store)):
    service = StorageService(store)
    service.delete_location(location_id)
    return {"success": True, "message": "Storage location deleted successfully"}
