from fastapi import APIRouter, Depends
from typing import Optional

from inventoria.core.app_config import AppConfig
from inventoria.core.database import WorkbookStore
from inventoria.core.dependencies import get_app_config, get_store
from inventoria.schemas.common import ApiResponse
from inventoria.schemas.settings import (
    AppSettingsResponse,
    AppSettingsUpdate,
    DatabaseLocationResponse,
    DatabasePathRequest,
    SettingsResponse,
)
from inventoria.utils.exceptions import StorageException, ValidationException
from inventoria.utils.validators import is_blank

router = APIRouter(prefix="/settings", tags=["Settings"])


def _settings_payload(config: AppConfig, store: WorkbookStore) -> dict:
    return {
        "databasePath": config.database_path,
        "resolvedDatabasePath": str(store.path),
        "mediaDirectory": str(store.media_dir),
        "appSettings": config.app_settings.model_dump(by_alias=True),
    }


def _initialize_or_fail(store: WorkbookStore) -> None:
    if not store.initialize():
        raise StorageException(f"Could not initialize data file at {store.path}")
    store.ensure_media_dir()


def _switch_database_path(
    config: AppConfig, store: WorkbookStore, path: Optional[str]
) -> None:
    """Le chemin précédent est rétabli si le nouveau classeur ne peut être créé"""
    with store.lock:
        previous = config.database_path
        config.set_database_path(path)
        try:
            _initialize_or_fail(store)
        except StorageException:
            config.database_path = previous
            config.save()
            raise


@router.get("", response_model=ApiResponse[SettingsResponse])
def get_settings(
    config: AppConfig = Depends(get_app_config),
    store: WorkbookStore = Depends(get_store),
):
    return {"success": True, "data": _settings_payload(config, store)}


@router.put("/database-path", response_model=ApiResponse[SettingsResponse])
def set_database_path(
    request: DatabasePathRequest,
    config: AppConfig = Depends(get_app_config),
    store: WorkbookStore = Depends(get_store),
):
    """
    Choisit le classeur utilisé comme base.
    Un dossier reçoit data.xlsx ; le fichier est créé s'il n'existe pas.
    """
    if is_blank(request.database_path):
        raise ValidationException("Database path is required")

    _switch_database_path(config, store, request.database_path)
    return {"success": True, "data": _settings_payload(config, store)}


@router.post("/database-path/reset", response_model=ApiResponse[SettingsResponse])
def reset_database_path(
    config: AppConfig = Depends(get_app_config),
    store: WorkbookStore = Depends(get_store),
):
    _switch_database_path(config, store, None)
    return {"success": True, "data": _settings_payload(config, store)}


@router.post("/refresh-database", response_model=ApiResponse[SettingsResponse])
def refresh_database(
    config: AppConfig = Depends(get_app_config),
    store: WorkbookStore = Depends(get_store),
):
    _initialize_or_fail(store)
    return {"success": True, "data": _settings_payload(config, store)}


@router.get("/database-location", response_model=ApiResponse[DatabaseLocationResponse])
def get_database_location(store: WorkbookStore = Depends(get_store)):
    path = store.path
    return {
        "success": True,
        "data": {
            "folder": str(path.parent),
            "databasePath": str(path),
            "exists": path.exists(),
        },
    }


@router.get("/app", response_model=ApiResponse[AppSettingsResponse])
def get_app_settings(config: AppConfig = Depends(get_app_config)):
    return {"success": True, "data": config.app_settings.model_dump(by_alias=True)}


@router.put("/app", response_model=ApiResponse[AppSettingsResponse])
def update_app_settings(
    request: AppSettingsUpdate, config: AppConfig = Depends(get_app_config)
):
    if is_blank(request.app_name):
        raise ValidationException("App name is required")

    app_settings = config.update_app_settings(app_name=request.app_name.strip())
    return {"success": True, "data": app_settings.model_dump(by_alias=True)}
