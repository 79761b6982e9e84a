from fastapi import Request

from inventoria.core.app_config import AppConfig
from inventoria.core.database import WorkbookStore


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.app_config


def get_store(request: Request) -> WorkbookStore:
    return request.app.state.store
