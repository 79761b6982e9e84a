from inventoria.core.config import settings, Settings
from inventoria.core.app_config import AppConfig, AppSettings
from inventoria.core.database import WorkbookStore, Record
from inventoria.core.dependencies import get_app_config, get_store

__all__ = [
    "settings",
    "Settings",
    "AppConfig",
    "AppSettings",
    "WorkbookStore",
    "Record",
    "get_app_config",
    "get_store",
]
