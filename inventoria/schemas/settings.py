from pydantic import Field
from typing import Optional

from inventoria.schemas.common import CamelModel


class AppSettingsResponse(CamelModel):
    app_name: str


class AppSettingsUpdate(CamelModel):
    app_name: Optional[str] = Field(None, max_length=100)


class DatabasePathRequest(CamelModel):
    database_path: Optional[str] = None


class SettingsResponse(CamelModel):
    database_path: Optional[str] = None
    resolved_database_path: str
    media_directory: str
    app_settings: AppSettingsResponse


class DatabaseLocationResponse(CamelModel):
    folder: str
    database_path: str
    exists: bool
