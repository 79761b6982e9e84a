"""
User configuration persisted next to the data directory.

Holds the custom backing-file path and the application display name.
The object is loaded once at start-up and handed to whoever needs it.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError
from pydantic.alias_generators import to_camel

from inventoria.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

WORKBOOK_SUFFIXES = (".xlsx", ".xls")


class AppSettings(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    app_name: str = "Inventoria"


class AppConfig(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    database_path: Optional[str] = None
    app_settings: AppSettings = Field(default_factory=AppSettings)

    _path: Optional[Path] = PrivateAttr(default=None)
    _settings: Optional[Settings] = PrivateAttr(default=None)

    @classmethod
    def load(cls, path: Path, settings: Optional[Settings] = None) -> "AppConfig":
        """Charge le fichier de configuration, ou les valeurs par défaut"""
        config = cls()
        path = Path(path)

        if path.exists():
            try:
                config = cls.model_validate(json.loads(path.read_text("utf-8")))
            except (OSError, ValueError, ValidationError) as e:
                logger.error(f"Error loading config {path}: {e}")
                config = cls()

        config._path = path
        config._settings = settings
        return config

    def save(self) -> None:
        if self._path is None:
            return

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(self.model_dump(by_alias=True), indent=2), "utf-8"
            )
        except OSError as e:
            logger.error(f"Error saving config {self._path}: {e}")

    @property
    def settings(self) -> Settings:
        return self._settings or default_settings

    def set_database_path(self, path: Optional[str]) -> Optional[str]:
        """
        Enregistre un chemin personnalisé pour le classeur.
        Un dossier reçoit le nom de fichier par défaut.
        """
        if path is not None and str(path).strip():
            candidate = Path(str(path).strip()).expanduser()
            if candidate.is_dir() or candidate.suffix.lower() not in WORKBOOK_SUFFIXES:
                candidate = candidate / self.settings.DATABASE_FILENAME
            self.database_path = str(candidate)
        else:
            self.database_path = None

        self.save()
        logger.info(f"Database path set to {self.database_path or 'default'}")
        return self.database_path

    def update_app_settings(self, **fields) -> AppSettings:
        self.app_settings = self.app_settings.model_copy(update=fields)
        self.save()
        return self.app_settings

    def resolve_database_path(self) -> Path:
        if self.database_path:
            return Path(self.database_path)
        return self.settings.default_database_path

    def resolve_media_dir(self) -> Path:
        return self.resolve_database_path().parent / self.settings.MEDIA_DIRNAME
