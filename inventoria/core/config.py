from pathlib import Path
from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    APP_NAME: str = "Inventoria"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    HOST: str = "127.0.0.1"
    PORT: int = 3000

    DATA_DIR: Path = Path("data")
    CONFIG_FILE: Optional[Path] = None
    DATABASE_FILENAME: str = "data.xlsx"
    MEDIA_DIRNAME: str = "images"

    DEFAULT_BARCODE_TYPE: str = "code128"

    LOG_LEVEL: str = "INFO"

    ALLOWED_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def config_file(self) -> Path:
        return self.CONFIG_FILE or self.DATA_DIR / "config.json"

    @property
    def default_database_path(self) -> Path:
        return self.DATA_DIR / "database" / self.DATABASE_FILENAME


settings = Settings()
