import logging
from logging.config import dictConfig
from pydantic import BaseModel
from typing import Dict, Optional


class LogConfig(BaseModel):
    """Configuration de journalisation pour l'application"""

    LOGGER_NAME: str = "inventoria"
    LOG_FORMAT: str = "%(levelprefix)s | %(asctime)s | %(name)s | %(funcName)s | %(lineno)d | %(message)s"
    LOG_LEVEL: str = "INFO"

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: Dict = {}
    handlers: Dict = {}
    loggers: Dict = {}

    def model_post_init(self, __context) -> None:
        self.formatters = {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": self.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        }
        self.handlers = {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "level": self.LOG_LEVEL,
            },
        }
        self.loggers = {
            self.LOGGER_NAME: {
                "handlers": ["default"],
                "level": self.LOG_LEVEL,
                "propagate": False,
            },
            "uvicorn": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "uvicorn.error": {"level": "INFO", "propagate": False},
            "uvicorn.access": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
        }


def configure_logging(level: Optional[str] = None):
    """Applique la configuration de journalisation"""
    config = LogConfig(LOG_LEVEL=level.upper()) if level else LogConfig()
    dictConfig(
        config.model_dump(
            include={"version", "disable_existing_loggers", "formatters", "handlers", "loggers"}
        )
    )
    logging.getLogger(config.LOGGER_NAME).debug(f"Logging configured at {config.LOG_LEVEL}")
