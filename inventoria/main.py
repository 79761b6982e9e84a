from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from inventoria.core.app_config import AppConfig
from inventoria.core.config import settings
from inventoria.core.database import WorkbookStore
from inventoria.middleware.error_handler import register_exception_handlers
from inventoria.middleware.logging import configure_logging

from inventoria.api import media
from inventoria.api.v1 import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting Inventoria API...")

    app_config = AppConfig.load(settings.config_file, settings)
    store = WorkbookStore(app_config)
    if store.initialize():
        store.ensure_media_dir()

    app.state.app_config = app_config
    app.state.store = store
    logger.info(f"Data file: {store.path}")

    yield

    logger.info("Stopping Inventoria API...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api")
app.include_router(media.router)


@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API", "version": settings.VERSION, "docs": "/docs"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def run():
    import uvicorn

    uvicorn.run(
        "inventoria.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
