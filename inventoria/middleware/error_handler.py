from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from inventoria.utils.exceptions import ArtifactGenerationError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "message": message}
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location)
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        logger.error(f"HTTP Exception {exc.status_code}: {exc.detail}")
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_response(
        status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc)
    )


async def artifact_exception_handler(request: Request, exc: ArtifactGenerationError):
    logger.error(f"Code generation failed: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def global_exception_handler(request: Request, exc: Exception):
    """Gestionnaire global d'erreurs"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred on the server.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ArtifactGenerationError, artifact_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
