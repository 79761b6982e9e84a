"""
API v1 routes
"""

from fastapi import APIRouter
from inventoria.api.v1 import (
    products,
    categories,
    storage,
    codes,
    settings,
)
from inventoria.schemas.common import HealthResponse

api_router = APIRouter()

# Inclure tous les routers
api_router.include_router(products.router)
api_router.include_router(categories.router)
api_router.include_router(storage.router)
api_router.include_router(codes.router)
api_router.include_router(settings.router)


@api_router.get("/health", response_model=HealthResponse, tags=["Health"])
def health_check():
    return {"status": "ok"}


__all__ = ["api_router"]
