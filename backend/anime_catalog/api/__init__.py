"""API routes."""
from fastapi import APIRouter

from anime_catalog.api.animes import router as animes_router

api_router = APIRouter(prefix="/api")
api_router.include_router(animes_router)

__all__ = ["api_router"]
