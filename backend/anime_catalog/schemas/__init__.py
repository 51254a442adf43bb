"""Pydantic schemas for request/response validation."""
from anime_catalog.schemas.anime import (
    REQUIRED_FIELDS,
    AnimeCollection,
    AnimeDeletedResponse,
    AnimeDocument,
    AnimeEntry,
    AnimesCreatedResponse,
    AnimeUpdatedResponse,
)
from anime_catalog.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "REQUIRED_FIELDS",
    "AnimeCollection",
    "AnimeDeletedResponse",
    "AnimeDocument",
    "AnimeEntry",
    "AnimesCreatedResponse",
    "AnimeUpdatedResponse",
    "ErrorResponse",
    "HealthResponse",
]
