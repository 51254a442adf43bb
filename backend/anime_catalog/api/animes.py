"""Anime catalog API routes."""
from typing import Any, List, Union

from fastapi import APIRouter, Body, Depends, status

from anime_catalog.dependencies import get_catalog_service
from anime_catalog.schemas.anime import (
    AnimeCollection,
    AnimeDeletedResponse,
    AnimeDocument,
    AnimeEntry,
    AnimesCreatedResponse,
    AnimeUpdatedResponse,
)
from anime_catalog.schemas.common import ErrorResponse
from anime_catalog.services.anime_service import CatalogService

router = APIRouter(prefix="/animes", tags=["Animes"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Anime not found"}}
STORAGE_ERROR = {500: {"model": ErrorResponse, "description": "Storage read/parse/write error"}}


@router.get("/nombre/{nombre}", responses={**NOT_FOUND, **STORAGE_ERROR})
async def get_anime_by_name(
    nombre: str,
    service: CatalogService = Depends(get_catalog_service),
) -> AnimeDocument:
    """Get the first anime whose name matches, ignoring case."""
    return await service.get_by_name(nombre)


@router.get("/{anime_id}", responses={**NOT_FOUND, **STORAGE_ERROR})
async def get_anime(
    anime_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> AnimeDocument:
    """Get an anime by ID."""
    return await service.get_by_id(anime_id)


@router.get("", responses=STORAGE_ERROR)
async def list_animes(
    service: CatalogService = Depends(get_catalog_service),
) -> AnimeCollection:
    """List the whole catalog keyed by ID."""
    return await service.list_all()


@router.post(
    "",
    response_model=AnimesCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        **STORAGE_ERROR,
    },
)
async def create_animes(
    payload: Union[List[AnimeEntry], AnimeEntry] = Body(...),
    service: CatalogService = Depends(get_catalog_service),
) -> dict:
    """
    Add one anime or a list of animes.

    Every anime needs ``nombre``, ``genero``, ``año`` and ``autor``; if
    one of them is missing in any item, none is added.
    """
    created = await service.create(payload)
    return {"message": "Animes agregados correctamente", "animes": created}


@router.put(
    "/{anime_id}",
    response_model=AnimeUpdatedResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Body is not an object"},
        **NOT_FOUND,
        **STORAGE_ERROR,
    },
)
async def update_anime(
    anime_id: str,
    changes: Any = Body(None),
    service: CatalogService = Depends(get_catalog_service),
) -> dict:
    """Merge the given fields into an existing anime.

    A request without a body changes nothing and returns the entry as is.
    """
    updated = await service.update(anime_id, changes)
    return {"mensaje": "Animé actualizado correctamente", "anime": updated}


@router.delete(
    "/{anime_id}",
    response_model=AnimeDeletedResponse,
    responses={**NOT_FOUND, **STORAGE_ERROR},
)
async def delete_anime(
    anime_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> dict:
    """Delete an anime and renumber the remaining ones from 1."""
    animes = await service.delete(anime_id)
    return {"mensaje": "Animé eliminado y lista reordenada correctamente", "animes": animes}
