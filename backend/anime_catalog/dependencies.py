from functools import lru_cache

from anime_catalog.config import get_settings
from anime_catalog.services.anime_service import CatalogService
from anime_catalog.storage import CatalogStorage, InMemoryStorage, JsonFileStorage


def build_storage() -> CatalogStorage:
    """
    Build the storage backend selected by ``STORAGE_BACKEND``.
    """
    settings = get_settings()
    if settings.storage_backend == "memory":
        return InMemoryStorage()
    return JsonFileStorage(settings.anime_file)


@lru_cache
def get_catalog_service() -> CatalogService:
    """
    Dependency provider for CatalogService.
    """
    settings = get_settings()
    return CatalogService(build_storage(), serialize_writes=settings.serialize_writes)
