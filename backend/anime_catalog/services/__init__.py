"""Business logic services."""
from anime_catalog.services.anime_service import CatalogService, iteration_order, renumber

__all__ = [
    "CatalogService",
    "iteration_order",
    "renumber",
]
