"""Core utilities."""
from anime_catalog.core.exceptions import (
    AppException,
    BadRequestError,
    NotFoundError,
    StorageError,
    StorageParseError,
    StorageReadError,
    StorageWriteError,
)
from anime_catalog.core.logging import get_logger, setup_logging

__all__ = [
    # Exceptions
    "AppException",
    "BadRequestError",
    "NotFoundError",
    "StorageError",
    "StorageParseError",
    "StorageReadError",
    "StorageWriteError",
    # Logging
    "get_logger",
    "setup_logging",
]
