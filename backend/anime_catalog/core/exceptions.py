"""Custom exceptions for the application."""
from typing import Any, Optional

REQUIRED_FIELDS_MESSAGE = "Todos los campos son obligatorios: nombre, genero, año, autor"
UPDATE_BODY_MESSAGE = "El cuerpo de la petición debe ser un animé"
SAVE_CHANGES_MESSAGE = "Error al guardar los cambios en el archivo JSON"


class AppException(Exception):
    """Base application exception."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """No entry matches the requested id or name."""

    status_code = 404

    def __init__(self, field: str, value: Any):
        super().__init__(
            f"No se encontró un animé con el {field}: {value}",
            error_code="NOT_FOUND",
            details={"field": field, "value": value},
        )


class BadRequestError(AppException):
    """An entry in a create batch is missing a required field."""

    status_code = 400

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE):
        super().__init__(message, error_code="BAD_REQUEST")


class StorageError(AppException):
    """Base class for failures of the backing document."""

    status_code = 500


class StorageReadError(StorageError):
    """The storage document could not be read."""

    def __init__(self, message: str = "Error al leer el archivo JSON"):
        super().__init__(message, error_code="STORAGE_READ_ERROR")


class StorageParseError(StorageError):
    """The storage document is not a valid JSON object."""

    def __init__(self, message: str = "Error al parsear el archivo JSON"):
        super().__init__(message, error_code="STORAGE_PARSE_ERROR")


class StorageWriteError(StorageError):
    """The storage document could not be written."""

    def __init__(self, message: str = "Error al escribir en el archivo JSON"):
        super().__init__(message, error_code="STORAGE_WRITE_ERROR")
