"""Common Pydantic schemas."""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    app: str
