"""API response models for todograph."""

from pydantic import BaseModel

from todograph.models import GetAll


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str


# The snapshot is returned as stored; the domain model serializes as-is.
GetAllResponse = GetAll
