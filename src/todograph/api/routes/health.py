"""Health check router for the liveness endpoint."""

from fastapi import APIRouter

from todograph.api.models import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """Return liveness status.

    Returns:
        A HealthResponse with status "ok".
    """
    return HealthResponse(status="ok")
