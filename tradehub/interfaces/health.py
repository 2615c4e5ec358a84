"""
Liveness endpoint for TradeHub.

GET /api/health is the one route outside the bearer guard and the
auth rate limit; load balancers and the dashboard's status badge poll it.
"""

from fastapi import APIRouter

from tradehub.core.config import settings
from tradehub.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service status",
    description="Report that the API is up and which release is deployed.",
)
def get_health() -> HealthResponse:
    return HealthResponse(status="ok", version=settings.version)
