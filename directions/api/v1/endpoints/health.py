from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, status

from directions.core.config import settings
from directions.schemas.health import HealthCheckResponse
from directions.services.directions_service import directions_service

router = APIRouter()


@router.get("/health")
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint that verifies the directions API is reachable.

    Returns 200 if the upstream API is healthy, 503 otherwise.
    """
    directions_service_health = await directions_service.health_check()

    response = HealthCheckResponse(
        service="directions-gateway",
        version=settings.VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        healthy=directions_service_health.healthy,
        directions_service=directions_service_health,
    )

    if response.healthy:
        return response
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=response.model_dump()
    )
