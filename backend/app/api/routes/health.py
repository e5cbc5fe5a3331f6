"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 {"status": "healthy"} if the process is up
    - Never calls ViaCEP or WeatherAPI (an upstream outage must not restart the container)
"""

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {"status": "healthy"}
