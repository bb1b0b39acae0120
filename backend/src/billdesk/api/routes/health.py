"""
Health check endpoint.

Provides system health status for monitoring and load balancers.
"""

from fastapi import APIRouter

from billdesk import __version__
from billdesk.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check system health.
    
    Returns the service version for monitoring dashboards and load
    balancer health checks.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        database="configured",  # Would check actual connection in production
    )
