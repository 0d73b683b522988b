# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# These endpoints do not require authentication.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.dependencies import UserStoreDep

router = APIRouter()

API_VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str
    store: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    store: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request, store: UserStoreDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=request.app.state.settings.ENVIRONMENT,
        version=API_VERSION,
        store=store.backend,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(store: UserStoreDep):
    """
    Readiness check endpoint.

    Checks that the user store's backing storage answers.
    """
    try:
        await store.ping()
        store_status = "healthy"
    except Exception as e:
        store_status = f"unhealthy: {str(e)[:50]}"

    return ReadinessResponse(
        status="ready" if store_status == "healthy" else "degraded",
        store=store_status,
        timestamp=_now(),
    )
