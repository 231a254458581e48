# Hey future me - these are the probes the container orchestrator hits, keep them cheap!
#
# Endpoints:
# - /health/live   → Liveness probe (process is running)
# - /health/ready  → Readiness probe (lifespan startup completed)
#
# The service is stateless (no DB, no workers), so readiness only means "startup ran and
# settings are valid". Upstream availability (Odesli, Spotify) is deliberately NOT checked:
# an Odesli outage must not pull every pod out of the load balancer.
"""Health check endpoints for Docker/Kubernetes probes."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from tunebridge.config import get_settings
from tunebridge.infrastructure.integrations.http_pool import HttpClientPool

router = APIRouter(prefix="/health", tags=["Health"])


class LivenessStatus(BaseModel):
    """Simple liveness probe response."""

    status: str = Field(description="alive or dead")
    timestamp: str = Field(description="ISO timestamp")


class ReadinessStatus(BaseModel):
    """Readiness probe response."""

    status: str = Field(description="ready or not_ready")
    timestamp: str = Field(description="ISO timestamp")
    enrichment_strategy: str = Field(description="Active enrichment strategy")
    http_pool: bool = Field(description="Shared HTTP client initialized")


@router.get("/live", response_model=LivenessStatus)
async def liveness_probe() -> LivenessStatus:
    """Liveness probe for Kubernetes/Docker.

    Returns 200 if the application process is running. No dependency checks.
    """
    return LivenessStatus(
        status="alive",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready", response_model=ReadinessStatus)
async def readiness_probe(request: Request) -> JSONResponse:
    """Readiness probe for Kubernetes/Docker.

    Returns 200 once the lifespan startup has completed, 503 before that.
    """
    is_ready = bool(getattr(request.app.state, "started", False))

    response = ReadinessStatus(
        status="ready" if is_ready else "not_ready",
        timestamp=datetime.now(UTC).isoformat(),
        enrichment_strategy=get_settings().spotify.enrichment_strategy,
        http_pool=HttpClientPool.is_initialized(),
    )

    status_code = status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=response.model_dump(), status_code=status_code)
