"""Health check endpoints.

Provides health status for container probes and monitoring.
"""

from fastapi import APIRouter, Request

from product_registry import __version__
from product_registry.config import settings
from product_registry.infra.logging import get_logger
from product_registry.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if service is running.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready(request: Request) -> HealthResponse:
    """Readiness check.

    Verifies:
    - Registry is initialized
    - An authority is bound (creations fail until one is)
    """
    checks: dict[str, bool] = {}

    registry = getattr(request.app.state, "registry", None)
    checks["registry"] = registry is not None
    checks["authority_bound"] = (
        registry is not None and registry.state.authority_contract is not None
    )

    if not checks["authority_bound"]:
        logger.debug("Readiness degraded: no authority bound")

    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )
