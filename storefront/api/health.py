"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront.api.dependencies import CatalogServiceDep
from storefront.domain.exceptions import StoreUnavailableError
from storefront.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="storefront-catalog",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check(service: CatalogServiceDep) -> JSONResponse:
    """Check if the product store is reachable.

    Returns:
        Readiness status; 503 while the store is unreachable.
    """
    try:
        await service.ping()
    except StoreUnavailableError as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "reason": e.message},
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "ready"})
