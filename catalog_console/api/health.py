"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from catalog_console.catalog.product_catalog import get_product_catalog

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
    from catalog_console.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="catalog-console-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> dict[str, str | int]:
    """Check if service is ready to accept requests.

    Returns:
        Readiness status and the number of selectable products.
    """
    return {"status": "ready", "product_count": len(get_product_catalog())}
