"""Health check endpoints.

Provides endpoints for monitoring service health and store size.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from product_catalog.api.dependencies import get_catalog
from product_catalog.api.schemas import HealthResponse, StatsResponse
from product_catalog.catalog import CatalogService
from product_catalog.infrastructure.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.api_version,
    )


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    catalog: Annotated[CatalogService, Depends(get_catalog)],
) -> StatsResponse:
    """Get store statistics."""
    return StatsResponse(**catalog.stats())
