"""
==============================================================================
Health Check Endpoints
==============================================================================

Service status endpoints for monitoring and orchestration.

==============================================================================
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from perfume_catalog.catalog import CatalogStore
from perfume_catalog.core.dependencies import get_store
from perfume_catalog.schemas import HealthResponse


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def get_health(self) -> HealthResponse:
        """Get current status, including data file presence for the file backend."""
        response = HealthResponse(
            timestamp=datetime.now(timezone.utc).isoformat(),
            storage="file" if self._store.is_persistent else "memory",
            perfumes_count=len(self._store),
        )

        if self._store.is_persistent:
            response.has_data_file = self._store.storage.exists
            response.data_file = str(self._store.storage.path)

        return response


@router.get("", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check(store: CatalogStore = Depends(get_store)):
    """
    Health check endpoint.

    Returns status, timestamp and catalog size.
    """
    controller = HealthController(store)
    return controller.get_health()


@router.get("/ready")
async def readiness_check(store: CatalogStore = Depends(get_store)):
    """Readiness check reporting the loaded catalog size; 500 until the catalog is loaded."""
    return {"ready": True, "perfumesCount": len(store)}


@router.get("/live")
async def liveness_check():
    """Liveness check for container orchestration."""
    return {"alive": True}
