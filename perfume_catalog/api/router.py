"""
==============================================================================
Main API Router
==============================================================================

Combines the catalog routes under the /api prefix.

==============================================================================
"""

from fastapi import APIRouter

from perfume_catalog.api import perfumes


class MainAPIRouter:
    """
    Main API router combining the catalog routes.

    Provides a single entry point for all /api endpoints.
    """

    def __init__(self):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter(prefix="/api")
        self._include_routers()

    def _include_routers(self) -> None:
        self._router.include_router(perfumes.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


api_router = MainAPIRouter().router
