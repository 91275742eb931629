"""
==============================================================================
Perfume Catalog Service - Application Entry Point
==============================================================================

FastAPI application with:
- Perfume catalog REST endpoints under /api
- Shared-credential admin guard on writes
- JSON file or in-memory catalog storage
- Health checks and a static landing page

Usage:
------
    # Development
    uvicorn perfume_catalog.main:app --reload --port 3001

    # Production
    PORT=8080 perfume-catalog

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.staticfiles import StaticFiles

from perfume_catalog.api import health
from perfume_catalog.api.router import api_router
from perfume_catalog.catalog import CatalogStore, SnapshotStorage
from perfume_catalog.config import Settings, get_settings
from perfume_catalog.core.exceptions import register_exception_handlers
from perfume_catalog.core.middleware import BodySizeLimitMiddleware
from perfume_catalog.core.security import CredentialVerifier, StaticCredentialVerifier


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog store creation and loading on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        verifier: Optional[CredentialVerifier] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Configuration (defaults to the global settings)
            verifier: Admin credential verifier (defaults to the configured pair)
        """
        self._settings = settings or get_settings()
        self._verifier = verifier or StaticCredentialVerifier.from_settings(self._settings)
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Perfume catalog with admin-gated writes",
            lifespan=self._lifespan,
            docs_url=None if self._settings.is_production else "/docs",
            redoc_url=None if self._settings.is_production else "/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        self._register_routers(app)
        self._register_static(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown()

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        store = self.build_store()
        store.load()

        app.state.store = store
        app.state.verifier = self._verifier

        base_url = f"http://{self._settings.host}:{self._settings.port}"
        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Running on {base_url}")
        logger.info(f"🌐 Frontend: {base_url}/")
        logger.info(f"🧪 API: {base_url}/api")
        logger.info(f"🧴 Perfumes loaded: {len(store)}")
        if store.is_persistent:
            logger.info(f"💾 Data file: {store.storage.path}")
        else:
            logger.info("💾 Storage: in-memory (resets on restart)")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        logger.info("✅ Shutdown complete")

    def build_store(self) -> CatalogStore:
        """Create the catalog store for the configured storage backend."""
        if self._settings.is_persistent:
            return CatalogStore(SnapshotStorage(self._settings.data_path))
        return CatalogStore()

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            BodySizeLimitMiddleware,
            max_body_bytes=self._settings.max_body_bytes,
        )
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def _register_routers(self, app: FastAPI) -> None:
        """Register API routers."""
        app.include_router(api_router)
        app.include_router(health.router)

    def _register_static(self, app: FastAPI) -> None:
        """Mount static assets and the landing page."""
        static_path = self._settings.static_path
        index_path = static_path / "index.html"

        if static_path.is_dir():
            app.mount("/static", StaticFiles(directory=static_path), name="static")
        else:
            logger.warning(f"⚠️ Static directory not found: {static_path}")

        @app.get("/", response_class=HTMLResponse, include_in_schema=False)
        async def root():
            """Serve the landing page."""
            if index_path.is_file():
                return FileResponse(index_path)
            return HTMLResponse(f"<h1>{self._settings.app_name}</h1>")

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

def run() -> None:
    """Run the service with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "perfume_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()
