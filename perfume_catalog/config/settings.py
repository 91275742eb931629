"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared by the whole application;
tests and embedders may build their own instance and hand it to the
application factory instead.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

Security Considerations:
-----------------------
- The admin credentials are a shared secret compared in plaintext
- Override ADMIN_USERNAME / ADMIN_PASSWORD outside local development

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)

# Bundled landing page and assets
PACKAGE_STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

STORAGE_BACKENDS = {"file", "memory"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        storage_backend: "file" mirrors the catalog to data_file, "memory" does not
        data_file: Path to the persisted catalog snapshot
        admin_username: Shared admin username checked on write requests
        admin_password: Shared admin password checked on write requests
        max_body_bytes: Largest accepted request body
        static_directory: Directory holding the landing page and assets
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings(storage_backend="memory")
        >>> settings.is_persistent
        False
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Perfume Catalog API",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=3001,
        ge=1,
        le=65535,
        description="Server port number"
    )

    max_body_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        description="Largest accepted request body in bytes"
    )

    # =========================================================================
    # STORAGE SETTINGS
    # =========================================================================
    storage_backend: str = Field(
        default="file",
        description="Catalog storage: 'file' (JSON snapshot) or 'memory'"
    )

    data_file: str = Field(
        default="perfumes.json",
        description="Path to the persisted catalog snapshot"
    )

    # =========================================================================
    # ADMIN SETTINGS
    # =========================================================================
    admin_username: str = Field(
        default="admin",
        min_length=1,
        description="Shared admin username"
    )

    admin_password: str = Field(
        default="elegance2024",
        min_length=1,
        description="Shared admin password"
    )

    # =========================================================================
    # STATIC FILES & CORS
    # =========================================================================
    static_directory: str = Field(
        default=str(PACKAGE_STATIC_DIR),
        description="Directory holding the landing page and assets"
    )

    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """Normalize the environment name, falling back to development."""
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, value: str) -> str:
        """
        Validate the storage backend name.

        Raises:
            ValueError: If the backend is not 'file' or 'memory'
        """
        normalized = value.lower().strip()

        if normalized not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unsupported storage backend: {value}. "
                f"Supported: {', '.join(sorted(STORAGE_BACKENDS))}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def is_persistent(self) -> bool:
        """Whether the catalog is mirrored to the data file."""
        return self.storage_backend == "file"

    @property
    def data_path(self) -> Path:
        return Path(self.data_file)

    @property
    def static_path(self) -> Path:
        return Path(self.static_directory)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def ensure_directories(self) -> None:
        """Create the data file's parent directory for the file backend."""
        if self.is_persistent:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug("Data directory created/verified")

    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"storage_backend={self.storage_backend!r}, "
            f"port={self.port})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Global Settings instance
    """
    settings = Settings()
    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
