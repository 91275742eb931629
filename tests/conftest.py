"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides isolated settings, stores, clients and admin header fixtures.
Every test gets its own temporary data file.

==============================================================================
"""

from pathlib import Path
from typing import Dict, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from perfume_catalog.catalog import CatalogStore, SnapshotStorage
from perfume_catalog.config import Settings
from perfume_catalog.main import Application


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "elegance2024"


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Location of the catalog snapshot for this test."""
    return tmp_path / "perfumes.json"


@pytest.fixture
def settings(data_file: Path) -> Settings:
    """File-backed settings isolated from the environment's .env file."""
    return Settings(
        _env_file=None,
        storage_backend="file",
        data_file=str(data_file),
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def memory_settings() -> Settings:
    """In-memory settings."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
    )


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def storage(data_file: Path) -> SnapshotStorage:
    return SnapshotStorage(data_file)


@pytest.fixture
def store(storage: SnapshotStorage) -> CatalogStore:
    """Loaded file-backed store."""
    catalog = CatalogStore(storage)
    catalog.load()
    return catalog


@pytest.fixture
def memory_store() -> CatalogStore:
    """Loaded in-memory store."""
    catalog = CatalogStore()
    catalog.load()
    return catalog


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return Application(settings).app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client for the file-backed application (runs startup)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def memory_client(memory_settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for the in-memory application."""
    with TestClient(Application(memory_settings).app) as test_client:
        yield test_client


# ============================================================================
# HEADER FIXTURES
# ============================================================================

@pytest.fixture
def admin_headers() -> Dict[str, str]:
    """Headers accepted by the admin guard."""
    return {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}


@pytest.fixture
def new_perfume() -> Dict:
    """A valid create payload."""
    return {
        "name": "Oud Wood",
        "brand": "Tom Ford",
        "description": "Smoky oud with sandalwood and vetiver.",
        "price": 310000,
        "originalPrice": 390000,
        "image": "https://example.com/oud-wood.jpg",
        "badge": "New",
    }
