"""
==============================================================================
Catalog Package - Perfume Records
==============================================================================

Perfume catalog with optional JSON snapshot persistence.

Classes:
--------
- Perfume / PerfumeCreate: Pydantic models for records and payloads
- CatalogStore: Ordered collection with create/delete/reset
- SnapshotStorage: Atomic JSON file persistence

==============================================================================
"""

from .errors import CatalogError, PerfumeNotFoundError, PersistenceError
from .models import Perfume, PerfumeCreate
from .seed import DEFAULT_PERFUMES, default_perfumes
from .storage import SnapshotStorage
from .store import CatalogStore

__all__ = [
    "CatalogError",
    "PerfumeNotFoundError",
    "PersistenceError",
    "Perfume",
    "PerfumeCreate",
    "DEFAULT_PERFUMES",
    "default_perfumes",
    "SnapshotStorage",
    "CatalogStore",
]
