"""
==============================================================================
Catalog Store Module
==============================================================================

Owner of the ordered perfume collection.

Features:
---------
- Insertion-ordered list of records, no secondary index
- Optional SnapshotStorage: every mutation rewrites the snapshot
- Mutations are rolled back in memory when the snapshot write fails
- Seed set used when no usable snapshot exists and on reset

Lifecycle:
---------
    store = CatalogStore(SnapshotStorage(Path("perfumes.json")))
    store.load()          # snapshot, or seed set written back
    store.create(payload)
    store.delete("1")
    store.reset()

Without storage the store is purely in-memory and starts from the seed
set on every process start.

==============================================================================
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, List, Optional

from pydantic import ValidationError

from .errors import PerfumeNotFoundError, PersistenceError
from .models import Perfume, PerfumeCreate
from .seed import default_perfumes
from .storage import SnapshotStorage


# Module logger
logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Perfume catalog with optional file persistence.

    Attributes:
        storage: Snapshot storage, or None for the in-memory variant

    Example:
        >>> store = CatalogStore()
        >>> store.load()
        >>> len(store)
        3
        >>> perfume = store.create(PerfumeCreate(name="Oud Wood", price=99))
        >>> store.delete(perfume.id).name
        'Oud Wood'
    """

    def __init__(
        self,
        storage: Optional[SnapshotStorage] = None,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4())
    ) -> None:
        """
        Initialize an empty store. Call load() before serving requests.

        Args:
            storage: Snapshot storage for the persistent variant
            id_factory: Generator for new record ids
        """
        self._storage = storage
        self._id_factory = id_factory
        self._perfumes: List[Perfume] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def storage(self) -> Optional[SnapshotStorage]:
        return self._storage

    @property
    def is_persistent(self) -> bool:
        return self._storage is not None

    @property
    def count(self) -> int:
        return len(self._perfumes)

    def __len__(self) -> int:
        return len(self._perfumes)

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self) -> None:
        """
        Populate the store from the snapshot, falling back to the seed set.

        A missing, unreadable or empty snapshot yields the seed set, which
        is then written back. A failure to write the seeds is logged and
        does not stop startup. A snapshot that parses is never overwritten
        here, even if some of its entries are skipped.
        """
        perfumes = self._read_snapshot()

        if perfumes is not None:
            self._perfumes = perfumes
            logger.info(f"✅ Loaded {len(perfumes)} perfumes from {self._storage.path}")
            return

        self._perfumes = default_perfumes()
        logger.info(f"Initialized catalog with {len(self._perfumes)} default perfumes")

        if self.is_persistent:
            try:
                self._persist()
            except PersistenceError as e:
                logger.error(f"❌ Could not write default perfumes: {e}")

    def reload(self) -> None:
        """Reload the catalog from storage."""
        logger.info("Reloading perfume catalog...")
        self.load()

    def _read_snapshot(self) -> Optional[List[Perfume]]:
        """
        Parse snapshot records, skipping entries without a string id.

        Returns:
            The records, or None when there is no usable snapshot
        """
        if not self.is_persistent:
            return None

        raw = self._storage.load()
        if not raw:
            return None

        perfumes: List[Perfume] = []
        seen_ids = set()

        for index, item in enumerate(raw):
            try:
                perfume = Perfume.model_validate(item)
            except ValidationError as e:
                logger.warning(f"Skipping invalid snapshot entry #{index}: {e.error_count()} errors")
                continue

            if perfume.id in seen_ids:
                logger.warning(f"Skipping duplicate perfume id in snapshot: {perfume.id}")
                continue

            seen_ids.add(perfume.id)
            perfumes.append(perfume)

        return perfumes

    # =========================================================================
    # QUERIES
    # =========================================================================

    def list(self) -> List[Perfume]:
        """Get all perfumes in insertion order."""
        return self._perfumes.copy()

    def get(self, perfume_id: str) -> Optional[Perfume]:
        """Find a perfume by id."""
        for perfume in self._perfumes:
            if perfume.id == perfume_id:
                return perfume
        return None

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def create(self, payload: PerfumeCreate) -> Perfume:
        """
        Append a new perfume with a freshly generated id.

        Args:
            payload: Validated create payload

        Returns:
            The stored perfume

        Raises:
            PersistenceError: If the snapshot write fails (nothing is added)
        """
        perfume = payload.to_perfume(self._new_id())

        previous = self._perfumes
        self._perfumes = previous + [perfume]
        self._commit(previous)

        logger.info(f"Added perfume {perfume.id} ({perfume.name})")
        return perfume

    def delete(self, perfume_id: str) -> Perfume:
        """
        Remove the first perfume with the given id.

        Returns:
            The removed perfume

        Raises:
            PerfumeNotFoundError: If no perfume has this id
            PersistenceError: If the snapshot write fails (nothing is removed)
        """
        for index, perfume in enumerate(self._perfumes):
            if perfume.id == perfume_id:
                break
        else:
            raise PerfumeNotFoundError(perfume_id)

        previous = self._perfumes
        self._perfumes = previous[:index] + previous[index + 1:]
        self._commit(previous)

        logger.info(f"Deleted perfume {perfume_id}")
        return perfume

    def reset(self) -> List[Perfume]:
        """
        Replace the catalog with the seed set.

        Raises:
            PersistenceError: If the snapshot write fails (catalog unchanged)
        """
        previous = self._perfumes
        self._perfumes = default_perfumes()
        self._commit(previous)

        logger.info("Catalog reset to default perfumes")
        return self.list()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _new_id(self) -> str:
        perfume_id = self._id_factory()
        while self.get(perfume_id) is not None:
            perfume_id = self._id_factory()
        return perfume_id

    def _commit(self, previous: List[Perfume]) -> None:
        """Persist the current list, restoring `previous` if the write fails."""
        try:
            self._persist()
        except Exception:
            self._perfumes = previous
            raise

    def _persist(self) -> None:
        if self._storage is None:
            return
        self._storage.save([perfume.to_dict() for perfume in self._perfumes])
