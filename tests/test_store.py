"""
==============================================================================
Catalog Store Tests
==============================================================================

Tests for loading, mutating and persisting the perfume catalog.

==============================================================================
"""

import json
from pathlib import Path

import pytest

from perfume_catalog.catalog import (
    DEFAULT_PERFUMES,
    CatalogStore,
    PerfumeCreate,
    PerfumeNotFoundError,
    PersistenceError,
    SnapshotStorage,
)


class FailingStorage(SnapshotStorage):
    """Storage whose writes always fail."""

    def save(self, records):
        raise PersistenceError("disk full")


def ids(store: CatalogStore):
    return [p.id for p in store.list()]


class TestLoading:
    """Tests for startup loading."""

    def test_memory_store_starts_with_seeds(self, memory_store: CatalogStore):
        assert ids(memory_store) == ["1", "2", "3"]
        assert not memory_store.is_persistent

    def test_missing_snapshot_writes_seeds(self, store: CatalogStore, data_file: Path):
        assert ids(store) == ["1", "2", "3"]
        assert json.loads(data_file.read_text(encoding="utf-8")) == DEFAULT_PERFUMES

    @pytest.mark.parametrize("content", ["", "{not json", "[]", '{"id": "1"}', "42"])
    def test_unusable_snapshot_falls_back_to_seeds(self, data_file: Path, content: str):
        data_file.write_text(content, encoding="utf-8")
        store = CatalogStore(SnapshotStorage(data_file))
        store.load()
        assert ids(store) == ["1", "2", "3"]
        assert json.loads(data_file.read_text(encoding="utf-8")) == DEFAULT_PERFUMES

    def test_existing_snapshot_is_used(self, data_file: Path):
        records = [{"id": "a", "name": "Santal 33", "price": 120, "originalPrice": None}]
        data_file.write_text(json.dumps(records), encoding="utf-8")
        store = CatalogStore(SnapshotStorage(data_file))
        store.load()
        assert ids(store) == ["a"]
        assert store.get("a").name == "Santal 33"

    def test_entries_without_string_id_and_duplicates_are_skipped(self, data_file: Path):
        records = [
            {"id": "a", "price": 1},
            {"name": "no id"},
            {"id": 5, "price": 2},
            {"id": "a", "price": 2},
            "not a record",
            {"id": "c", "price": 3, "stock": 7},
        ]
        data_file.write_text(json.dumps(records), encoding="utf-8")
        store = CatalogStore(SnapshotStorage(data_file))
        store.load()
        assert ids(store) == ["a", "c"]
        assert store.get("a").price == 1
        assert store.get("c").to_dict()["stock"] == 7

    def test_loose_records_are_kept_as_stored(self, data_file: Path):
        """Test older snapshots with null prices or non-string fields survive a restart."""
        records = [
            {"id": "a", "name": 5, "price": 1},
            {"id": "b", "name": "ok", "price": None},
        ]
        original = json.dumps(records, indent=2)
        data_file.write_text(original, encoding="utf-8")

        store = CatalogStore(SnapshotStorage(data_file))
        store.load()

        assert ids(store) == ["a", "b"]
        assert store.get("a").name == 5
        assert store.get("b").price is None
        assert data_file.read_text(encoding="utf-8") == original

    def test_snapshot_with_no_usable_entries_is_not_overwritten(self, data_file: Path):
        original = json.dumps([{"name": "no id"}, "junk"])
        data_file.write_text(original, encoding="utf-8")

        store = CatalogStore(SnapshotStorage(data_file))
        store.load()

        assert len(store) == 0
        assert data_file.read_text(encoding="utf-8") == original

    def test_seed_write_failure_does_not_stop_load(self, data_file: Path):
        store = CatalogStore(FailingStorage(data_file))
        store.load()
        assert len(store) == 3


class TestCreate:
    """Tests for adding perfumes."""

    def test_create_appends(self, memory_store: CatalogStore):
        perfume = memory_store.create(PerfumeCreate(name="Oud Wood", price=310000))
        assert ids(memory_store) == ["1", "2", "3", perfume.id]
        assert memory_store.get(perfume.id) == perfume

    def test_create_regenerates_colliding_ids(self):
        generated = iter(["1", "2", "fresh"])
        store = CatalogStore(id_factory=lambda: next(generated))
        store.load()
        assert store.create(PerfumeCreate(price=1)).id == "fresh"

    def test_create_coerces_fields(self, memory_store: CatalogStore):
        payload = PerfumeCreate.model_validate(
            {"price": "12.5", "originalPrice": 0, "badge": ""}
        )
        perfume = memory_store.create(payload)
        assert perfume.price == 12.5
        assert perfume.original_price is None
        assert perfume.badge is None

    def test_create_persists(self, store: CatalogStore, data_file: Path):
        perfume = store.create(PerfumeCreate(name="Oud Wood", price=310000, originalPrice=390000))
        saved = json.loads(data_file.read_text(encoding="utf-8"))
        assert saved[-1] == perfume.to_dict()
        assert saved[-1]["originalPrice"] == 390000

    def test_create_rolls_back_on_write_failure(self, data_file: Path):
        store = CatalogStore(FailingStorage(data_file))
        store.load()
        with pytest.raises(PersistenceError):
            store.create(PerfumeCreate(price=1))
        assert ids(store) == ["1", "2", "3"]


class TestDelete:
    """Tests for removing perfumes."""

    def test_delete_removes_one(self, store: CatalogStore, data_file: Path):
        removed = store.delete("2")
        assert removed.name == "No. 5 Parfum"
        assert ids(store) == ["1", "3"]
        assert [p["id"] for p in json.loads(data_file.read_text(encoding="utf-8"))] == ["1", "3"]

    def test_delete_missing_leaves_catalog(self, store: CatalogStore):
        with pytest.raises(PerfumeNotFoundError) as excinfo:
            store.delete("missing")
        assert excinfo.value.perfume_id == "missing"
        assert ids(store) == ["1", "2", "3"]

    def test_delete_rolls_back_on_write_failure(self, data_file: Path):
        store = CatalogStore(FailingStorage(data_file))
        store.load()
        with pytest.raises(PersistenceError):
            store.delete("1")
        assert ids(store) == ["1", "2", "3"]


class TestReset:
    """Tests for restoring the seed set."""

    def test_reset_restores_seeds(self, store: CatalogStore, data_file: Path):
        store.create(PerfumeCreate(price=1))
        store.delete("1")
        store.reset()
        assert [p.to_dict() for p in store.list()] == DEFAULT_PERFUMES
        assert json.loads(data_file.read_text(encoding="utf-8")) == DEFAULT_PERFUMES

    def test_reset_rolls_back_on_write_failure(self, memory_store: CatalogStore, data_file: Path):
        memory_store.delete("1")
        memory_store._storage = FailingStorage(data_file)
        with pytest.raises(PersistenceError):
            memory_store.reset()
        assert ids(memory_store) == ["2", "3"]


class TestQueries:
    """Tests for read access."""

    def test_list_returns_copy(self, memory_store: CatalogStore):
        perfumes = memory_store.list()
        perfumes.clear()
        assert len(memory_store) == 3

    def test_round_trip_through_snapshot(self, store: CatalogStore, data_file: Path):
        store.create(PerfumeCreate(name="Oud Wood", price=99.9, badge="New"))
        store.delete("1")

        reloaded = CatalogStore(SnapshotStorage(data_file))
        reloaded.load()

        assert [p.to_dict() for p in reloaded.list()] == [p.to_dict() for p in store.list()]
