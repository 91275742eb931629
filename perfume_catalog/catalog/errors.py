"""Catalog domain errors, translated to HTTP errors by the API layer."""


class CatalogError(Exception):
    """Base class for catalog store failures."""


class PerfumeNotFoundError(CatalogError):
    """Raised when no record has the requested id."""

    def __init__(self, perfume_id: str) -> None:
        self.perfume_id = perfume_id
        super().__init__(f"Perfume not found: {perfume_id}")


class PersistenceError(CatalogError):
    """Raised when the catalog snapshot cannot be written."""
