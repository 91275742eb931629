"""
==============================================================================
Perfume Catalog Endpoints
==============================================================================

List, add, delete and reset perfumes. Every write requires the admin
``username`` / ``password`` headers.

==============================================================================
"""

import json
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from perfume_catalog.catalog import (
    CatalogStore,
    Perfume,
    PerfumeCreate,
    PerfumeNotFoundError,
    PersistenceError,
)
from perfume_catalog.core import exceptions
from perfume_catalog.core.dependencies import get_store, require_admin
from perfume_catalog.core.security import AdminCredentials
from perfume_catalog.schemas import MessageResponse, PerfumeCreatedResponse


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(tags=["Perfumes"])


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into one readable message."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


class PerfumeController:
    """Controller for perfume catalog operations."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def list_perfumes(self) -> List[Perfume]:
        """List every perfume in catalog order."""
        return self._store.list()

    def create(self, payload: Any) -> PerfumeCreatedResponse:
        """Validate a raw payload and add the perfume."""
        try:
            data = PerfumeCreate.model_validate(payload)
        except ValidationError as e:
            raise exceptions.invalid_perfume(describe_validation_error(e))

        try:
            perfume = self._store.create(data)
        except PersistenceError as e:
            raise exceptions.persistence_failed(f"Failed to save perfume: {e}")

        return PerfumeCreatedResponse(perfume=perfume)

    def delete(self, perfume_id: str) -> MessageResponse:
        """Delete a perfume by id."""
        try:
            self._store.delete(perfume_id)
        except PerfumeNotFoundError:
            raise exceptions.perfume_not_found(perfume_id)
        except PersistenceError as e:
            raise exceptions.persistence_failed(f"Failed to save changes: {e}")

        return MessageResponse(message="Perfume deleted successfully")

    def reset(self) -> MessageResponse:
        """Restore the default perfumes."""
        try:
            self._store.reset()
        except PersistenceError as e:
            raise exceptions.persistence_failed(f"Failed to reset perfumes: {e}")

        return MessageResponse(message="Reset to default perfumes")


@router.get("/perfumes", response_model=List[Perfume])
async def list_perfumes(store: CatalogStore = Depends(get_store)):
    """Get all perfumes."""
    controller = PerfumeController(store)
    return controller.list_perfumes()


@router.post(
    "/perfumes",
    response_model=PerfumeCreatedResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_perfume(
    request: Request,
    admin: AdminCredentials = Depends(require_admin),
    store: CatalogStore = Depends(get_store)
):
    """
    Add a perfume (admin only).

    The body is read only after the admin check has passed.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise exceptions.invalid_perfume(f"Invalid JSON body: {e}")

    controller = PerfumeController(store)
    return controller.create(payload)


@router.delete("/perfumes/{perfume_id}", response_model=MessageResponse)
async def delete_perfume(
    perfume_id: str,
    admin: AdminCredentials = Depends(require_admin),
    store: CatalogStore = Depends(get_store)
):
    """Delete a perfume (admin only)."""
    controller = PerfumeController(store)
    return controller.delete(perfume_id)


@router.post("/reset", response_model=MessageResponse)
async def reset_perfumes(
    admin: AdminCredentials = Depends(require_admin),
    store: CatalogStore = Depends(get_store)
):
    """Reset the catalog to the default perfumes (admin only)."""
    controller = PerfumeController(store)
    return controller.reset()
