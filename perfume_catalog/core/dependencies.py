"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog store and the admin guard.

The store and the credential verifier are created once at startup and
kept on ``app.state``; handlers receive them through these dependencies
instead of reaching for module globals.

Dependency Hierarchy:
--------------------
    get_store()          get_verifier()
                               │
                       ┌───────▼───────┐
                       │ require_admin │  (username / password headers)
                       └───────────────┘

Usage Examples:
--------------
    @router.post("/perfumes")
    async def create_perfume(
        admin: AdminCredentials = Depends(require_admin),
        store: CatalogStore = Depends(get_store),
    ):
        ...

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header, Request

from perfume_catalog.catalog import CatalogStore
from perfume_catalog.core import exceptions
from perfume_catalog.core.security import AdminCredentials, CredentialVerifier


# Module logger
logger = logging.getLogger(__name__)


def get_store(request: Request) -> CatalogStore:
    """
    FastAPI dependency that provides the application's catalog store.

    Raises:
        AppException: If the application has not finished starting up
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise exceptions.internal_error("Perfume catalog not loaded")
    return store


def get_verifier(request: Request) -> CredentialVerifier:
    """FastAPI dependency that provides the admin credential verifier."""
    verifier = getattr(request.app.state, "verifier", None)
    if verifier is None:
        raise exceptions.internal_error("Credential verifier not configured")
    return verifier


async def require_admin(
    request: Request,
    username: Optional[str] = Header(None, alias="username"),
    password: Optional[str] = Header(None, alias="password"),
    verifier: CredentialVerifier = Depends(get_verifier)
) -> AdminCredentials:
    """
    FastAPI dependency gating catalog writes.

    Compares the ``username`` and ``password`` request headers against the
    configured verifier before the handler or request body is touched.

    Returns:
        The accepted credentials

    Raises:
        AppException: UNAUTHORIZED if either header is missing or wrong
    """
    credentials = AdminCredentials(username=username, password=password)

    if not verifier.verify(credentials):
        client = request.client.host if request.client else "unknown"
        logger.warning(
            f"Rejected admin request {request.method} {request.url.path} from {client}"
        )
        raise exceptions.unauthorized()

    return credentials
