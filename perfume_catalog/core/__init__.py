"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException class and error factory functions
- security: Credential verification for admin operations
- dependencies: FastAPI dependency injection functions

Usage:
------
    from perfume_catalog.core import AppException, require_admin

    from perfume_catalog.core import exceptions
    raise exceptions.unauthorized()

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .security import (
    AdminCredentials,
    CredentialVerifier,
    StaticCredentialVerifier,
)
from .dependencies import (
    get_store,
    get_verifier,
    require_admin,
)

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Security
    "AdminCredentials",
    "CredentialVerifier",
    "StaticCredentialVerifier",
    # Dependencies
    "get_store",
    "get_verifier",
    "require_admin",
]
