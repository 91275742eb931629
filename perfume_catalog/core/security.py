"""
==============================================================================
Security Module - Admin Credential Verification
==============================================================================

Shared-secret verification for catalog write operations.

This module implements:
- AdminCredentials: the username/password pair carried by a request
- CredentialVerifier: the capability the admin guard depends on
- StaticCredentialVerifier: exact match against one configured pair

The guard in dependencies.py only talks to the CredentialVerifier
protocol, so the static check can be replaced by a real authentication
backend without touching route logic.

==============================================================================
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from perfume_catalog.config import Settings


# Module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminCredentials:
    """Credentials presented by a request; either value may be missing."""

    username: Optional[str] = None
    password: Optional[str] = None

    def __repr__(self) -> str:
        return f"AdminCredentials(username={self.username!r}, password=***)"


class CredentialVerifier(Protocol):
    """Decides whether presented credentials may perform admin operations."""

    def verify(self, credentials: AdminCredentials) -> bool:
        ...


class StaticCredentialVerifier:
    """
    Verifier comparing credentials against a single fixed pair.

    Both values must be present and match exactly (case-sensitive).

    Example:
        >>> verifier = StaticCredentialVerifier("admin", "elegance2024")
        >>> verifier.verify(AdminCredentials("admin", "elegance2024"))
        True
        >>> verifier.verify(AdminCredentials("Admin", "elegance2024"))
        False
    """

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticCredentialVerifier":
        """Build a verifier from the configured admin credentials."""
        return cls(settings.admin_username, settings.admin_password)

    @staticmethod
    def _matches(presented: Optional[str], expected: str) -> bool:
        if presented is None:
            return False
        return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))

    def verify(self, credentials: AdminCredentials) -> bool:
        """
        Check presented credentials against the configured pair.

        Args:
            credentials: Username and password from the request

        Returns:
            True only if both values match exactly
        """
        username_ok = self._matches(credentials.username, self._username)
        password_ok = self._matches(credentials.password, self._password)

        if not (username_ok and password_ok):
            logger.debug(f"Credential check failed for {credentials!r}")
            return False

        return True
