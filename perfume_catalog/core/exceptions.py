"""
Application Exception Handling

Single AppException class for all HTTP-facing errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Unauthorized", "UNAUTHORIZED", 401)
        raise AppException("Perfume not found", "PERFUME_NOT_FOUND", 404, {"perfume_id": "42"})

    Error Codes:
        Authorization:
            - UNAUTHORIZED (401)

        Catalog:
            - PERFUME_NOT_FOUND (404)
            - INVALID_PERFUME (400)

        Transport:
            - PAYLOAD_TOO_LARGE (413)

        General:
            - PERSISTENCE_FAILED (500)
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PERFUME_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": self.message,
            "code": self.code,
            "timestamp": self.timestamp
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to a JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def unauthorized() -> AppException:
    """Create unauthorized exception."""
    return AppException("Unauthorized", "UNAUTHORIZED", 401)


def perfume_not_found(perfume_id: Optional[str] = None) -> AppException:
    """Create perfume not found exception."""
    details = {"perfume_id": perfume_id} if perfume_id else {}
    return AppException("Perfume not found", "PERFUME_NOT_FOUND", 404, details)


def invalid_perfume(message: str) -> AppException:
    """Create invalid perfume payload exception."""
    return AppException(message, "INVALID_PERFUME", 400)


def payload_too_large(limit: int) -> AppException:
    """Create request body too large exception."""
    return AppException(
        f"Request body exceeds {limit} bytes",
        "PAYLOAD_TOO_LARGE",
        413,
        {"limit": limit}
    )


def persistence_failed(message: str) -> AppException:
    """Create persistence failure exception."""
    return AppException(message, "PERSISTENCE_FAILED", 500)


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
