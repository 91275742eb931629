"""
==============================================================================
Schemas Package
==============================================================================

Pydantic response schemas for the API layer. Request payloads live with
the catalog models (perfume_catalog.catalog.models.PerfumeCreate).

==============================================================================
"""

from .common import MessageResponse
from .perfume import HealthResponse, PerfumeCreatedResponse

__all__ = [
    "MessageResponse",
    "HealthResponse",
    "PerfumeCreatedResponse",
]
