"""
==============================================================================
Perfume Schemas Module
==============================================================================

Response schemas for the perfume endpoints.

==============================================================================
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from perfume_catalog.catalog.models import Perfume


class PerfumeCreatedResponse(BaseModel):
    """Response for a newly added perfume."""
    success: bool = Field(default=True)
    perfume: Perfume


class HealthResponse(BaseModel):
    """Service status snapshot."""
    model_config = ConfigDict(populate_by_name=True)

    status: str = "OK"
    timestamp: str
    storage: str
    perfumes_count: int = Field(alias="perfumesCount")
    has_data_file: Optional[bool] = Field(default=None, alias="hasDataFile")
    data_file: Optional[str] = Field(default=None, alias="dataFile")
