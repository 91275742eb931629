"""
==============================================================================
API Endpoints
==============================================================================

Routers:
--------
- perfumes: Perfume catalog (mounted under /api)
- health: Health check endpoints (mounted at /health)

==============================================================================
"""

from . import health, perfumes

__all__ = ["health", "perfumes"]
