"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from perfume_catalog.config import get_settings, Settings

    settings = get_settings()
    print(settings.port)
    print(settings.data_file)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
