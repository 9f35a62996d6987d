"""Configuration management for glyphsheet.

This module provides configuration management using Pydantic models.

Key classes:
- SerializationConfig: Document writing settings
- LoggingConfig: Logging settings
- GlyphsheetSettings: Main library settings
"""

from glyphsheet.config.settings import (
    GlyphsheetSettings,
    LoggingConfig,
    SerializationConfig,
    get_default_settings,
)

__all__ = [
    "GlyphsheetSettings",
    "LoggingConfig",
    "SerializationConfig",
    "get_default_settings",
]
