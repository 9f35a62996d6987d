"""Utility functions for glyphsheet.

This module provides logging setup and configuration.
"""

from glyphsheet.utils.logging import configure_from_settings, configure_logging

__all__ = [
    "configure_from_settings",
    "configure_logging",
]
