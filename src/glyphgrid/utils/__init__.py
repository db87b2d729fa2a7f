"""Utility functions for glyphgrid.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics
"""

from glyphgrid.utils.logging import RenderStats, configure_logging, get_logger

__all__ = [
    "RenderStats",
    "configure_logging",
    "get_logger",
]
