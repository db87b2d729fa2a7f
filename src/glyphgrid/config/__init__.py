"""Configuration management for glyphgrid.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, editor snapshots or defaults.

Key classes:
- PreviewConfig: Preview rendering settings (colors, padding, stroke)
- LoggingConfig: Logging settings
- GlyphGridSettings: Main application settings
"""

from glyphgrid.config.settings import (
    GlyphGridSettings,
    LoggingConfig,
    PreviewConfig,
    get_default_settings,
)

__all__ = [
    "GlyphGridSettings",
    "LoggingConfig",
    "PreviewConfig",
    "get_default_settings",
]
