"""Texture, surface and settings I/O for glyphgrid.

This module handles everything that touches files or pixels, keeping the
layout engine free of Pillow and JSON details.

Key responsibilities:
- Load font textures and strip their background color
- Draw glyph regions onto Pillow images
- Read and write font settings (minimal export)
- Save and restore editor snapshots

Key classes:
- FontTexture: Decoded texture with cached recolored variants
- ImageSurface: Pillow-backed drawing surface
- RecordingSurface: Surface that records draw calls
- FontSettings: Persisted font settings model
- Snapshot: Persisted editor session
"""

from glyphgrid.io.settings import (
    FontSettings,
    dumps_font_settings,
    export_font_settings,
    load_font_metrics,
    loads_font_settings,
    parse_font_settings,
    read_font_settings,
    write_font_settings,
)
from glyphgrid.io.snapshot import (
    SNAPSHOT_VERSION,
    Snapshot,
    create_snapshot,
    load_snapshot,
    load_snapshot_or_none,
    restore_snapshot,
    save_snapshot,
)
from glyphgrid.io.surface import ImageSurface, RecordedDraw, RecordingSurface
from glyphgrid.io.texture import (
    FontTexture,
    load_texture,
    recolor_image,
    remove_background_color,
)

__all__ = [
    "SNAPSHOT_VERSION",
    "FontSettings",
    "FontTexture",
    "ImageSurface",
    "RecordedDraw",
    "RecordingSurface",
    "Snapshot",
    "create_snapshot",
    "dumps_font_settings",
    "export_font_settings",
    "load_font_metrics",
    "load_snapshot",
    "load_snapshot_or_none",
    "load_texture",
    "loads_font_settings",
    "parse_font_settings",
    "read_font_settings",
    "recolor_image",
    "remove_background_color",
    "restore_snapshot",
    "save_snapshot",
    "write_font_settings",
]
