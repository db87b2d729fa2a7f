"""Domain models for glyphgrid.

This module contains the domain models describing bitmap fonts and their
layout. Models are independent of Pillow so the layout engine can be used
and tested without any rendering surface.

Key classes:
- FontMetrics: Glyph cell size, line height and per-glyph overrides
- CellRect: A rectangular region of the font texture
- DrawCall: One positioned glyph copy emitted by the renderer
- TextExtent: Pixel size of measured text
- EditorSession: Live state of an editing session
"""

from glyphgrid.domain.layout import CellRect, DrawCall, TextExtent
from glyphgrid.domain.metrics import (
    FontMetrics,
    normalize_glyph_key,
    normalize_glyph_keys,
    set_override,
)
from glyphgrid.domain.session import EditorSession

__all__: list[str] = [
    "CellRect",
    "DrawCall",
    "EditorSession",
    "FontMetrics",
    "TextExtent",
    "normalize_glyph_key",
    "normalize_glyph_keys",
    "set_override",
]
