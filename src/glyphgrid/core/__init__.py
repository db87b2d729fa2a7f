"""Core layout engine for glyphgrid.

This module contains the font metrics/layout engine:

- Glyph cell resolution (which texture cell holds a character)
- Text measuring (pixel bounding box of a string)
- Greedy word wrapping to a maximum pixel width
- Rendering orchestration (positioned draw calls against a surface)
- Preview rendering (padding, colors, stroke outlines)

Layout, measuring, wrapping and rendering are synchronous and pure apart
from the draw calls issued against the surface passed in.

Key functions:
- glyph_cell: Resolve the texture rectangle of a glyph
- measure_text: Measure text extents
- wrap_text: Wrap text into lines
- layout_text: Lay out text as draw calls
- render_text: Issue draw calls against a surface
- render_stroked: Render outlined text

Key classes:
- PreviewRenderer: Renders previews to Pillow images
"""

from glyphgrid.core.layout import columns_per_row, glyph_cell
from glyphgrid.core.measure import measure_text
from glyphgrid.core.preview import PreviewRenderer
from glyphgrid.core.render import (
    STROKE_OFFSETS,
    Surface,
    layout_text,
    render_stroked,
    render_text,
    stroke_offsets,
)
from glyphgrid.core.wrap import tokenize, wrap_lines, wrap_text

__all__ = [
    "STROKE_OFFSETS",
    "PreviewRenderer",
    "Surface",
    "columns_per_row",
    "glyph_cell",
    "layout_text",
    "measure_text",
    "render_stroked",
    "render_text",
    "stroke_offsets",
    "tokenize",
    "wrap_lines",
    "wrap_text",
]
