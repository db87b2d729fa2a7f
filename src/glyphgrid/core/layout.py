"""Glyph cell resolution.

Maps a character code to the rectangle of the font texture holding its
glyph. Glyphs are packed row by row starting at start_char_code in cell
(0, 0). The number of glyphs per row is the texture width floor-divided by
the glyph width, so a partial last column is never used for glyphs.
"""

from glyphgrid.domain.layout import CellRect
from glyphgrid.domain.metrics import FontMetrics


def columns_per_row(texture_width: int, glyph_width: int) -> int:
    """Number of whole glyph cells in one texture row.

    Args:
        texture_width: Texture width in pixels
        glyph_width: Glyph cell width in pixels

    Returns:
        Whole cells per row, 0 while glyph_width is not positive
    """
    if glyph_width <= 0:
        return 0
    return texture_width // glyph_width


def glyph_cell(metrics: FontMetrics, char_code: int, texture_width: int) -> CellRect:
    """Resolve the texture cell holding a glyph.

    Codes before start_char_code or past the last glyph resolve to cells
    outside the texture. They are not rejected here; the drawing surface
    decides what an out-of-range source region draws.

    Args:
        metrics: Font metrics
        char_code: Character code to resolve
        texture_width: Texture width in pixels

    Returns:
        Source rectangle of the glyph (degenerate (0, 0) origin when the
        texture holds no whole column)
    """
    width = metrics.glyph_width
    height = metrics.glyph_height
    per_row = columns_per_row(texture_width, width)

    if per_row == 0:
        return CellRect(0, 0, width, height)

    index = char_code - metrics.start_char_code
    row, column = divmod(index, per_row)
    return CellRect(column * width, row * height, width, height)
