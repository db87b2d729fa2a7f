"""Text rendering orchestration.

The renderer walks text with a cursor and issues one draw call per
character against a drawing surface. Pixel copying, recoloring and
clipping are the surface's job; nothing here inspects pixels.

The texture must be fully decoded before rendering. No readiness check
is made.
"""

from collections.abc import Iterator
from typing import Any, Protocol

from glyphgrid.core.layout import glyph_cell
from glyphgrid.core.measure import LINE_BREAK
from glyphgrid.domain.layout import CellRect, DrawCall
from glyphgrid.domain.metrics import FontMetrics

# (mask bit, dx, dy) for each 1px stroke direction, clockwise from east
STROKE_OFFSETS: list[tuple[int, int, int]] = [
    (1, 1, 0),
    (2, 1, 1),
    (4, 0, 1),
    (8, -1, 1),
    (16, -1, 0),
    (32, -1, -1),
    (64, 0, -1),
    (128, 1, -1),
]


class Texture(Protocol):
    """A decoded font texture."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


class Surface(Protocol):
    """Drawing surface the renderer delegates pixel work to."""

    def draw_region(
        self, source: Any, rect: CellRect, dest_x: int, dest_y: int
    ) -> None:
        """Copy a region of source to the destination at 1:1 pixel scale."""
        ...

    def recolor(self, source: Any, color: str) -> Any:
        """Return source with every opaque pixel filled with color."""
        ...


def layout_text(
    metrics: FontMetrics,
    text: str,
    x: int,
    y: int,
    texture_width: int,
) -> Iterator[DrawCall]:
    """Lay out text as positioned draw calls.

    A draw call is produced for every character, line breaks included.
    After a line break the cursor returns to x and moves down by the line
    height; after any other character it moves right by its advance width.

    Args:
        metrics: Font metrics
        text: Text to lay out
        x: Origin x of the first line
        y: Origin y of the first line
        texture_width: Width of the font texture in pixels

    Yields:
        DrawCall for each character in order
    """
    tx = x
    ty = y

    for char in text:
        code = ord(char)
        yield DrawCall(
            char=char,
            code=code,
            source=glyph_cell(metrics, code, texture_width),
            dest_x=tx + metrics.x_offset(code),
            dest_y=ty + metrics.y_offset(code),
        )

        if char == LINE_BREAK:
            tx = x
            ty += metrics.line_height
        else:
            tx += metrics.advance(code)


def render_text(
    surface: Surface,
    texture: Texture,
    metrics: FontMetrics,
    text: str,
    x: int,
    y: int,
    color: str | None = None,
) -> int:
    """Render text onto a surface.

    Args:
        surface: Surface receiving the draw calls
        texture: Decoded font texture
        metrics: Font metrics
        text: Text to render
        x: Origin x
        y: Origin y
        color: Glyph color, or None to draw the texture's own colors

    Returns:
        Number of draw calls issued
    """
    source = surface.recolor(texture, color) if color else texture
    count = 0

    for call in layout_text(metrics, text, x, y, texture.width):
        surface.draw_region(source, call.source, call.dest_x, call.dest_y)
        count += 1

    return count


def stroke_offsets(bits: int) -> list[tuple[int, int]]:
    """Select stroke offsets from an 8-bit direction mask.

    Raises:
        ValueError: If bits is outside 0..255
    """
    if not 0 <= bits <= 0xFF:
        raise ValueError(f"Stroke bits must be within 0..255, got {bits}")
    return [(dx, dy) for bit, dx, dy in STROKE_OFFSETS if bits & bit]


def render_stroked(
    surface: Surface,
    texture: Texture,
    metrics: FontMetrics,
    text: str,
    x: int,
    y: int,
    color: str | None,
    stroke_color: str,
    stroke_bits: int,
) -> int:
    """Render outlined text.

    Draws one pass in stroke_color for each direction selected by
    stroke_bits, shifted by 1px, then the text itself at the origin.

    Returns:
        Total number of draw calls issued
    """
    count = 0
    for dx, dy in stroke_offsets(stroke_bits):
        count += render_text(
            surface, texture, metrics, text, x + dx, y + dy, stroke_color
        )
    count += render_text(surface, texture, metrics, text, x, y, color)
    return count
