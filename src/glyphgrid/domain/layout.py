"""Layout value types.

Cell rectangles, draw calls and text extents produced by the layout,
measuring and rendering services.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CellRect:
    """Rectangular region of a texture in pixels.

    Attributes:
        x: Left edge
        y: Top edge
        width: Region width
        height: Region height
    """

    x: int
    y: int
    width: int
    height: int

    def to_box(self) -> tuple[int, int, int, int]:
        """Convert to a (left, top, right, bottom) box."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class DrawCall:
    """One positioned glyph copy issued by the renderer.

    Attributes:
        char: The character being drawn
        code: Character code of the glyph
        source: Cell of the texture holding the glyph
        dest_x: Destination x including the glyph's x offset
        dest_y: Destination y including the glyph's y offset
    """

    char: str
    code: int
    source: CellRect
    dest_x: int
    dest_y: int


@dataclass(frozen=True)
class TextExtent:
    """Pixel bounding box of measured text."""

    width: int
    height: int
