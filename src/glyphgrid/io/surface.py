"""Drawing surfaces.

ImageSurface draws glyph regions onto a Pillow image. RecordingSurface
keeps the calls it receives, which is useful for inspecting a layout
without pixels.
"""

from dataclasses import dataclass
from typing import Any

from PIL import Image

from glyphgrid.domain.layout import CellRect
from glyphgrid.io.texture import FontTexture, recolor_image


def _as_image(source: Any) -> Image.Image:
    if isinstance(source, FontTexture):
        return source.image
    return source


class ImageSurface:
    """Surface backed by an RGBA Pillow image.

    Regions are composited pixel for pixel without smoothing. Parts of a source region outside
    the texture read as transparent and parts of the destination outside
    the image are clipped, so out-of-range glyphs draw nothing.
    """

    def __init__(self, image: Image.Image) -> None:
        self.image = image

    @classmethod
    def blank(
        cls, width: int, height: int, background: str | None = None
    ) -> "ImageSurface":
        """Create a surface with a transparent or solid background."""
        color = background if background is not None else (0, 0, 0, 0)
        return cls(Image.new("RGBA", (width, height), color))

    def draw_region(
        self, source: Any, rect: CellRect, dest_x: int, dest_y: int
    ) -> None:
        """Composite a rectangular region of source over (dest_x, dest_y).

        Pixels are blended source-over, so partly transparent glyph pixels
        keep their own alpha on a transparent surface.
        """
        if rect.width <= 0 or rect.height <= 0:
            return
        region = _as_image(source).crop(rect.to_box())
        if region.mode != "RGBA":
            region = region.convert("RGBA")

        # alpha_composite only accepts non-negative destinations
        skip_x = max(0, -dest_x)
        skip_y = max(0, -dest_y)
        if skip_x >= region.width or skip_y >= region.height:
            return
        self.image.alpha_composite(
            region, (max(0, dest_x), max(0, dest_y)), (skip_x, skip_y)
        )

    def recolor(self, source: Any, color: str) -> Any:
        """Recolor a texture, using the texture's cache when available."""
        if isinstance(source, FontTexture):
            return source.colored(color)
        return recolor_image(source, color)


@dataclass(frozen=True)
class RecordedDraw:
    """A draw_region call captured by RecordingSurface."""

    source: Any
    rect: CellRect
    dest_x: int
    dest_y: int


class RecordingSurface:
    """Surface that records draw calls instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[RecordedDraw] = []

    def draw_region(
        self, source: Any, rect: CellRect, dest_x: int, dest_y: int
    ) -> None:
        self.calls.append(RecordedDraw(source, rect, dest_x, dest_y))

    def recolor(self, source: Any, color: str) -> Any:
        return (source, color)
