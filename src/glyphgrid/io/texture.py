"""Font texture loading and recoloring.

This module provides FontTexture, a decoded RGBA texture with a cache of
recolored variants, and the loader that turns an image file into one.
"""

from functools import reduce
from pathlib import Path

from PIL import Image, ImageChops, ImageColor

from glyphgrid.exceptions import TextureLoadError

TRANSPARENT = (0, 0, 0, 0)


def remove_background_color(image: Image.Image) -> Image.Image:
    """Make every pixel matching the top-left pixel transparent.

    Font sheets are usually drawn on a solid background; the color at
    (0, 0) is taken to be that background.

    Args:
        image: Source image in any mode

    Returns:
        New RGBA image with background pixels set to (0, 0, 0, 0)
    """
    rgba = image.convert("RGBA")
    if rgba.width == 0 or rgba.height == 0:
        return rgba

    background = Image.new("RGBA", rgba.size, rgba.getpixel((0, 0)))
    difference = ImageChops.difference(rgba, background)
    combined = reduce(ImageChops.lighter, difference.split())
    mask = combined.point(lambda value: 255 if value == 0 else 0)

    result = rgba.copy()
    result.paste(TRANSPARENT, mask=mask)
    return result


def recolor_image(image: Image.Image, color: str) -> Image.Image:
    """Fill every pixel with color, keeping the alpha mask.

    Args:
        image: RGBA source image
        color: Any color string understood by Pillow (e.g. "#ff0000")

    Returns:
        New RGBA image of the same size
    """
    red, green, blue = ImageColor.getrgb(color)[:3]
    filled = Image.new("RGBA", image.size, (red, green, blue, 255))
    filled.putalpha(image.getchannel("A"))
    return filled


class FontTexture:
    """A decoded font texture.

    Recolored variants are created on first use and cached per color.

    Example:
        texture = load_texture(Path("font.png"))
        red = texture.colored("#ff0000")
    """

    def __init__(self, image: Image.Image) -> None:
        """Initialize the texture.

        Args:
            image: Texture image, converted to RGBA if needed
        """
        self.image = image if image.mode == "RGBA" else image.convert("RGBA")
        self._colored: dict[str, Image.Image] = {}

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def colored(self, color: str) -> Image.Image:
        """Get the texture recolored to a solid color."""
        image = self._colored.get(color)
        if image is None:
            image = self._colored[color] = recolor_image(self.image, color)
        return image


def load_texture(path: Path, strip_background: bool = True) -> FontTexture:
    """Load a font texture from an image file.

    Args:
        path: Path to the image (PNG, GIF, BMP, ...)
        strip_background: Make the top-left pixel's color transparent

    Returns:
        Decoded FontTexture

    Raises:
        TextureLoadError: If the file is missing or is not a readable image
    """
    if not path.exists():
        raise TextureLoadError(str(path), "file not found")

    try:
        with Image.open(path) as opened:
            opened.load()
            image = opened.convert("RGBA")
    except (OSError, ValueError) as e:
        raise TextureLoadError(str(path), str(e)) from e

    if strip_background:
        image = remove_background_color(image)

    return FontTexture(image)
