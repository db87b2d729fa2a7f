"""Glyphgrid - Author and preview monospaced-cell bitmap fonts.

Glyphgrid defines a pixel font from a texture image laid out as a grid of
fixed-size cells plus a table of per-glyph metrics (advance widths, x/y
offsets). It measures, wraps and renders preview text with that font.

Example:
    $ glyphgrid preview font.png font.json "Pixel fonts" -o preview.png

This will render "Pixel fonts" with the font described by font.json and
save the result as preview.png.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
