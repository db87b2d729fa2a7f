"""Font metrics domain model.

This module defines FontMetrics, the data model describing how a bitmap
font texture is divided into glyph cells and how far the cursor moves
after each glyph. Override tables are sparse: a missing entry means the
default value, and setters delete entries instead of storing defaults so
exported settings stay minimal.
"""

import copy
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from glyphgrid.exceptions import SettingsError

if TYPE_CHECKING:
    from glyphgrid.io.settings import FontSettings

DEFAULT_START_CHAR_CODE = 32
SPACE_CHAR_CODE = 32


def normalize_glyph_key(key: int | str) -> int:
    """Normalize an override table key to a character code.

    Integer keys are kept. Strings of decimal digits are parsed as codes,
    so "65" and "5" are codes 65 and 5. Any other string maps to the code
    of its first character, so "A" and "Abc" are both code 65.

    Args:
        key: Character code, numeric string or literal character

    Returns:
        Integer character code

    Raises:
        SettingsError: If the key is empty or of an unsupported type
    """
    if isinstance(key, bool):
        raise SettingsError(repr(key), "boolean is not a glyph key")
    if isinstance(key, int):
        return key
    if not isinstance(key, str) or not key:
        raise SettingsError(repr(key), "glyph key must be a code or a character")

    digits = key[1:] if key.startswith("-") else key
    if digits.isdecimal() and digits.isascii():
        return int(key)
    return ord(key[0])


def normalize_glyph_keys(table: Mapping[int | str, int] | None) -> dict[int, int]:
    """Normalize every key of an override table to a character code."""
    if not table:
        return {}
    return {normalize_glyph_key(key): value for key, value in table.items()}


def set_override(
    table: dict[int, int],
    char_code: int,
    value: int | None,
    default: int,
) -> None:
    """Insert, replace or delete an override entry.

    An entry equal to the default is deleted rather than stored.

    Args:
        table: Override table to mutate
        char_code: Character code of the glyph
        value: New value, or None to delete the entry
        default: Implicit value of a missing entry
    """
    if value is None or value == default:
        table.pop(char_code, None)
    else:
        table[char_code] = value


def _minimal(table: Mapping[int, int], default: int) -> dict[int, int]:
    return {code: value for code, value in sorted(table.items()) if value != default}


@dataclass
class FontMetrics:
    """Metrics of a monospaced-cell bitmap font.

    Attributes:
        glyph_width: Width of one grid cell in pixels
        glyph_height: Height of one grid cell in pixels
        line_height: Distance advanced per line break (defaults to glyph_height)
        start_char_code: Character code of the glyph in cell (0, 0)
        codepage: Remaps codes outside the texture's contiguous range
        advance_widths: Per-glyph cursor advance overrides
        x_offsets: Per-glyph horizontal draw offsets
        y_offsets: Per-glyph vertical draw offsets
    """

    glyph_width: int
    glyph_height: int
    line_height: int | None = None
    start_char_code: int = DEFAULT_START_CHAR_CODE
    codepage: dict[int, int] = field(default_factory=dict)
    advance_widths: dict[int, int] = field(default_factory=dict)
    x_offsets: dict[int, int] = field(default_factory=dict)
    y_offsets: dict[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.line_height is None:
            self.line_height = self.glyph_height

    def advance(self, char_code: int) -> int:
        """Get the advance width of a glyph (glyph_width unless overridden)."""
        return self.advance_widths.get(char_code, self.glyph_width)

    def x_offset(self, char_code: int) -> int:
        """Get the horizontal draw offset of a glyph."""
        return self.x_offsets.get(char_code, 0)

    def y_offset(self, char_code: int) -> int:
        """Get the vertical draw offset of a glyph."""
        return self.y_offsets.get(char_code, 0)

    def max_y_offset(self) -> int:
        """Get the largest vertical offset, or 0 without overrides."""
        return max(self.y_offsets.values(), default=0)

    def columns(self, texture_width: int) -> int:
        """Number of grid columns for a texture, counting a partial column.

        Returns 0 while glyph_width is not positive.
        """
        if self.glyph_width <= 0:
            return 0
        return math.ceil(texture_width / self.glyph_width)

    def rows(self, texture_height: int) -> int:
        """Number of grid rows for a texture, counting a partial row.

        Returns 0 while glyph_height is not positive.
        """
        if self.glyph_height <= 0:
            return 0
        return math.ceil(texture_height / self.glyph_height)

    def set_advance_width(self, char_code: int, value: int | None) -> None:
        """Set a glyph's advance width, deleting it when equal to glyph_width."""
        set_override(self.advance_widths, char_code, value, self.glyph_width)

    def set_x_offset(self, char_code: int, value: int | None) -> None:
        """Set a glyph's x offset, deleting it when 0."""
        set_override(self.x_offsets, char_code, value, 0)

    def set_y_offset(self, char_code: int, value: int | None) -> None:
        """Set a glyph's y offset, deleting it when 0."""
        set_override(self.y_offsets, char_code, value, 0)

    def set_codepage(self, char_code: int, target: int | None) -> None:
        """Map a character code onto another code's glyph cell.

        Mapping a code onto itself removes the entry.
        """
        set_override(self.codepage, char_code, target, char_code)

    def copy(self) -> "FontMetrics":
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    @classmethod
    def from_settings(cls, settings: "FontSettings") -> "FontMetrics":
        """Build metrics from validated font settings.

        Table keys have already been normalized to character codes by
        FontSettings validation.

        Args:
            settings: Parsed font settings

        Returns:
            FontMetrics instance owning copies of the override tables
        """
        return cls(
            glyph_width=settings.glyph_width,
            glyph_height=settings.glyph_height,
            line_height=settings.line_height,
            start_char_code=settings.start_char_code,
            codepage=dict(settings.codepage),
            advance_widths=dict(settings.advance_widths),
            x_offsets=dict(settings.x_offsets),
            y_offsets=dict(settings.y_offsets),
        )

    def to_settings(self) -> "FontSettings":
        """Convert to font settings with minimal override tables.

        Entries equal to their implicit default are dropped, which also
        removes advance widths made redundant by a later glyph_width change.
        """
        from glyphgrid.io.settings import FontSettings

        return FontSettings(
            glyph_width=self.glyph_width,
            glyph_height=self.glyph_height,
            line_height=self.line_height,
            start_char_code=self.start_char_code,
            codepage={
                code: target
                for code, target in sorted(self.codepage.items())
                if code != target
            },
            advance_widths=_minimal(self.advance_widths, self.glyph_width),
            x_offsets=_minimal(self.x_offsets, 0),
            y_offsets=_minimal(self.y_offsets, 0),
        )
