"""Editor session state.

An EditorSession is the live state of one font editing session: the font
metrics being edited, the texture they apply to, the currently selected
glyph and the preview appearance. Editor commands mutate it in place.
"""

from dataclasses import dataclass, field
from pathlib import Path

from glyphgrid.config import PreviewConfig
from glyphgrid.domain.metrics import FontMetrics

DEFAULT_CURRENT_GLYPH = 65
DEFAULT_END_CHAR_CODE = 128


def _default_metrics() -> FontMetrics:
    return FontMetrics(glyph_width=8, glyph_height=8, line_height=10)


@dataclass
class EditorSession:
    """Live editor state.

    Attributes:
        metrics: Font metrics being edited
        texture_path: Path of the font texture, None before one is loaded
        current_glyph: Character code selected in the glyph grid
        end_char_code: Character code of the last glyph shown in the grid
        preview: Preview rendering appearance
    """

    metrics: FontMetrics = field(default_factory=_default_metrics)
    texture_path: Path | None = None
    current_glyph: int = DEFAULT_CURRENT_GLYPH
    end_char_code: int = DEFAULT_END_CHAR_CODE
    preview: PreviewConfig = field(default_factory=PreviewConfig)

    def has_texture(self) -> bool:
        """Check whether a texture has been assigned."""
        return self.texture_path is not None

    def select_glyph(self, char_code: int) -> None:
        """Select the glyph edited by subsequent metric commands."""
        self.current_glyph = char_code

    def set_advance_width(self, value: int | None) -> None:
        """Set the selected glyph's advance width."""
        self.metrics.set_advance_width(self.current_glyph, value)

    def set_x_offset(self, value: int | None) -> None:
        """Set the selected glyph's x offset."""
        self.metrics.set_x_offset(self.current_glyph, value)

    def set_y_offset(self, value: int | None) -> None:
        """Set the selected glyph's y offset."""
        self.metrics.set_y_offset(self.current_glyph, value)

    def reset(self) -> None:
        """Drop the texture and clear all metrics.

        Glyph dimensions become 0, which is the editor's "no font yet"
        state; line height and preview settings are kept.
        """
        self.texture_path = None
        self.metrics.glyph_width = 0
        self.metrics.glyph_height = 0
        self.metrics.start_char_code = 0
        self.end_char_code = DEFAULT_END_CHAR_CODE
        self.metrics.advance_widths.clear()
        self.metrics.x_offsets.clear()
        self.metrics.y_offsets.clear()

    def char_codes(self) -> range:
        """Character codes shown in the glyph grid."""
        return range(self.metrics.start_char_code, self.end_char_code)
