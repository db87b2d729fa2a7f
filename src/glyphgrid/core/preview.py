"""Preview rendering.

This module renders specimen text and single glyphs to Pillow images,
combining wrapping, measuring and the renderer with the preview
appearance (padding, colors, stroke outline).

Key components:
- PreviewRenderer: Renders text previews and glyph thumbnails
"""

import math
import time

import structlog
from PIL import Image, ImageDraw

from glyphgrid.config import PreviewConfig
from glyphgrid.core.measure import measure_text
from glyphgrid.core.render import render_stroked, render_text
from glyphgrid.core.wrap import wrap_lines
from glyphgrid.domain.metrics import FontMetrics
from glyphgrid.exceptions import RenderError
from glyphgrid.io.surface import ImageSurface
from glyphgrid.io.texture import FontTexture
from glyphgrid.utils import RenderStats, get_logger

GLYPH_COLOR = "black"
BASELINE_COLOR = "gray"
TOP_LINE_COLOR = "dodgerblue"


class PreviewRenderer:
    """Renders text previews with a font.

    Example:
        renderer = PreviewRenderer(PreviewConfig(padding=2))
        image = renderer.render_preview(texture, metrics, "Pixel fonts")
        image.save("preview.png")
    """

    def __init__(
        self,
        config: PreviewConfig | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the preview renderer.

        Args:
            config: Preview appearance (defaults to PreviewConfig())
            logger: Structured logger (defaults to the glyphgrid logger)
        """
        self.config = config or PreviewConfig()
        self.logger = logger or get_logger()
        self.stats = RenderStats()

    def render_preview(
        self,
        texture: FontTexture,
        metrics: FontMetrics,
        text: str,
        wrap: bool = False,
        width: int | None = None,
    ) -> Image.Image:
        """Render text to an image.

        Without wrapping the image is as wide as the measured text and
        lines only break on "\\n". With wrapping the image has a fixed
        width and text is wrapped to fit inside the padding.

        Args:
            texture: Decoded font texture
            metrics: Font metrics
            text: Text to render
            wrap: Wrap text to the preview width
            width: Preview width including padding (defaults to config.width)

        Returns:
            RGBA image of the rendered text

        Raises:
            RenderError: If the glyph size is not positive or the preview
                width leaves no room inside the padding
        """
        _check_dimensions(metrics)
        start_time = time.time()
        config = self.config
        padding = config.padding

        if wrap:
            content_width = (width or config.width) - padding * 2
            if content_width <= 0:
                raise RenderError(
                    f"preview width {width or config.width} leaves no room "
                    f"inside {padding}px padding"
                )
            max_width: float = content_width
        else:
            content_width = measure_text(metrics, text).width
            max_width = math.inf

        lines = wrap_lines(metrics, text, max_width)
        content_height = len(lines) * metrics.line_height

        surface = ImageSurface.blank(
            content_width + padding * 2,
            content_height + padding * 2,
            config.background_color if config.has_background() else None,
        )

        draw_calls = 0
        y = padding
        for line in lines:
            if config.stroke_bits:
                draw_calls += render_stroked(
                    surface,
                    texture,
                    metrics,
                    line,
                    padding,
                    y,
                    config.text_color,
                    config.stroke_color,
                    config.stroke_bits,
                )
            else:
                draw_calls += render_text(
                    surface, texture, metrics, line, padding, y, config.text_color
                )
            y += metrics.line_height

        image = self._scale(surface.image)
        duration_ms = (time.time() - start_time) * 1000

        self.stats.lines += len(lines)
        self.stats.draw_calls += draw_calls
        self.stats.width, self.stats.height = image.size
        self.stats.record(duration_ms)

        self.logger.info(
            "Preview rendered",
            lines=len(lines),
            draw_calls=draw_calls,
            size=list(image.size),
            wrap=wrap,
            duration_ms=round(duration_ms, 2),
        )
        return image

    def render_glyph(
        self, texture: FontTexture, metrics: FontMetrics, char_code: int
    ) -> Image.Image:
        """Render a single glyph thumbnail.

        The image is the glyph's advance width wide and tall enough for the
        largest vertical offset in the font.
        """
        _check_dimensions(metrics)
        surface = ImageSurface.blank(
            metrics.advance(char_code),
            metrics.glyph_height + metrics.max_y_offset(),
        )
        render_text(surface, texture, metrics, chr(char_code), 0, 0, GLYPH_COLOR)
        self.logger.debug("Glyph rendered", code=char_code)
        return self._scale(surface.image)

    def render_glyph_with_metrics(
        self, texture: FontTexture, metrics: FontMetrics, char_code: int
    ) -> Image.Image:
        """Render a single glyph over its metric guides.

        A gray baseline is drawn on the last row of the cell and a blue
        line on the top row, both spanning the advance width.
        """
        _check_dimensions(metrics)
        width = metrics.advance(char_code)
        baseline = metrics.glyph_height - 1

        surface = ImageSurface.blank(
            width, metrics.glyph_height + metrics.y_offset(char_code) + 1
        )
        draw = ImageDraw.Draw(surface.image)
        draw.line([(0, baseline), (width, baseline)], fill=BASELINE_COLOR)
        draw.line([(0, 0), (width, 0)], fill=TOP_LINE_COLOR)

        render_text(surface, texture, metrics, chr(char_code), 0, 0, GLYPH_COLOR)
        self.logger.debug("Glyph rendered with metrics", code=char_code)
        return self._scale(surface.image)

    def _scale(self, image: Image.Image) -> Image.Image:
        scale = self.config.scale
        if scale == 1:
            return image
        return image.resize(
            (image.width * scale, image.height * scale), Image.Resampling.NEAREST
        )


def _check_dimensions(metrics: FontMetrics) -> None:
    if metrics.glyph_width <= 0 or metrics.glyph_height <= 0:
        raise RenderError(
            f"glyph size {metrics.glyph_width}x{metrics.glyph_height} is not positive"
        )
