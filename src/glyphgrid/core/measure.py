"""Text measurement."""

from glyphgrid.domain.layout import TextExtent
from glyphgrid.domain.metrics import FontMetrics

LINE_BREAK = "\n"


def measure_text(metrics: FontMetrics, text: str) -> TextExtent:
    """Measure the pixel bounding box of text.

    Width is the widest line, summing each character's advance width
    (x offsets do not contribute). Height is the number of lines times the
    line height, so empty text is one line high.

    Args:
        metrics: Font metrics
        text: Text to measure, lines separated by "\\n"

    Returns:
        TextExtent of the text
    """
    width = 0
    lines = 1
    line_width = 0

    for char in text:
        if char == LINE_BREAK:
            width = max(width, line_width)
            line_width = 0
            lines += 1
            continue

        line_width += metrics.advance(ord(char))

    return TextExtent(
        width=max(width, line_width),
        height=lines * metrics.line_height,
    )
