"""Greedy word wrapping.

Text is split into words, single whitespace characters and line breaks.
Words are appended to the current line until the next word would push the
line past the maximum width, at which point the line is emitted and the
word starts a new one. Words are never split, so a word wider than the
maximum width sits alone on its own line. Only the very first token may
overflow without a flush; an over-wide word right after a line break still
flushes the empty line before it.

Line width is accumulated token by token rather than re-measured. A space
at the end of a line counts toward the width even though the last line is
trimmed before it is emitted.
"""

import logging
import math
import re
from collections.abc import Iterator

from glyphgrid.core.measure import LINE_BREAK, measure_text
from glyphgrid.domain.metrics import SPACE_CHAR_CODE, FontMetrics

logger = logging.getLogger(__name__)

SPACE = " "
_TOKEN_PATTERN = re.compile(r"(\s)")


def tokenize(text: str) -> list[str]:
    """Split text into words and single whitespace characters.

    Every whitespace character is its own token. Adjacent whitespace
    produces empty word tokens between them, which measure as zero width.

    Example:
        tokenize("a  b") == ["a", " ", "", " ", "b"]
    """
    return _TOKEN_PATTERN.split(text)


def wrap_text(
    metrics: FontMetrics,
    text: str,
    max_width: float = math.inf,
) -> Iterator[str]:
    """Wrap text into lines fitting within a maximum width.

    Explicit line breaks are preserved. With max_width set to infinity
    wrapping is disabled and the text is only split on line breaks.

    Args:
        metrics: Font metrics used to measure words
        text: Text to wrap
        max_width: Maximum line width in pixels

    Yields:
        Wrapped lines in order. Lines ended by an explicit line break are
        yielded untrimmed; the final line is stripped and only yielded when
        it is not empty.
    """
    line = ""
    width = 0

    for index, token in enumerate(tokenize(text)):
        if token == SPACE:
            line += SPACE
            width += metrics.advance(SPACE_CHAR_CODE)
            continue

        if token == LINE_BREAK:
            yield line
            line = ""
            width = 0
            continue

        word_width = measure_text(metrics, token).width

        if index and width + word_width > max_width:
            logger.debug(
                "Wrapping line at %d px (word %r, %d px)", width, token, word_width
            )
            yield line
            line = token
            width = word_width
            continue

        line += token
        width += word_width

    line = line.strip()

    if line:
        yield line


def wrap_lines(
    metrics: FontMetrics,
    text: str,
    max_width: float = math.inf,
) -> list[str]:
    """Wrap text and collect the lines into a list."""
    return list(wrap_text(metrics, text, max_width))
