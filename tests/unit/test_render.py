"""Tests for rendering orchestration."""

from types import SimpleNamespace
from unittest.mock import Mock, call

import pytest

from glyphgrid.core.render import (
    STROKE_OFFSETS,
    layout_text,
    render_stroked,
    render_text,
    stroke_offsets,
)
from glyphgrid.domain import CellRect, FontMetrics
from glyphgrid.io.surface import RecordingSurface


@pytest.fixture
def metrics() -> FontMetrics:
    """5x8 font with 9px lines and a 2px 'I'."""
    return FontMetrics(
        glyph_width=5,
        glyph_height=8,
        line_height=9,
        advance_widths={73: 2},
    )


@pytest.fixture
def texture() -> SimpleNamespace:
    """80x48 texture: 16 columns, 6 rows of 5x8 glyphs."""
    return SimpleNamespace(width=80, height=48)


class TestLayoutText:
    """Tests for layout_text."""

    def test_cursor_advances_by_advance_width(self, metrics):
        calls = list(layout_text(metrics, "AI", 10, 20, 80))

        assert [(c.dest_x, c.dest_y) for c in calls] == [(10, 20), (15, 20)]
        assert calls[0].source == CellRect(5, 16, 5, 8)
        assert calls[1].source == CellRect(45, 16, 5, 8)

    def test_narrow_glyph_advance(self, metrics):
        calls = list(layout_text(metrics, "IA", 0, 0, 80))
        assert calls[1].dest_x == 2

    def test_line_break_resets_cursor(self, metrics):
        calls = list(layout_text(metrics, "A\nB", 1, 2, 80))

        assert len(calls) == 3
        assert calls[1].char == "\n"
        assert (calls[1].dest_x, calls[1].dest_y) == (6, 2)
        assert (calls[2].dest_x, calls[2].dest_y) == (1, 11)

    def test_offsets_shift_destination_only(self, metrics):
        metrics.set_x_offset(65, 1)
        metrics.set_y_offset(65, -2)

        calls = list(layout_text(metrics, "AB", 0, 0, 80))

        assert (calls[0].dest_x, calls[0].dest_y) == (1, -2)
        assert (calls[1].dest_x, calls[1].dest_y) == (5, 0)

    def test_empty_text(self, metrics):
        assert list(layout_text(metrics, "", 0, 0, 80)) == []

    def test_deterministic(self, metrics):
        first = list(layout_text(metrics, "Hello\nWorld", 3, 4, 80))
        second = list(layout_text(metrics, "Hello\nWorld", 3, 4, 80))
        assert first == second


class TestRenderText:
    """Tests for render_text."""

    def test_one_draw_call_per_character(self, metrics, texture):
        surface = RecordingSurface()

        count = render_text(surface, texture, metrics, "AI\nB", 0, 0)

        assert count == 4
        assert len(surface.calls) == 4
        assert all(c.source is texture for c in surface.calls)

    def test_color_recolors_texture_once(self, metrics, texture):
        surface = Mock()
        surface.recolor.return_value = "red texture"

        render_text(surface, texture, metrics, "AB", 0, 0, "#ff0000")

        surface.recolor.assert_called_once_with(texture, "#ff0000")
        surface.draw_region.assert_has_calls(
            [
                call("red texture", CellRect(5, 16, 5, 8), 0, 0),
                call("red texture", CellRect(10, 16, 5, 8), 5, 0),
            ]
        )

    def test_no_color_skips_recolor(self, metrics, texture):
        surface = Mock()

        render_text(surface, texture, metrics, "A", 0, 0)

        surface.recolor.assert_not_called()

    def test_out_of_range_glyph_passed_through(self, metrics, texture):
        surface = RecordingSurface()

        render_text(surface, texture, metrics, chr(31), 0, 0)

        assert surface.calls[0].rect.y < 0


class TestStrokeOffsets:
    """Tests for stroke_offsets."""

    def test_no_bits(self):
        assert stroke_offsets(0) == []

    def test_all_bits(self):
        assert len(stroke_offsets(255)) == 8

    def test_selected_bits_in_order(self):
        assert stroke_offsets(1 | 4) == [(1, 0), (0, 1)]

    def test_directions_are_one_pixel(self):
        for _bit, dx, dy in STROKE_OFFSETS:
            assert max(abs(dx), abs(dy)) == 1

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            stroke_offsets(256)


class TestRenderStroked:
    """Tests for render_stroked."""

    def test_stroke_passes_then_text(self, metrics, texture):
        surface = RecordingSurface()

        count = render_stroked(
            surface, texture, metrics, "A", 10, 10, "#000000", "#ff0000", 1 | 2
        )

        assert count == 3
        positions = [(c.dest_x, c.dest_y) for c in surface.calls]
        assert positions == [(11, 10), (11, 11), (10, 10)]
        sources = [c.source for c in surface.calls]
        assert sources == [
            (texture, "#ff0000"),
            (texture, "#ff0000"),
            (texture, "#000000"),
        ]

    def test_zero_bits_is_plain_render(self, metrics, texture):
        surface = RecordingSurface()

        count = render_stroked(surface, texture, metrics, "AB", 0, 0, None, "#ff0000", 0)

        assert count == 2
        assert all(c.source is texture for c in surface.calls)
