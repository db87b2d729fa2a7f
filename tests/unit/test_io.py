"""Unit tests for the I/O layer.

Tests for font settings, editor snapshots, textures and surfaces.
"""

import json
from pathlib import Path

import pytest
from PIL import Image

from glyphgrid.config import PreviewConfig
from glyphgrid.domain import CellRect, EditorSession, FontMetrics
from glyphgrid.exceptions import (
    SettingsError,
    SnapshotVersionError,
    TextureLoadError,
)
from glyphgrid.io.settings import (
    export_font_settings,
    load_font_metrics,
    loads_font_settings,
    parse_font_settings,
    read_font_settings,
    write_font_settings,
)
from glyphgrid.io.snapshot import (
    SNAPSHOT_VERSION,
    create_snapshot,
    load_snapshot,
    load_snapshot_or_none,
    restore_snapshot,
    save_snapshot,
)
from glyphgrid.io.surface import ImageSurface, RecordingSurface
from glyphgrid.io.texture import (
    FontTexture,
    load_texture,
    recolor_image,
    remove_background_color,
)

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


class TestParseFontSettings:
    """Tests for parsing font settings."""

    def test_minimal(self):
        settings = parse_font_settings({"glyphWidth": 5, "glyphHeight": 8})
        metrics = settings.to_metrics()

        assert metrics.glyph_width == 5
        assert metrics.glyph_height == 8
        assert metrics.line_height == 8
        assert metrics.start_char_code == 32
        assert metrics.advance_widths == {}

    def test_keys_normalized(self):
        settings = parse_font_settings(
            {
                "glyphWidth": 5,
                "glyphHeight": 8,
                "advanceWidths": {"I": 2, "105": 3},
                "xOffsets": {"j": -1},
                "yOffsets": {"103": 1},
            }
        )

        assert settings.advance_widths == {73: 2, 105: 3}
        assert settings.x_offsets == {106: -1}
        assert settings.y_offsets == {103: 1}

    def test_character_and_code_keys_equivalent(self):
        by_char = parse_font_settings(
            {"glyphWidth": 5, "glyphHeight": 8, "advanceWidths": {"I": 2, "i": 1}}
        ).to_metrics()
        by_code = parse_font_settings(
            {"glyphWidth": 5, "glyphHeight": 8, "advanceWidths": {"73": 2, "105": 1}}
        ).to_metrics()

        for code in range(256):
            assert by_char.advance(code) == by_code.advance(code)

    def test_null_entries_dropped(self):
        settings = parse_font_settings(
            {"glyphWidth": 5, "glyphHeight": 8, "advanceWidths": {"I": None}}
        )
        assert settings.advance_widths == {}

    def test_unknown_keys_ignored(self):
        settings = parse_font_settings(
            {"glyphWidth": 5, "glyphHeight": 8, "endCharCode": 128}
        )
        assert settings.glyph_width == 5

    def test_missing_dimension(self):
        with pytest.raises(SettingsError, match="glyphHeight"):
            parse_font_settings({"glyphWidth": 5})

    def test_not_an_object(self):
        with pytest.raises(SettingsError):
            parse_font_settings([5, 8])

    def test_empty_key(self):
        with pytest.raises(SettingsError):
            parse_font_settings(
                {"glyphWidth": 5, "glyphHeight": 8, "advanceWidths": {"": 2}}
            )

    def test_invalid_json(self):
        with pytest.raises(SettingsError, match="invalid JSON"):
            loads_font_settings("{glyphWidth: 5")

    def test_missing_file(self, tmp_path):
        with pytest.raises(SettingsError):
            read_font_settings(tmp_path / "missing.json")


class TestExportFontSettings:
    """Tests for minimal settings export."""

    def test_defaults_and_empty_tables_omitted(self):
        metrics = FontMetrics(
            glyph_width=5,
            glyph_height=8,
            advance_widths={65: 5, 73: 2},
            x_offsets={65: 0},
        )

        data = export_font_settings(metrics)

        assert data == {
            "glyphWidth": 5,
            "glyphHeight": 8,
            "lineHeight": 8,
            "startCharCode": 32,
            "advanceWidths": {"73": 2},
        }

    def test_codepage_preserved(self):
        metrics = FontMetrics(glyph_width=5, glyph_height=8, codepage={200: 65})
        assert export_font_settings(metrics)["codepage"] == {"200": 65}

    def test_json_serializable(self):
        metrics = FontMetrics(glyph_width=5, glyph_height=8, y_offsets={103: 1})
        text = json.dumps(export_font_settings(metrics))
        assert json.loads(text)["yOffsets"] == {"103": 1}

    def test_file_round_trip(self, tmp_path):
        path = tmp_path / "font.json"
        metrics = FontMetrics(
            glyph_width=5,
            glyph_height=8,
            line_height=9,
            start_char_code=33,
            advance_widths={73: 2},
            y_offsets={103: 1},
        )

        write_font_settings(metrics, path)

        assert load_font_metrics(path) == metrics


class TestSnapshot:
    """Tests for editor snapshots."""

    @pytest.fixture
    def session(self) -> EditorSession:
        session = EditorSession(
            metrics=FontMetrics(glyph_width=5, glyph_height=8, line_height=9),
            texture_path=Path("font.png"),
            current_glyph=103,
            preview=PreviewConfig(padding=2, stroke_bits=255),
        )
        session.set_y_offset(1)
        return session

    def test_create_has_version(self, session):
        assert create_snapshot(session)["version"] == SNAPSHOT_VERSION

    def test_round_trip(self, session, tmp_path):
        path = tmp_path / "snapshot.json"

        save_snapshot(session, path)
        restored = load_snapshot(path)

        assert restored == session

    def test_version_mismatch_rejected(self, session):
        data = create_snapshot(session)
        data["version"] = SNAPSHOT_VERSION + 1

        with pytest.raises(SnapshotVersionError):
            restore_snapshot(data)

    def test_missing_version_rejected(self, session):
        data = create_snapshot(session)
        del data["version"]

        with pytest.raises(SnapshotVersionError):
            restore_snapshot(data)

    def test_stale_snapshot_discarded(self, session, tmp_path):
        path = tmp_path / "snapshot.json"
        data = create_snapshot(session)
        data["version"] = 0
        path.write_text(json.dumps(data), encoding="utf-8")

        assert load_snapshot_or_none(path) is None

    def test_malformed_snapshot_discarded(self, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text("not json", encoding="utf-8")

        assert load_snapshot_or_none(path) is None

    def test_missing_snapshot(self, tmp_path):
        assert load_snapshot_or_none(tmp_path / "missing.json") is None


class TestTexture:
    """Tests for texture loading and recoloring."""

    def test_remove_background_color(self):
        image = Image.new("RGB", (2, 1), (255, 255, 255))
        image.putpixel((1, 0), (0, 0, 0))

        result = remove_background_color(image)

        assert result.mode == "RGBA"
        assert result.getpixel((0, 0)) == CLEAR
        assert result.getpixel((1, 0)) == BLACK

    def test_recolor_keeps_alpha(self):
        image = Image.new("RGBA", (2, 1), CLEAR)
        image.putpixel((0, 0), WHITE)

        result = recolor_image(image, "#ff0000")

        assert result.getpixel((0, 0)) == (255, 0, 0, 255)
        assert result.getpixel((1, 0))[3] == 0

    def test_colored_is_cached(self):
        texture = FontTexture(Image.new("RGBA", (4, 4), WHITE))

        assert texture.colored("#ff0000") is texture.colored("#ff0000")
        assert texture.colored("#ff0000") is not texture.colored("#00ff00")

    def test_converts_to_rgba(self):
        texture = FontTexture(Image.new("L", (4, 2), 255))
        assert texture.image.mode == "RGBA"
        assert (texture.width, texture.height) == (4, 2)

    def test_load_texture(self, tmp_path):
        path = tmp_path / "font.png"
        image = Image.new("RGB", (4, 2), (255, 0, 255))
        image.putpixel((3, 1), (0, 0, 0))
        image.save(path)

        texture = load_texture(path)

        assert texture.image.getpixel((0, 0)) == CLEAR
        assert texture.image.getpixel((3, 1)) == BLACK

    def test_load_texture_keep_background(self, tmp_path):
        path = tmp_path / "font.png"
        Image.new("RGB", (4, 2), (255, 0, 255)).save(path)

        texture = load_texture(path, strip_background=False)

        assert texture.image.getpixel((0, 0)) == (255, 0, 255, 255)

    def test_load_missing_texture(self, tmp_path):
        with pytest.raises(TextureLoadError, match="not found"):
            load_texture(tmp_path / "missing.png")

    def test_load_invalid_texture(self, tmp_path):
        path = tmp_path / "font.png"
        path.write_text("not an image", encoding="utf-8")

        with pytest.raises(TextureLoadError):
            load_texture(path)


class TestImageSurface:
    """Tests for the Pillow surface."""

    @pytest.fixture
    def texture(self) -> FontTexture:
        """4x2 texture: left cell opaque white, right cell transparent."""
        image = Image.new("RGBA", (4, 2), CLEAR)
        for x in range(2):
            for y in range(2):
                image.putpixel((x, y), WHITE)
        return FontTexture(image)

    def test_draw_region(self, texture):
        surface = ImageSurface.blank(4, 4)

        surface.draw_region(texture, CellRect(0, 0, 2, 2), 1, 1)

        assert surface.image.getpixel((1, 1)) == WHITE
        assert surface.image.getpixel((2, 2)) == WHITE
        assert surface.image.getpixel((0, 0)) == CLEAR
        assert surface.image.getpixel((3, 3)) == CLEAR

    def test_transparent_region_keeps_destination(self, texture):
        surface = ImageSurface.blank(2, 2, "#ff0000")

        surface.draw_region(texture, CellRect(2, 0, 2, 2), 0, 0)

        assert surface.image.getpixel((0, 0)) == (255, 0, 0, 255)

    def test_partial_alpha_kept_on_transparent_surface(self):
        source = Image.new("RGBA", (1, 1), (255, 255, 255, 128))
        surface = ImageSurface.blank(1, 1)

        surface.draw_region(source, CellRect(0, 0, 1, 1), 0, 0)

        assert surface.image.getpixel((0, 0)) == (255, 255, 255, 128)

    def test_partial_alpha_over_opaque_stays_opaque(self):
        source = Image.new("RGBA", (1, 1), (255, 0, 0, 128))
        surface = ImageSurface.blank(1, 1, "#0000ff")

        surface.draw_region(source, CellRect(0, 0, 1, 1), 0, 0)

        red, green, blue, alpha = surface.image.getpixel((0, 0))
        assert alpha == 255
        assert abs(red - 128) <= 1
        assert green == 0
        assert abs(blue - 127) <= 1

    def test_destination_past_edge_clipped(self, texture):
        surface = ImageSurface.blank(4, 4)

        surface.draw_region(texture, CellRect(0, 0, 2, 2), 3, 3)

        assert surface.image.getpixel((3, 3)) == WHITE
        assert surface.image.getpixel((2, 2)) == CLEAR

    def test_out_of_range_region_draws_nothing(self, texture):
        surface = ImageSurface.blank(4, 4)

        surface.draw_region(texture, CellRect(0, -8, 2, 2), 0, 0)

        assert surface.image.getbbox() is None

    def test_negative_destination_clipped(self, texture):
        surface = ImageSurface.blank(4, 4)

        surface.draw_region(texture, CellRect(0, 0, 2, 2), -1, -1)

        assert surface.image.getpixel((0, 0)) == WHITE
        assert surface.image.getpixel((1, 1)) == CLEAR

    def test_empty_region_ignored(self, texture):
        surface = ImageSurface.blank(4, 4)
        surface.draw_region(texture, CellRect(0, 0, 0, 2), 0, 0)
        assert surface.image.getbbox() is None

    def test_recolor_uses_texture_cache(self, texture):
        surface = ImageSurface.blank(4, 4)
        assert surface.recolor(texture, "#ff0000") is texture.colored("#ff0000")

    def test_recolor_plain_image(self, texture):
        surface = ImageSurface.blank(4, 4)
        result = surface.recolor(texture.image, "#00ff00")
        assert result.getpixel((0, 0)) == (0, 255, 0, 255)


class TestRecordingSurface:
    """Tests for the recording surface."""

    def test_records_calls(self):
        surface = RecordingSurface()
        surface.draw_region("tex", CellRect(0, 0, 5, 8), 1, 2)

        assert len(surface.calls) == 1
        assert surface.calls[0].dest_x == 1
        assert surface.calls[0].dest_y == 2

    def test_recolor_marker(self):
        assert RecordingSurface().recolor("tex", "red") == ("tex", "red")
