"""Font settings import and export.

Font settings are the JSON document describing a font's metrics:

    {
      "glyphWidth": 5, "glyphHeight": 8,
      "lineHeight": 9, "startCharCode": 32,
      "advanceWidths": {"I": 2, "105": 2},
      "xOffsets": {}, "yOffsets": {"g": 1},
      "codepage": {}
    }

Keys of the four tables may be decimal character codes or literal
characters; both are normalized to integer codes when the settings are
parsed. Exports always use decimal codes and omit entries equal to their
default, and tables left empty.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from glyphgrid.domain.metrics import (
    DEFAULT_START_CHAR_CODE,
    FontMetrics,
    normalize_glyph_keys,
)
from glyphgrid.exceptions import SettingsError

TABLE_FIELDS = ("codepage", "advanceWidths", "xOffsets", "yOffsets")


class FontSettings(BaseModel):
    """Persisted font settings.

    Field names are snake_case in Python and camelCase in JSON. Unknown
    JSON keys (such as the editor's "endCharCode") are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    glyph_width: int = Field(alias="glyphWidth", description="Glyph cell width")
    glyph_height: int = Field(alias="glyphHeight", description="Glyph cell height")
    line_height: int | None = Field(
        default=None,
        alias="lineHeight",
        description="Distance between lines (defaults to glyph height)",
    )
    start_char_code: int = Field(
        default=DEFAULT_START_CHAR_CODE,
        alias="startCharCode",
        description="Character code of the first glyph",
    )
    codepage: dict[int, int] = Field(default_factory=dict, alias="codepage")
    advance_widths: dict[int, int] = Field(default_factory=dict, alias="advanceWidths")
    x_offsets: dict[int, int] = Field(default_factory=dict, alias="xOffsets")
    y_offsets: dict[int, int] = Field(default_factory=dict, alias="yOffsets")

    @field_validator(
        "codepage", "advance_widths", "x_offsets", "y_offsets", mode="before"
    )
    @classmethod
    def _normalize_table_keys(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            return value
        present = {key: item for key, item in value.items() if item is not None}
        try:
            return normalize_glyph_keys(present)
        except SettingsError as e:
            raise ValueError(e.reason) from e

    def to_metrics(self) -> FontMetrics:
        """Build FontMetrics from these settings."""
        return FontMetrics.from_settings(self)


def parse_font_settings(data: Any, source: str = "<data>") -> FontSettings:
    """Validate a decoded settings object.

    Args:
        data: Decoded JSON object
        source: Description of where the data came from, for error messages

    Returns:
        Validated FontSettings

    Raises:
        SettingsError: If the data has the wrong shape
    """
    if not isinstance(data, Mapping):
        raise SettingsError(source, f"expected an object, got {type(data).__name__}")
    try:
        return FontSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(source, _describe(e)) from e


def loads_font_settings(text: str, source: str = "<string>") -> FontSettings:
    """Parse font settings from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsError(source, f"invalid JSON: {e}") from e
    return parse_font_settings(data, source)


def read_font_settings(path: Path) -> FontSettings:
    """Read font settings from a JSON file.

    Raises:
        SettingsError: If the file cannot be read or is malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(str(path), str(e)) from e
    return loads_font_settings(text, str(path))


def load_font_metrics(path: Path) -> FontMetrics:
    """Read a settings file straight into FontMetrics."""
    return read_font_settings(path).to_metrics()


def export_font_settings(metrics: FontMetrics) -> dict[str, Any]:
    """Export metrics as a minimal JSON-ready settings object.

    Table keys become decimal strings. Entries equal to their default and
    empty tables are omitted.
    """
    data = metrics.to_settings().model_dump(by_alias=True)

    for name in TABLE_FIELDS:
        table = data.pop(name)
        if table:
            data[name] = {str(code): value for code, value in table.items()}

    return data


def dumps_font_settings(metrics: FontMetrics) -> str:
    """Export metrics as an indented JSON string."""
    return json.dumps(export_font_settings(metrics), indent=2)


def write_font_settings(metrics: FontMetrics, path: Path) -> None:
    """Write minimal font settings to a JSON file.

    Raises:
        SettingsError: If the file cannot be written
    """
    try:
        path.write_text(dumps_font_settings(metrics) + "\n", encoding="utf-8")
    except OSError as e:
        raise SettingsError(str(path), str(e)) from e


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)
