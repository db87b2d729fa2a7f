"""Editor snapshot persistence.

A snapshot stores a whole editor session (font settings, texture path,
selected glyph and preview appearance) as JSON. Snapshots carry a version
tag; a snapshot with a different version is rejected wholesale rather
than partially repaired.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from glyphgrid.config import PreviewConfig
from glyphgrid.domain.session import (
    DEFAULT_CURRENT_GLYPH,
    DEFAULT_END_CHAR_CODE,
    EditorSession,
)
from glyphgrid.exceptions import SettingsError, SnapshotError, SnapshotVersionError
from glyphgrid.io.settings import FontSettings

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


class Snapshot(BaseModel):
    """Serialized editor session."""

    model_config = ConfigDict(populate_by_name=True)

    version: int = Field(default=SNAPSHOT_VERSION, description="Snapshot format version")
    font: FontSettings
    texture_path: str | None = Field(default=None, alias="texturePath")
    current_glyph: int = Field(default=DEFAULT_CURRENT_GLYPH, alias="currentGlyph")
    end_char_code: int = Field(default=DEFAULT_END_CHAR_CODE, alias="endCharCode")
    preview: PreviewConfig = Field(default_factory=PreviewConfig)

    @classmethod
    def from_session(cls, session: EditorSession) -> "Snapshot":
        """Capture the state of a session."""
        return cls(
            font=session.metrics.to_settings(),
            texture_path=str(session.texture_path) if session.texture_path else None,
            current_glyph=session.current_glyph,
            end_char_code=session.end_char_code,
            preview=session.preview.model_copy(),
        )

    def to_session(self) -> EditorSession:
        """Restore a session from this snapshot."""
        return EditorSession(
            metrics=self.font.to_metrics(),
            texture_path=Path(self.texture_path) if self.texture_path else None,
            current_glyph=self.current_glyph,
            end_char_code=self.end_char_code,
            preview=self.preview.model_copy(),
        )


def create_snapshot(session: EditorSession) -> dict[str, Any]:
    """Serialize a session to a JSON-ready dictionary."""
    return Snapshot.from_session(session).model_dump(by_alias=True, mode="json")


def restore_snapshot(data: Any, source: str = "<data>") -> EditorSession:
    """Restore a session from a decoded snapshot.

    Raises:
        SnapshotVersionError: If the snapshot version does not match
        SettingsError: If the snapshot is malformed
    """
    if not isinstance(data, dict):
        raise SettingsError(source, "snapshot must be an object")

    version = data.get("version")
    if version != SNAPSHOT_VERSION:
        raise SnapshotVersionError(version, SNAPSHOT_VERSION)

    try:
        snapshot = Snapshot.model_validate(data)
    except ValidationError as e:
        raise SettingsError(source, str(e)) from e

    return snapshot.to_session()


def save_snapshot(session: EditorSession, path: Path) -> None:
    """Write a session snapshot to a JSON file.

    Raises:
        SnapshotError: If the file cannot be written
    """
    try:
        path.write_text(json.dumps(create_snapshot(session)), encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Failed to save snapshot '{path}': {e}") from e


def load_snapshot(path: Path) -> EditorSession:
    """Load a session snapshot from a JSON file.

    Raises:
        SnapshotError: If the file cannot be read
        SnapshotVersionError: If the snapshot version does not match
        SettingsError: If the snapshot is malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Failed to read snapshot '{path}': {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsError(str(path), f"invalid JSON: {e}") from e

    return restore_snapshot(data, str(path))


def load_snapshot_or_none(path: Path) -> EditorSession | None:
    """Load a snapshot, discarding it when missing, stale or malformed.

    Returns:
        Restored session, or None when there is nothing usable to restore
    """
    if not path.exists():
        return None

    try:
        return load_snapshot(path)
    except (SnapshotError, SettingsError) as e:
        logger.warning("Discarding snapshot %s: %s", path, e)
        return None
