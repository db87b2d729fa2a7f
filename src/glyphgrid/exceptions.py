"""Exception hierarchy for Glyphgrid."""


class GlyphGridError(Exception):
    """Base exception for all Glyphgrid errors."""

    pass


class SettingsError(GlyphGridError):
    """Malformed or unreadable font settings."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid font settings '{source}': {reason}")


class SnapshotError(GlyphGridError):
    """Errors related to editor snapshots."""

    pass


class SnapshotVersionError(SnapshotError):
    """Snapshot was written by an incompatible version."""

    def __init__(self, found: object, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"Snapshot version mismatch: found {found!r}, expected {expected}"
        )


class TextureError(GlyphGridError):
    """Errors related to font textures."""

    pass


class TextureLoadError(TextureError):
    """Error loading a texture image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load texture '{path}': {reason}")


class RenderError(GlyphGridError):
    """Error producing a preview image."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Rendering failed: {reason}")
