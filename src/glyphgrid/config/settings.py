"""Configuration settings for Glyphgrid."""

from pathlib import Path

from pydantic import BaseModel, Field

# Background color treated as "no background" when rendering previews
TRANSPARENT_BACKGROUND = "#ffffff"


class PreviewConfig(BaseModel):
    """Configuration for preview rendering."""

    padding: int = Field(
        default=1,
        ge=0,
        le=64,
        description="Pixels of padding around rendered previews",
    )
    width: int = Field(
        default=300,
        ge=1,
        description="Preview width in pixels used when wrapping text",
    )
    text_color: str = Field(
        default="#000000",
        description="Text color",
    )
    background_color: str = Field(
        default=TRANSPARENT_BACKGROUND,
        description="Background color (#ffffff renders transparent)",
    )
    stroke_color: str = Field(
        default="#000000",
        description="Outline color used by stroke passes",
    )
    stroke_bits: int = Field(
        default=0,
        ge=0,
        le=255,
        description="Bit mask selecting the eight 1px stroke directions",
    )
    scale: int = Field(
        default=1,
        ge=1,
        le=16,
        description="Integer upscale factor applied when saving previews",
    )

    def has_background(self) -> bool:
        """Check whether the background should be filled."""
        return self.background_color.lower() != TRANSPARENT_BACKGROUND


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphGridSettings(BaseModel):
    """Main application settings."""

    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphGridSettings:
    """Get default application settings."""
    return GlyphGridSettings()
