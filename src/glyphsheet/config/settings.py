"""Configuration settings for glyphsheet."""

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


def check_encoding(name: str) -> str:
    """Ensure a text encoding name is known to the codec registry.

    Args:
        name: Encoding name, e.g. "utf-8"

    Returns:
        The name unchanged

    Raises:
        ValueError: If no codec is registered under the name
    """
    try:
        codecs.lookup(name)
    except LookupError:
        raise ValueError(f"Unknown text encoding: {name!r}") from None
    return name


class SerializationConfig(BaseModel):
    """Configuration for writing font config documents."""

    indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Spaces per indentation level (0 = compact single line)",
    )
    sort_glyphs: bool = Field(
        default=True,
        description="Write glyph entries in ascending rune order",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used for byte streams",
    )

    @field_validator("encoding")
    @classmethod
    def encoding_known(cls, v: str) -> str:
        return check_encoding(v)


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


class GlyphsheetSettings(BaseModel):
    """Main library settings."""

    serialization: SerializationConfig = Field(default_factory=SerializationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphsheetSettings:
    """Get default library settings."""
    return GlyphsheetSettings()
