"""Converters between the JSON document models and domain models.

This module handles the conversion between the pydantic document
representation (FontConfigDocument, GlyphDocument) and our domain models
(FontConfig, Charset, Glyph).
"""

from pydantic import ValidationError

from glyphsheet.domain.charset import Charset, key_to_rune, rune_to_key
from glyphsheet.domain.direction import Direction
from glyphsheet.domain.font_config import FontConfig
from glyphsheet.domain.glyph import Glyph
from glyphsheet.exceptions import SerializationError
from glyphsheet.io.schema import FontConfigDocument, GlyphDocument


def document_to_domain(document: FontConfigDocument) -> FontConfig:
    """Convert a validated document to a domain FontConfig.

    Args:
        document: Document that already passed schema validation

    Returns:
        A new FontConfig owning a fresh Charset
    """
    glyphs = Charset()
    for key, entry in document.glyphs.items():
        glyphs[key_to_rune(key)] = Glyph(
            x=entry.x,
            y=entry.y,
            width=entry.width,
            height=entry.height,
            advance=entry.advance,
        )

    return FontConfig(
        direction=Direction(document.direction),
        rune_low=document.rune_low,
        rune_high=document.rune_high,
        glyphs=glyphs,
    )


def domain_to_document(config: FontConfig, sort_glyphs: bool = True) -> FontConfigDocument:
    """Convert a domain FontConfig to a document model.

    Fields are re-validated against the strict schema so that a value
    which could not be loaded back is never written.

    Args:
        config: Font config to convert
        sort_glyphs: Emit glyph entries in ascending rune order

    Returns:
        Document model ready to be dumped as JSON

    Raises:
        SerializationError: If any field cannot be encoded
    """
    if not isinstance(config, FontConfig):
        raise SerializationError(f"expected FontConfig, got {type(config).__name__}")
    if not isinstance(config.direction, Direction):
        raise SerializationError(f"direction must be a Direction, got {config.direction!r}")

    runes = list(config.glyphs)
    if sort_glyphs:
        try:
            runes.sort()
        except TypeError as e:
            raise SerializationError(f"glyph runes are not comparable: {e}") from e

    try:
        glyphs: dict[str, GlyphDocument] = {}
        for rune in runes:
            glyph = config.glyphs[rune]
            if not isinstance(glyph, Glyph):
                raise SerializationError(
                    f"glyph for rune {rune!r} must be a Glyph, got {type(glyph).__name__}"
                )
            glyphs[rune_to_key(rune)] = GlyphDocument(**glyph.to_dict())

        return FontConfigDocument(
            direction=int(config.direction),
            rune_low=config.rune_low,
            rune_high=config.rune_high,
            glyphs=glyphs,
        )
    except ValidationError as e:
        raise SerializationError(summarize_validation_error(e)) from e


def summarize_validation_error(error: ValidationError) -> str:
    """Render a pydantic error as a short "path: message" list."""
    parts = []
    for detail in error.errors(include_url=False):
        location = ".".join(str(part) for part in detail["loc"]) or "<document>"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)
