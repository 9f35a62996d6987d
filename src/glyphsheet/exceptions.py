"""Exception hierarchy for glyphsheet."""

from typing import Any


class GlyphsheetError(Exception):
    """Base exception for all glyphsheet errors."""

    pass


class DocumentError(GlyphsheetError):
    """Errors related to reading or writing a font config document."""

    pass


class MalformedDocumentError(DocumentError):
    """Input bytes are not a font config document of the expected shape."""

    def __init__(self, reason: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.reason = reason
        self.errors = list(errors or [])
        super().__init__(f"Malformed font config document: {reason}")


class SerializationError(DocumentError):
    """A font config value cannot be encoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot serialize font config: {reason}")


class GlyphError(GlyphsheetError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested rune has no glyph in the charset."""

    def __init__(self, rune: int) -> None:
        self.rune = rune
        super().__init__(f"No glyph for rune U+{rune:04X}")
