"""Pydantic v2 models matching the font config JSON document.

Validation is strict: integer fields reject booleans, floats, strings and
null. Missing fields fall back to zero and unknown fields are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from glyphsheet.domain.charset import key_to_rune
from glyphsheet.domain.direction import Direction


class GlyphDocument(BaseModel):
    """A single glyph entry of the `glyphs` object."""

    model_config = ConfigDict(strict=True, extra="ignore")

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    advance: int = 0


class FontConfigDocument(BaseModel):
    """Complete font config document.

    Field order is the order keys are written in.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    direction: int = 0
    rune_low: int = 0
    rune_high: int = 0
    glyphs: dict[str, GlyphDocument] = Field(default_factory=dict)

    @field_validator("direction")
    @classmethod
    def direction_known(cls, v: int) -> int:
        return int(Direction.from_ordinal(v))

    @field_validator("glyphs")
    @classmethod
    def glyph_keys_are_runes(cls, v: dict[str, GlyphDocument]) -> dict[str, GlyphDocument]:
        for key in v:
            key_to_rune(key)
        return v
