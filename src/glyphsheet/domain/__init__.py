"""Domain models for glyphsheet.

This module contains the bitmap font metadata model. The models are plain
dataclasses with no knowledge of JSON or pydantic; the io package maps
them to and from the persisted document.

Key classes:
- Direction: Text flow orientation
- Glyph: Sprite sheet rectangle and advance of one character
- Charset: Rune -> Glyph container
- FontConfig: The persisted aggregate
"""

from glyphsheet.domain.charset import Charset, key_to_rune, rune_to_key
from glyphsheet.domain.direction import Direction
from glyphsheet.domain.font_config import FontConfig
from glyphsheet.domain.glyph import Glyph

__all__: list[str] = [
    # Enums
    "Direction",
    # Core types
    "Glyph",
    "Charset",
    "FontConfig",
    # Rune key codec
    "key_to_rune",
    "rune_to_key",
]
