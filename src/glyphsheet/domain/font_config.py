"""Raster font metadata aggregate.

A FontConfig travels next to a bitmap font image: it records the text
direction, the rune range the font is meant to cover and where every
glyph of that range sits on the image.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphsheet.domain.charset import Charset
from glyphsheet.domain.direction import Direction
from glyphsheet.domain.glyph import Glyph


def _as_rune(rune: int | str) -> int:
    if isinstance(rune, str):
        if len(rune) != 1:
            raise ValueError(f"Expected a single character, got {rune!r}")
        return ord(rune)
    return rune


@dataclass
class FontConfig:
    """Describes raster font metadata.

    The rune bounds are inclusive. Nothing forces rune_low <= rune_high or
    a glyph for every rune in range; runes without a glyph are simply
    missing from the font.

    Attributes:
        direction: Orientation of rendered strings
        rune_low: Lower rune boundary
        rune_high: Upper rune boundary
        glyphs: Location, size and advance of each glyph in the sprite sheet
    """

    direction: Direction = Direction.LEFT_TO_RIGHT
    rune_low: int = 0
    rune_high: int = 0
    glyphs: Charset = field(default_factory=Charset)

    def rune_range(self) -> range:
        """Get the declared rune range (empty when the bounds are inverted)."""
        return range(self.rune_low, self.rune_high + 1)

    def covers(self, rune: int | str) -> bool:
        """Check if a rune lies within the declared range.

        Args:
            rune: Code point, or a single character

        Returns:
            True if rune_low <= rune <= rune_high
        """
        return self.rune_low <= _as_rune(rune) <= self.rune_high

    def glyph(self, rune: int | str) -> Glyph | None:
        """Get the glyph for a rune or character, if the font has one."""
        return self.glyphs.get(_as_rune(rune))

    def missing_runes(self) -> list[int]:
        """Get runes of the declared range that have no glyph.

        Returns:
            Ascending list of runes without a glyph entry
        """
        return [rune for rune in self.rune_range() if rune not in self.glyphs]

    def glyph_bounds(self) -> tuple[int, int]:
        """Get the largest glyph (width, height) in the font."""
        return self.glyphs.max_size()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted document structure.

        Returns:
            Dictionary with direction, rune_low, rune_high and glyphs keys
        """
        return {
            "direction": int(self.direction),
            "rune_low": self.rune_low,
            "rune_high": self.rune_high,
            "glyphs": self.glyphs.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontConfig":
        """Deserialize from the persisted document structure.

        Missing keys default to their zero value; unknown keys are ignored.
        No type checking happens here, see glyphsheet.io for validated loading.

        Args:
            data: Dictionary representation of a font config

        Returns:
            FontConfig instance

        Raises:
            ValueError: If direction or a glyph key is invalid
        """
        return cls(
            direction=Direction.from_ordinal(data.get("direction", 0)),
            rune_low=data.get("rune_low", 0),
            rune_high=data.get("rune_high", 0),
            glyphs=Charset.from_dict(data.get("glyphs") or {}),
        )
