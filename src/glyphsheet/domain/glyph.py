"""Glyph placement and spacing on a sprite sheet.

A glyph record says which rectangle of the font image holds the pixels
for one character and how far the pen moves before the next one.
"""

from dataclasses import dataclass
from typing import Any

GLYPH_FIELDS = ("x", "y", "width", "height", "advance")


@dataclass
class Glyph:
    """Metrics for a single font glyph.

    Attributes:
        x: X location of the glyph's top-left corner on the sprite sheet
        y: Y location of the glyph's top-left corner on the sprite sheet
        width: Width of the glyph on the sprite sheet
        height: Height of the glyph on the sprite sheet
        advance: Distance to the next glyph's origin, for non-monospaced fonts
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    advance: int = 0

    def is_empty(self) -> bool:
        """Check if the glyph has no visible pixels.

        Spaces and other invisible characters have a zero-sized box but
        may still advance the pen.

        Returns:
            True if width or height is zero
        """
        return self.width == 0 or self.height == 0

    def bounds(self) -> tuple[int, int, int, int]:
        """Get the glyph rectangle on the sprite sheet.

        Returns:
            Tuple of (left, top, right, bottom), right/bottom exclusive
        """
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the document's glyph object.

        Returns:
            Dictionary keyed by the persisted field names
        """
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "advance": self.advance,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from a document glyph object.

        Missing fields default to zero and unknown fields are ignored.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance
        """
        return cls(**{name: data.get(name, 0) for name in GLYPH_FIELDS})
