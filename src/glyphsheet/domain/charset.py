"""Rune-keyed glyph container.

A Charset maps Unicode code points (runes) to Glyph records. In the
persisted document the runes are written as decimal strings, since JSON
object keys must be strings; `rune_to_key` and `key_to_rune` are the two
halves of that convention.
"""

import re
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

from glyphsheet.domain.glyph import Glyph
from glyphsheet.exceptions import GlyphNotFoundError

_RUNE_KEY = re.compile(r"-?[0-9]+")


def rune_to_key(rune: int) -> str:
    """Encode a rune as a document object key."""
    return str(rune)


def key_to_rune(key: str) -> int:
    """Decode a document object key back to a rune.

    Args:
        key: Decimal string, optionally with a leading minus sign

    Returns:
        The rune as an integer

    Raises:
        ValueError: If key is not a decimal integer string
    """
    if not isinstance(key, str) or _RUNE_KEY.fullmatch(key) is None:
        raise ValueError(f"Glyph key must be a decimal rune, got {key!r}")
    return int(key)


def _check_rune(rune: object) -> int:
    if isinstance(rune, bool) or not isinstance(rune, int):
        raise TypeError(f"Charset keys must be int runes, got {type(rune).__name__}")
    return rune


class Charset(MutableMapping[int, Glyph]):
    """Set of glyph descriptors keyed by rune.

    Iteration follows insertion order. Use `runes()` for ascending order.

    Example:
        charset = Charset()
        charset[ord("A")] = Glyph(x=0, y=0, width=10, height=12, advance=11)
        charset[65].advance  # 11
    """

    def __init__(self, glyphs: Mapping[int, Glyph] | Iterable[tuple[int, Glyph]] = ()) -> None:
        self._glyphs: dict[int, Glyph] = {}
        self.update(glyphs)

    def __getitem__(self, rune: int) -> Glyph:
        return self._glyphs[_check_rune(rune)]

    def __setitem__(self, rune: int, glyph: Glyph) -> None:
        rune = _check_rune(rune)
        if not isinstance(glyph, Glyph):
            raise TypeError(f"Charset values must be Glyph, got {type(glyph).__name__}")
        self._glyphs[rune] = glyph

    def __delitem__(self, rune: int) -> None:
        del self._glyphs[_check_rune(rune)]

    def __contains__(self, rune: object) -> bool:
        return _check_rune(rune) in self._glyphs

    def __iter__(self) -> Iterator[int]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f"Charset({self._glyphs!r})"

    def require(self, rune: int) -> Glyph:
        """Get the glyph for a rune, failing loudly if it is missing.

        Raises:
            GlyphNotFoundError: If no glyph is stored for the rune
            TypeError: If rune is not an int
        """
        try:
            return self._glyphs[_check_rune(rune)]
        except KeyError:
            raise GlyphNotFoundError(rune) from None

    def runes(self) -> list[int]:
        """Get all runes in ascending order."""
        return sorted(self._glyphs)

    def max_size(self) -> tuple[int, int]:
        """Get the largest glyph width and height in the set.

        Width and height are maximised independently, so the result is
        the smallest box any glyph of this set fits in.

        Returns:
            Tuple of (width, height); (0, 0) for an empty set
        """
        width = max((g.width for g in self._glyphs.values()), default=0)
        height = max((g.height for g in self._glyphs.values()), default=0)
        return (width, height)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the document's glyphs object, runes ascending.

        Returns:
            Dictionary mapping decimal rune keys to glyph dictionaries
        """
        return {rune_to_key(rune): self._glyphs[rune].to_dict() for rune in self.runes()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Charset":
        """Deserialize from a document glyphs object.

        Args:
            data: Dictionary mapping decimal rune keys to glyph dictionaries

        Returns:
            Charset instance

        Raises:
            ValueError: If a key is not a decimal rune
        """
        return cls((key_to_rune(key), Glyph.from_dict(value)) for key, value in data.items())
