"""glyphsheet - Metadata model for bitmap sprite-sheet fonts.

A glyphsheet font is an image holding every glyph plus a JSON document
describing where each glyph sits on that image, how far the pen advances
after it and which direction strings flow in.

Example:
    >>> import io
    >>> from glyphsheet import FontConfig, Glyph, load, save
    >>> config = FontConfig(rune_low=65, rune_high=65)
    >>> config.glyphs[65] = Glyph(x=0, y=0, width=10, height=12, advance=11)
    >>> buffer = io.BytesIO()
    >>> save(config, buffer)
    >>> _ = buffer.seek(0)
    >>> load(buffer) == config
    True
"""

from glyphsheet.domain import Charset, Direction, FontConfig, Glyph
from glyphsheet.exceptions import (
    DocumentError,
    GlyphsheetError,
    MalformedDocumentError,
    SerializationError,
)
from glyphsheet.io import FontConfigReader, FontConfigWriter, dumps, load, loads, save

__version__ = "0.1.0"

__all__ = [
    "Charset",
    "Direction",
    "DocumentError",
    "FontConfig",
    "FontConfigReader",
    "FontConfigWriter",
    "Glyph",
    "GlyphsheetError",
    "MalformedDocumentError",
    "SerializationError",
    "__version__",
    "dumps",
    "load",
    "loads",
    "save",
]
