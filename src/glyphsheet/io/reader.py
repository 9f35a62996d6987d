"""Font config reader.

This module provides the FontConfigReader class and the `load`/`loads`
shortcuts for turning a JSON document into a domain FontConfig.
"""

from typing import IO, AnyStr

import structlog
from pydantic import ValidationError

from glyphsheet.config.settings import check_encoding
from glyphsheet.domain.font_config import FontConfig
from glyphsheet.exceptions import MalformedDocumentError
from glyphsheet.io.converter import document_to_domain, summarize_validation_error
from glyphsheet.io.schema import FontConfigDocument

logger = structlog.get_logger(__name__)


def loads(data: bytes | bytearray | memoryview | str, encoding: str = "utf-8") -> FontConfig:
    """Parse a font config from an in-memory document.

    Args:
        data: Complete JSON document
        encoding: Encoding used when data is binary

    Returns:
        Newly built FontConfig

    Raises:
        ValueError: If encoding is not a known codec
        MalformedDocumentError: If data is empty or not a valid document
    """
    check_encoding(encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            text = bytes(data).decode(encoding)
        except UnicodeDecodeError as e:
            logger.warning("Rejected font config", reason="undecodable", error=str(e))
            raise MalformedDocumentError(f"not valid {encoding} text: {e}") from e
    else:
        text = data

    if not text.strip():
        logger.warning("Rejected font config", reason="empty")
        raise MalformedDocumentError("document is empty")

    try:
        document = FontConfigDocument.model_validate_json(text)
    except ValidationError as e:
        reason = summarize_validation_error(e)
        logger.warning("Rejected font config", reason=reason)
        raise MalformedDocumentError(reason, errors=e.errors(include_url=False)) from e

    config = document_to_domain(document)
    logger.debug(
        "Font config loaded",
        glyph_count=len(config.glyphs),
        rune_low=config.rune_low,
        rune_high=config.rune_high,
    )
    return config


class FontConfigReader:
    """Loads a FontConfig from a readable stream.

    The whole stream is read into memory before parsing. The stream is
    not closed.

    Example:
        with open("font.json", "rb") as f:
            config = FontConfigReader(f).read()
    """

    def __init__(self, stream: IO[AnyStr], encoding: str = "utf-8") -> None:
        """Initialize the reader.

        Args:
            stream: Binary or text stream positioned at the document start
            encoding: Encoding used when the stream yields bytes

        Raises:
            ValueError: If encoding is not a known codec
        """
        check_encoding(encoding)
        self._stream = stream
        self._encoding = encoding

    def read(self) -> FontConfig:
        """Read and parse the remaining stream contents.

        Returns:
            Newly built FontConfig

        Raises:
            OSError: If the stream cannot be read (propagated unchanged)
            MalformedDocumentError: If the contents are not a valid document
        """
        data = self._stream.read()
        if data is None:
            # Non-blocking raw streams return None when no data is ready.
            raise MalformedDocumentError("stream returned no data")
        return loads(data, encoding=self._encoding)


def load(stream: IO[AnyStr], encoding: str = "utf-8") -> FontConfig:
    """Read a font config from a JSON encoded stream."""
    return FontConfigReader(stream, encoding=encoding).read()
