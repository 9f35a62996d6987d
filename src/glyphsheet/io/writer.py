"""Font config writer.

This module provides the FontConfigWriter class and the `save`/`dumps`
shortcuts for writing a domain FontConfig as an indented JSON document.
"""

import codecs
import io
from typing import IO, AnyStr

import structlog

from glyphsheet.config.settings import SerializationConfig
from glyphsheet.domain.font_config import FontConfig
from glyphsheet.io.converter import domain_to_document

logger = structlog.get_logger(__name__)

_TEXT_STREAM_TYPES = (io.TextIOBase, codecs.StreamWriter, codecs.StreamReaderWriter)
_BINARY_STREAM_TYPES = (io.BufferedIOBase, io.RawIOBase)


def _is_text_stream(stream: object) -> bool:
    """Decide whether a stream takes str rather than bytes.

    Known io classes decide by type. Anything else (spooled temporary
    files, wrappers) is judged by its mode string, then by whether it
    reports a text encoding.
    """
    if isinstance(stream, _TEXT_STREAM_TYPES):
        return True
    if isinstance(stream, _BINARY_STREAM_TYPES):
        return False
    mode = getattr(stream, "mode", None)
    if isinstance(mode, str):
        return "b" not in mode
    return isinstance(getattr(stream, "encoding", None), str)


def dumps(config: FontConfig, settings: SerializationConfig | None = None) -> str:
    """Render a font config as JSON text.

    Output is deterministic: equal values always produce identical text.

    Args:
        config: Font config to render
        settings: Formatting options (two-space indent by default)

    Returns:
        JSON document without a trailing newline

    Raises:
        SerializationError: If the value cannot be encoded
    """
    settings = settings or SerializationConfig()
    document = domain_to_document(config, sort_glyphs=settings.sort_glyphs)
    return document.model_dump_json(indent=settings.indent or None)


class FontConfigWriter:
    """Writes a FontConfig to a writable stream.

    The stream is neither flushed nor closed; that stays with the caller.

    Example:
        with open("font.json", "wb") as f:
            FontConfigWriter(f).write(config)
    """

    def __init__(self, stream: IO[AnyStr], settings: SerializationConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            stream: Binary or text stream to write to
            settings: Formatting options
        """
        self._stream = stream
        self._settings = settings or SerializationConfig()

    def write(self, config: FontConfig) -> int:
        """Encode and write a font config.

        The document is fully encoded before the first write, so an
        encoding failure leaves the stream untouched.

        Args:
            config: Font config to write

        Returns:
            Number of bytes (or characters, for text streams) written

        Raises:
            SerializationError: If the value cannot be encoded
            OSError: If the stream cannot be written (propagated unchanged)
        """
        text = dumps(config, self._settings)
        if _is_text_stream(self._stream):
            payload: str | bytes = text
        else:
            payload = text.encode(self._settings.encoding)

        if isinstance(self._stream, io.RawIOBase):
            self._write_all(payload)  # type: ignore[arg-type]
        else:
            self._stream.write(payload)  # type: ignore[arg-type]
        logger.debug(
            "Font config saved",
            glyph_count=len(config.glyphs),
            rune_low=config.rune_low,
            rune_high=config.rune_high,
            bytes=len(payload),
        )
        return len(payload)

    def _write_all(self, payload: bytes) -> None:
        """Write to a raw stream, which may accept fewer bytes per call."""
        view = memoryview(payload)
        while view:
            written = self._stream.write(view)  # type: ignore[arg-type]
            if written is None:
                raise BlockingIOError("stream is not ready for writing")
            if written == 0:
                raise OSError("stream accepted no bytes")
            view = view[written:]


def save(
    config: FontConfig, stream: IO[AnyStr], settings: SerializationConfig | None = None
) -> None:
    """Write a font config to the given stream as JSON data."""
    FontConfigWriter(stream, settings).write(config)
