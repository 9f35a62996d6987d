"""Font config I/O layer for glyphsheet.

This module handles reading and writing font config JSON documents.
It provides a clean abstraction layer between the pydantic document
schema and the domain models.

Key responsibilities:
- Validate incoming documents against a strict schema
- Convert documents to and from domain models
- Write deterministic, indented JSON

Key classes:
- FontConfigReader: Load a font config from a stream
- FontConfigWriter: Save a font config to a stream
"""

from glyphsheet.io.reader import FontConfigReader, load, loads
from glyphsheet.io.writer import FontConfigWriter, dumps, save

__all__ = [
    "FontConfigReader",
    "FontConfigWriter",
    "dumps",
    "load",
    "loads",
    "save",
]
