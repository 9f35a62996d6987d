"""Tests for the document schema and the document <-> domain converters."""

import pytest
from pydantic import ValidationError

from glyphsheet.domain import Charset, Direction, FontConfig, Glyph
from glyphsheet.exceptions import MalformedDocumentError, SerializationError
from glyphsheet.io import loads
from glyphsheet.io.converter import (
    document_to_domain,
    domain_to_document,
    summarize_validation_error,
)
from glyphsheet.io.schema import FontConfigDocument, GlyphDocument

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class TestGlyphDocument:
    def test_defaults(self):
        assert GlyphDocument().model_dump() == {
            "x": 0,
            "y": 0,
            "width": 0,
            "height": 0,
            "advance": 0,
        }

    def test_unknown_fields_ignored(self):
        g = GlyphDocument.model_validate_json('{"x": 3, "bearing": 1}')
        assert g.x == 3
        assert not hasattr(g, "bearing")

    @pytest.mark.parametrize("raw", ["true", "1.5", '"3"', "null", "[]"])
    def test_rejects_non_integers(self, raw):
        with pytest.raises(ValidationError):
            GlyphDocument.model_validate_json(f'{{"width": {raw}}}')


class TestFontConfigDocument:
    def test_empty_object(self):
        doc = FontConfigDocument.model_validate_json("{}")
        assert doc.direction == 0
        assert doc.glyphs == {}

    @pytest.mark.parametrize("value", [0, 1, 2])
    def test_known_directions(self, value):
        doc = FontConfigDocument.model_validate_json(f'{{"direction": {value}}}')
        assert doc.direction == value

    @pytest.mark.parametrize("value", [-1, 3, 99])
    def test_unknown_direction_raises(self, value):
        with pytest.raises(ValidationError, match="Unknown direction ordinal"):
            FontConfigDocument.model_validate_json(f'{{"direction": {value}}}')

    def test_glyph_key_must_be_decimal(self):
        with pytest.raises(ValidationError, match="decimal rune"):
            FontConfigDocument.model_validate_json('{"glyphs": {"A": {}}}')

    def test_glyphs_must_be_object(self):
        with pytest.raises(ValidationError):
            FontConfigDocument.model_validate_json('{"glyphs": [1, 2]}')


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------


class TestDocumentToDomain:
    def test_converts_all_fields(self):
        doc = FontConfigDocument(
            direction=1,
            rune_low=0x600,
            rune_high=0x6FF,
            glyphs={"1575": GlyphDocument(x=1, y=2, width=3, height=4, advance=5)},
        )
        config = document_to_domain(doc)

        assert config.direction is Direction.RIGHT_TO_LEFT
        assert (config.rune_low, config.rune_high) == (0x600, 0x6FF)
        assert isinstance(config.glyphs, Charset)
        assert config.glyphs[1575] == Glyph(1, 2, 3, 4, 5)


class TestDomainToDocument:
    def test_converts_all_fields(self):
        config = FontConfig(direction=Direction.TOP_TO_BOTTOM, rune_low=1, rune_high=2)
        config.glyphs[2] = Glyph(advance=8)
        doc = domain_to_document(config)

        assert doc.direction == 2
        assert doc.glyphs == {"2": GlyphDocument(advance=8)}

    def test_rejects_non_config(self):
        with pytest.raises(SerializationError, match="expected FontConfig"):
            domain_to_document({"direction": 0})  # type: ignore[arg-type]

    def test_rejects_plain_int_direction(self):
        config = FontConfig()
        config.direction = 1  # type: ignore[assignment]
        with pytest.raises(SerializationError, match="direction must be a Direction"):
            domain_to_document(config)

    def test_rejects_float_bounds(self):
        config = FontConfig(rune_low=1.5)  # type: ignore[arg-type]
        with pytest.raises(SerializationError, match="rune_low"):
            domain_to_document(config)

    def test_rejects_bool_glyph_field(self):
        config = FontConfig()
        config.glyphs[65] = Glyph(x=True)  # type: ignore[arg-type]
        with pytest.raises(SerializationError, match="x: "):
            domain_to_document(config)

    def test_rejects_string_rune_in_plain_dict(self):
        config = FontConfig()
        config.glyphs = {"A": Glyph()}  # type: ignore[assignment]
        with pytest.raises(SerializationError, match="decimal rune"):
            domain_to_document(config)

    def test_rejects_mixed_rune_types(self):
        config = FontConfig()
        config.glyphs = {1: Glyph(), "a": Glyph()}  # type: ignore[assignment]
        with pytest.raises(SerializationError, match="not comparable"):
            domain_to_document(config)

    def test_rejects_non_glyph_values(self):
        config = FontConfig()
        config.glyphs = {65: {"x": 1}}  # type: ignore[assignment]
        with pytest.raises(SerializationError, match="must be a Glyph"):
            domain_to_document(config)


class TestSummarizeValidationError:
    def test_includes_location(self):
        with pytest.raises(ValidationError) as exc_info:
            FontConfigDocument.model_validate_json('{"glyphs": {"65": {"height": "tall"}}}')
        summary = summarize_validation_error(exc_info.value)
        assert summary.startswith("glyphs.65.height: ")

    def test_document_level_location(self):
        with pytest.raises(ValidationError) as exc_info:
            FontConfigDocument.model_validate_json("not json")
        assert summarize_validation_error(exc_info.value).startswith("<document>: ")


# ---------------------------------------------------------------------------
# Malformed documents through loads
# ---------------------------------------------------------------------------


class TestMalformedDocuments:
    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "[]",
            "42",
            '"font"',
            "null",
            '{"direction": 3}',
            '{"direction": true}',
            '{"rune_low": "65"}',
            '{"rune_high": 1.5}',
            '{"glyphs": null}',
            '{"glyphs": {"U+0041": {}}}',
            '{"glyphs": {"65": {"x": null}}}',
            '{"glyphs": {"65": []}}',
            '{"direction": 0',
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(MalformedDocumentError):
            loads(text)

    def test_carries_pydantic_errors(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            loads('{"direction": 5, "rune_low": "x"}')

        locations = {tuple(e["loc"]) for e in exc_info.value.errors}
        assert locations == {("direction",), ("rune_low",)}
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_unknown_fields_ignored(self):
        config = loads('{"name": "Terminus", "rune_low": 32, "image": "font.png"}')
        assert config == FontConfig(rune_low=32)
