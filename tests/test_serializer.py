"""Tests for desktopfile.syntax.serializer."""

from __future__ import annotations

import io

import pytest

from desktopfile import DesktopFile, Options, parse, serialize
from desktopfile.model import Value
from desktopfile.syntax import DesktopFileParser, DesktopFileSerializer, SerializationValidationError


class TestSerializeRoundTrip:
    """Test that parsed text is written back unchanged."""

    def test_sample_file_round_trips(self, sample_source: str) -> None:
        """The sample launcher serializes to the exact input."""
        assert serialize(parse(sample_source)) == sample_source

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "# only a comment\n",
            "[Desktop Entry]\n",
            "[Desktop Entry]\nName=A\n",
            "\n\n[Desktop Entry]\n\nName=A\n\n",
            "[Desktop Entry]\nName[sr_RS@latin]=Urednik\n",
            "[Desktop Entry]\nComment=two\\nlines\\sand\\\\slash\n",
            "[A]\nK=1\n# between\n[B]\nK=2\n# end\n",
        ],
    )
    def test_canonical_sources_round_trip(self, source: str) -> None:
        """Canonical text survives parse and serialize byte for byte."""
        assert serialize(parse(source)) == source

    def test_whitespace_is_normalized(self) -> None:
        """Non-canonical spacing is written in canonical form."""
        text = serialize(parse("  [Desktop Entry]\nName  =  A  \n  # note\n"))
        assert text == "[Desktop Entry]\nName=A\n# note\n"

    def test_missing_final_newline_is_added(self) -> None:
        """Every written line ends with a line feed."""
        assert serialize(parse("[Desktop Entry]\nName=A")) == "[Desktop Entry]\nName=A\n"

    def test_locale_suffix_keeps_case(self) -> None:
        """Locale suffixes are written as parsed, minus the encoding."""
        text = serialize(parse("[Desktop Entry]\nName[de_DE.UTF-8@euro]=A\n"))
        assert text == "[Desktop Entry]\nName[de_DE@euro]=A\n"

    def test_joined_duplicates_write_once(self) -> None:
        """After a join, the key is written once with the joined value."""
        parser = DesktopFileParser(Options(allow_duplicate_keys_join=True))
        document = parser.parse("[Desktop Entry]\nName=A\nName=B\n")
        assert serialize(document) == "[Desktop Entry]\nName=AB\n"


class TestSerializeBuiltDocuments:
    """Test output for documents built through the API."""

    def test_entry_without_default_writes_only_variants(self) -> None:
        """No Key= line is invented for an entry with only variants."""
        document = DesktopFile()
        entry = document.default_group().add_entry("Name")
        entry.add_locale("de").value = Value("Editor")
        assert serialize(document) == "[Desktop Entry]\nName[de]=Editor\n"

    def test_empty_entry_writes_empty_default(self) -> None:
        """An entry with nothing set still appears."""
        document = DesktopFile()
        document.default_group().add_entry("Icon")
        assert serialize(document) == "[Desktop Entry]\nIcon=\n"

    def test_plain_comment_text_is_prefixed(self) -> None:
        """Comment text without # gets a comment prefix."""
        document = DesktopFile()
        group = document.default_group()
        group.comment = "Launcher\n\nfor the editor"
        group.add_entry("Name").value = "A"
        document.end_comment = "# done"
        assert serialize(document) == (
            "# Launcher\n\n# for the editor\n[Desktop Entry]\nName=A\n# done\n"
        )

    def test_set_value_output_reparses(self) -> None:
        """Values set from plain text survive writing and reading."""
        document = DesktopFile()
        entry = document.default_group().add_entry("Comment")
        entry.set_value("  padded\nand split  ")
        reparsed = parse(serialize(document))
        assert reparsed.default_group().get_entry("Comment").value.as_string() == (
            "  padded\nand split  "
        )

    def test_document_serialize_method(self) -> None:
        """DesktopFile.serialize() matches the module function."""
        document = parse("[Desktop Entry]\nName=A\n")
        assert document.serialize() == serialize(document)

    def test_write_to_stream(self) -> None:
        """write() sends the text to a stream."""
        document = parse("[Desktop Entry]\nName=A\n")
        buffer = io.StringIO()
        DesktopFileSerializer().write(document, buffer)
        assert buffer.getvalue() == "[Desktop Entry]\nName=A\n"


class TestSerializeValidation:
    """Test validate=True checks."""

    def test_valid_document_passes(self, sample_source: str) -> None:
        """A parsed document validates."""
        document = parse(sample_source)
        assert serialize(document, validate=True) == sample_source

    @pytest.mark.parametrize("name", ["", "  ", "a[b", "a]b", "two\nlines"])
    def test_bad_group_name(self, name: str) -> None:
        """Group names must be writable as a header."""
        document = DesktopFile()
        document.add_group(name)
        with pytest.raises(SerializationValidationError):
            serialize(document, validate=True)

    @pytest.mark.parametrize("key", ["", "A=B", "A[b]", " A", "A\nB"])
    def test_bad_key(self, key: str) -> None:
        """Keys must be non-empty and free of =, brackets and padding."""
        document = DesktopFile()
        document.default_group().add_entry(key)
        with pytest.raises(SerializationValidationError):
            serialize(document, validate=True)

    def test_line_break_in_value(self) -> None:
        """Raw values may not contain line breaks."""
        document = DesktopFile()
        document.default_group().add_entry("Comment").value = "a\nb"
        with pytest.raises(SerializationValidationError, match="line break"):
            serialize(document, validate=True)

    def test_line_break_in_variant(self) -> None:
        """Variant values are checked too."""
        document = DesktopFile()
        entry = document.default_group().add_entry("Name")
        entry.add_locale("de").value = Value("a\rb")
        with pytest.raises(SerializationValidationError):
            serialize(document, validate=True)

    def test_validation_error_is_value_error(self) -> None:
        """SerializationValidationError is a ValueError."""
        assert issubclass(SerializationValidationError, ValueError)

    def test_without_validate_writes_anything(self) -> None:
        """validate=False writes the raw text."""
        document = DesktopFile()
        document.default_group().add_entry("A=B").value = "c"
        assert serialize(document) == "[Desktop Entry]\nA=B=c\n"
