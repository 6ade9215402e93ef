"""Property-based round-trip tests: serialize then parse preserves documents."""

from __future__ import annotations

from hypothesis import event, given

from desktopfile import DesktopFile, parse, serialize
from tests.strategies import desktop_documents


def _snapshot(document: DesktopFile) -> list[tuple[object, ...]]:
    """Structure of a document as plain comparable data."""
    groups: list[tuple[object, ...]] = []
    for group in document:
        entries = [
            (
                entry.key,
                entry.has_default,
                entry.value.raw,
                entry.comment,
                [(lv.locale, lv.value.raw, lv.comment) for lv in entry.locales],
            )
            for entry in group
        ]
        groups.append((group.name, group.comment, entries))
    groups.append(("<end>", document.end_comment))
    return groups


class TestSerializeParseRoundTrip:
    """Serialized documents parse back to the same structure."""

    @given(desktop_documents())
    def test_structure_survives(self, document: DesktopFile) -> None:
        """PROPERTY: parse(serialize(doc)) has the same groups, entries and comments."""
        reparsed = parse(serialize(document))
        event(f"groups={len(reparsed)}")
        assert _snapshot(reparsed) == _snapshot(document)

    @given(desktop_documents())
    def test_serialization_is_stable(self, document: DesktopFile) -> None:
        """PROPERTY: serializing a reparsed document gives the same text."""
        text = serialize(document)
        assert serialize(parse(text)) == text

    @given(desktop_documents())
    def test_generated_documents_validate(self, document: DesktopFile) -> None:
        """PROPERTY: generated documents pass serializer validation."""
        assert serialize(document, validate=True) == serialize(document)
