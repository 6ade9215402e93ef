"""Hypothesis fuzzing of the parser and value coercions.

Arbitrary input either parses or raises a DesktopSyntaxError; nothing else
may escape. Whatever parses re-serializes to a fixed point.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from desktopfile import DesktopSyntaxError, Options, parse, serialize
from desktopfile.model import Value
from desktopfile.syntax import DesktopFileParser
from tests.strategies import entry_keys, group_names, locale_strings, raw_values

pytestmark = pytest.mark.fuzz

_line_shapes = st.one_of(
    st.just(""),
    st.text(max_size=20).map(lambda text: "#" + text.replace("\n", " ")),
    group_names.map(lambda name: f"[{name}]"),
    st.builds(lambda key, value: f"{key}={value}", entry_keys, raw_values),
    st.builds(
        lambda key, locale, value: f"{key}[{locale}]={value}",
        entry_keys,
        locale_strings(),
        raw_values,
    ),
    st.text(alphabet="[]=#@_ ab\t\r", max_size=10),
)


@st.composite
def desktop_like_sources(draw: st.DrawFn) -> str:
    """Mostly well-formed lines with occasional noise."""
    lines = draw(st.lists(_line_shapes, max_size=25))
    return "".join(f"{line}\n" for line in lines)


class TestParserFuzz:
    """Robustness of the parser on generated input."""

    @given(st.text(max_size=300))
    @settings(max_examples=2000)
    def test_arbitrary_text_only_raises_syntax_errors(self, source: str) -> None:
        """Random text parses or fails with DesktopSyntaxError."""
        try:
            parse(source)
        except DesktopSyntaxError as e:
            event(f"error={type(e).__name__}")
        else:
            event("error=none")

    @given(desktop_like_sources(), st.booleans(), st.booleans(), st.booleans())
    @settings(max_examples=1000)
    def test_parsed_sources_reach_fixed_point(
        self, source: str, join: bool, ignore: bool, groups: bool
    ) -> None:
        """serialize(parse(text)) is stable under another parse/serialize."""
        parser = DesktopFileParser(
            Options(
                allow_duplicate_keys_join=join,
                allow_duplicate_keys_ignore=ignore,
                allow_duplicate_groups=groups,
            )
        )
        try:
            document = parser.parse(source)
        except DesktopSyntaxError as e:
            event(f"error={type(e).__name__}")
            return
        event("error=none")
        text = serialize(document)
        assert serialize(parse(text)) == text


class TestValueFuzz:
    """Coercions are total functions."""

    @given(st.text(max_size=50))
    @settings(max_examples=1000)
    def test_coercions_never_raise(self, raw: str) -> None:
        """Every typed view returns a value of its type for any text."""
        value = Value(raw)
        assert isinstance(value.as_string(), str)
        assert isinstance(value.as_bool(), bool)
        assert isinstance(value.as_int(), int)
        assert isinstance(value.as_float(), float)
        items = value.as_array()
        assert items
        assert all(isinstance(item, Value) for item in items)
