"""Raw desktop file values and their typed views.

A Value wraps the text to the right of ``=`` exactly as it appears in the
file, escapes included. Coercions are pure functions over that text and never
raise: a value that does not look like the requested type degrades to
``False``, ``0``, ``0.0`` or a one-element list.

Escape sequences (desktop entry specification, "Possible value types"):
    \\s space, \\n newline, \\t tab, \\r carriage return, \\\\ backslash.
In list values, \\; is a literal semicolon inside an element.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from desktopfile.constants import LIST_SEPARATOR

__all__ = ["Value"]

_ESCAPES: dict[str, str] = {
    "s": " ",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
}

# Each match is a disjoint two-character token, so "\\\\n" unescapes to "\\n"
# text rather than a backslash followed by a newline.
_ESCAPE_PATTERN = re.compile(r"\\([sntr\\])")

# Shared by is_* and as_*: ASCII digits only, no whitespace, no underscores.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True, slots=True)
class Value:
    """Raw value of a key, escapes preserved.

    Attributes:
        raw: Text exactly as written after the ``=``

    Example:
        >>> Value("Utility;Development;").as_array()
        [Value(raw='Utility'), Value(raw='Development')]
        >>> str(Value("two\\\\slines"))
        'two lines'
    """

    raw: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str):
            msg = f"Value.raw must be str, got {type(self.raw).__name__}"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Construction from plain text
    # ------------------------------------------------------------------

    @staticmethod
    def escape(text: str) -> str:
        """Escape plain text for writing after ``=``.

        Inverse of as_string(): backslash, newline, tab and carriage return
        are escaped, and leading/trailing spaces become ``\\s`` so the parser's
        whitespace trimming cannot eat them.
        """
        escaped = (
            text.replace("\\", "\\\\")
            .replace("\n", "\\n")
            .replace("\t", "\\t")
            .replace("\r", "\\r")
        )
        body = escaped.strip(" ")
        if not body:
            return "\\s" * len(escaped)
        leading = len(escaped) - len(escaped.lstrip(" "))
        trailing = len(escaped) - len(escaped.rstrip(" "))
        return "\\s" * leading + body + "\\s" * trailing

    @classmethod
    def from_text(cls, text: str) -> Value:
        """Build a Value whose as_string() equals ``text``."""
        return cls(cls.escape(text))

    @classmethod
    def from_list(cls, items: Iterable[str | Value]) -> Value:
        """Build a list value whose as_array() yields ``items``.

        Items are taken as raw text; literal semicolons are escaped. The
        result ends with ``;`` as the desktop entry specification recommends.
        """
        parts = [
            (item.raw if isinstance(item, Value) else item).replace(
                LIST_SEPARATOR, "\\" + LIST_SEPARATOR
            )
            for item in items
        ]
        if not parts:
            return cls("")
        return cls(LIST_SEPARATOR.join(parts) + LIST_SEPARATOR)

    # ------------------------------------------------------------------
    # String view
    # ------------------------------------------------------------------

    def as_string(self) -> str:
        """Return the value with escape sequences replaced."""
        return _ESCAPE_PATTERN.sub(lambda m: _ESCAPES[m.group(1)], self.raw)

    def __str__(self) -> str:
        return self.as_string()

    # ------------------------------------------------------------------
    # Typed views
    # ------------------------------------------------------------------

    def is_bool(self) -> bool:
        """True if the value is "true" or "false" (any case)."""
        return self.raw.lower() in ("true", "false")

    def as_bool(self) -> bool:
        """True only for "true" (any case); anything else is False."""
        return self.raw.lower() == "true"

    def is_int(self) -> bool:
        """True if the value is an optionally signed decimal integer."""
        return _INT_PATTERN.fullmatch(self.raw) is not None

    def as_int(self) -> int:
        """Integer value, or 0 when is_int() is False."""
        if not self.is_int():
            return 0
        return int(self.raw)

    def is_float(self) -> bool:
        """True if the value is a decimal number with optional exponent."""
        return _FLOAT_PATTERN.fullmatch(self.raw) is not None

    def as_float(self) -> float:
        """Float value, or 0.0 when is_float() is False."""
        if not self.is_float():
            return 0.0
        return float(self.raw)

    def is_array(self) -> bool:
        """True if the value contains at least one unescaped ``;``.

        ``a\\\\;b`` is an escaped backslash followed by a separator, so it is an
        array even though counting ``;`` against ``\\;`` would say otherwise.
        """
        return _split_list(self.raw)[1]

    def as_array(self) -> list[Value]:
        """Split on unescaped ``;``.

        ``\\;`` becomes a literal ``;`` inside its element, a trailing ``;``
        adds no empty element, and a value that is not a list comes back as
        ``[self]``.
        """
        items, is_list = _split_list(self.raw)
        if not is_list:
            return [self]
        return [Value(item) for item in items]


def _split_list(raw: str) -> tuple[list[str], bool]:
    """Split raw list text; return the items and whether any separator was seen."""
    items: list[str] = []
    current: list[str] = []
    seen_separator = False
    ends_with_separator = False
    i = 0
    length = len(raw)
    while i < length:
        ch = raw[i]
        if ch == "\\" and i + 1 < length:
            following = raw[i + 1]
            # Other escapes stay raw so as_string() still sees them.
            current.append(following if following == LIST_SEPARATOR else raw[i : i + 2])
            ends_with_separator = False
            i += 2
            continue
        if ch == LIST_SEPARATOR:
            items.append("".join(current))
            current = []
            seen_separator = True
            ends_with_separator = True
        else:
            current.append(ch)
            ends_with_separator = False
        i += 1
    if not ends_with_separator:
        items.append("".join(current))
    return items, seen_separator
