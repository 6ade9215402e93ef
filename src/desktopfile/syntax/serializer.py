"""Serialize a DesktopFile back to desktop file text.

Values are written raw, so escape sequences survive a parse/serialize
round trip unchanged. Comments are written directly above the element they
belong to, and the document's end_comment closes the output.

Python 3.13+.
"""

from __future__ import annotations

from typing import TextIO

from desktopfile.constants import COMMENT_PREFIX
from desktopfile.model import DesktopFile, Entry, Group, Locale

__all__ = [
    "DesktopFileSerializer",
    "SerializationValidationError",
    "serialize",
]


class SerializationValidationError(ValueError):
    """Raised when a document cannot be written as valid desktop file text.

    Common causes:
    - Group names containing brackets or line breaks
    - Keys containing ``=``, brackets or line breaks
    - Raw values containing line breaks (use Value.from_text to escape them)
    """


def _check_single_line(text: str, what: str) -> None:
    if "\n" in text or "\r" in text:
        msg = f"{what} contains a line break: {text!r}"
        raise SerializationValidationError(msg)


def _validate_group(group: Group) -> None:
    _check_single_line(group.name, "Group name")
    if not group.name.strip() or "[" in group.name or "]" in group.name:
        msg = f"Invalid group name: {group.name!r}"
        raise SerializationValidationError(msg)


def _validate_entry(group: Group, entry: Entry) -> None:
    context = f"Key {entry.key!r} in group {group.name!r}"
    _check_single_line(entry.key, context)
    key = entry.key.strip()
    if not key or key != entry.key or any(ch in key for ch in "=[]"):
        msg = f"{context} is not a valid key"
        raise SerializationValidationError(msg)
    _check_single_line(entry.value.raw, f"{context} value")
    for locale_value in entry.locales:
        _check_single_line(locale_value.value.raw, f"{context} [{locale_value.locale}] value")
        if not locale_value.locale.language:
            msg = f"{context} has a localized value without language"
            raise SerializationValidationError(msg)


def _format_locale(locale: Locale) -> str:
    """Locale suffix with field case as stored (``sr_RS@latin`` stays lowercase)."""
    out = locale.language
    if locale.country:
        out += "_" + locale.country
    if locale.modifier:
        out += "@" + locale.modifier
    return out


def _format_comment(comment: str) -> str:
    """Comment block ready to emit.

    Parsed comments already consist of ``#`` and blank lines ending in
    newlines and pass through unchanged. Text set programmatically gets a
    ``# `` prefix on non-blank lines and a final newline.
    """
    if not comment:
        return ""
    lines = comment.split("\n")
    if lines[-1] == "":
        lines.pop()
    formatted = [
        line if not line.strip() or line.lstrip().startswith(COMMENT_PREFIX)
        else f"{COMMENT_PREFIX} {line}"
        for line in lines
    ]
    return "".join(f"{line}\n" for line in formatted)


class DesktopFileSerializer:
    """Converts a DesktopFile back to text.

    Stateless: all output is built locally in serialize(), so one instance
    can be shared.

    Usage:
        >>> from desktopfile import parse
        >>> doc = parse("[Desktop Entry]\\nName=Editor\\n")
        >>> DesktopFileSerializer().serialize(doc)
        '[Desktop Entry]\\nName=Editor\\n'
    """

    def serialize(self, document: DesktopFile, *, validate: bool = False) -> str:
        """Serialize document to text.

        Args:
            document: Document to write
            validate: If True, check names and values first (default: False)

        Returns:
            Desktop file text

        Raises:
            SerializationValidationError: If validate=True and the document
                cannot be written faithfully
        """
        if validate:
            for group in document:
                _validate_group(group)
                for entry in group:
                    _validate_entry(group, entry)

        output: list[str] = []
        for group in document:
            self._serialize_group(group, output)
        output.append(_format_comment(document.end_comment))
        return "".join(output)

    def write(self, document: DesktopFile, stream: TextIO, *, validate: bool = False) -> None:
        """Serialize document into a text stream."""
        stream.write(self.serialize(document, validate=validate))

    def _serialize_group(self, group: Group, output: list[str]) -> None:
        output.append(_format_comment(group.comment))
        output.append(f"[{group.name}]\n")
        for entry in group:
            self._serialize_entry(entry, output)

    def _serialize_entry(self, entry: Entry, output: list[str]) -> None:
        output.append(_format_comment(entry.comment))
        # An entry built only from localized lines gets no invented "Key=" line.
        if entry.has_default or not entry.locales:
            output.append(f"{entry.key}={entry.value.raw}\n")
        for locale_value in entry.locales:
            output.append(_format_comment(locale_value.comment))
            output.append(
                f"{entry.key}[{_format_locale(locale_value.locale)}]={locale_value.value.raw}\n"
            )


def serialize(document: DesktopFile, *, validate: bool = False) -> str:
    """Serialize DesktopFile to text.

    Convenience function for DesktopFileSerializer.serialize().

    Example:
        >>> from desktopfile import parse, serialize
        >>> text = "# Launcher\\n[Desktop Entry]\\nName=Editor\\nName[de]=Bearbeiter\\n"
        >>> serialize(parse(text)) == text
        True
    """
    return DesktopFileSerializer().serialize(document, validate=validate)
