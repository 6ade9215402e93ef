"""Line-oriented desktop file parser.

Architecture:
    The parser is a two-state machine (before the first group header,
    inside a group) fed one logical line at a time. Each line is trimmed
    and classified by :func:`classify_line`:

    - blank and ``#`` lines accumulate in a pending comment buffer
    - ``[Name]`` starts (or, if allowed, re-enters) a group
    - ``Key=Value`` / ``Key[locale]=Value`` adds to the current group
    - anything else is a :class:`~desktopfile.diagnostics.MalformedLineError`

    The pending comment is attached to the next group, entry or localized
    value; whatever is left at end of input becomes the document's
    ``end_comment``.

    The first error aborts the parse; no partial document is returned.

Security:
    Input longer than ``Options.max_source_size`` characters is rejected
    before (or while) scanning.

See Also:
    - :mod:`desktopfile.syntax.serializer` - inverse operation
    - :mod:`desktopfile.loading` - stream and file helpers
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from desktopfile.constants import COMMENT_PREFIX
from desktopfile.diagnostics import (
    DuplicateGroupError,
    DuplicateKeyError,
    ErrorTemplate,
    KeyBeforeGroupError,
    MalformedLineError,
    SourceLocation,
)
from desktopfile.enums import DuplicateKeyPolicy, LineKind
from desktopfile.model import DesktopFile, Entry, Group, Locale, LocaleValue, Value
from desktopfile.options import Options

__all__ = ["DesktopFileParser", "classify_line", "split_lines"]

logger = logging.getLogger(__name__)


def classify_line(line: str) -> LineKind:
    """Classify one trimmed source line.

    Example:
        >>> classify_line("[Desktop Entry]")
        <LineKind.GROUP_HEADER: 'group_header'>
        >>> classify_line("Name[de]=Editor")
        <LineKind.ENTRY: 'entry'>
    """
    if not line:
        return LineKind.BLANK
    if line.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if line.startswith("[") and line.endswith("]"):
        name = line[1:-1]
        if name.strip() and "[" not in name and "]" not in name:
            return LineKind.GROUP_HEADER
    if "=" in line:
        return LineKind.ENTRY
    return LineKind.INVALID


def split_lines(source: str) -> list[str]:
    """Split source on line feeds.

    A final line without terminator is kept; the empty string after a final
    line feed is not a line.
    """
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


@dataclass(slots=True)
class _ParseState:
    """Mutable state of a single parse pass."""

    document: DesktopFile
    source_name: str | None = None
    group: Group | None = None
    pending_comment: list[str] = field(default_factory=list)
    line_number: int = 0
    line: str = ""
    consumed: int = 0

    def take_comment(self) -> str:
        comment = "".join(self.pending_comment)
        self.pending_comment.clear()
        return comment

    def location(self) -> SourceLocation:
        return SourceLocation(
            line=self.line_number, content=self.line, source_name=self.source_name
        )


class DesktopFileParser:
    """Desktop file parser.

    A parser is immutable and can be reused; all per-parse state lives in
    a local object created by each call.

    Attributes:
        options: Duplicate policies, default locale and size limit
    """

    __slots__ = ("_options",)

    def __init__(self, options: Options | None = None) -> None:
        self._options = options if options is not None else Options()

    @property
    def options(self) -> Options:
        """Options used for every parse."""
        return self._options

    def parse(self, source: str, *, source_name: str | None = None) -> DesktopFile:
        """Parse desktop file text.

        Args:
            source: Complete file content
            source_name: File name used in diagnostics (optional)

        Returns:
            Parsed DesktopFile carrying this parser's options

        Raises:
            ValueError: If source exceeds options.max_source_size
            MalformedLineError: Line is not blank, comment, header or key
            KeyBeforeGroupError: Key before the first group header
            DuplicateGroupError: Repeated header without allow_duplicate_groups
            DuplicateKeyError: Repeated key without a duplicate key policy

        Example:
            >>> doc = DesktopFileParser().parse("[Desktop Entry]\\nName=Editor\\n")
            >>> doc.default_group().get_entry("Name").value.as_string()
            'Editor'
        """
        self._check_size(len(source))
        return self.parse_lines(split_lines(source), source_name=source_name)

    def parse_lines(
        self, lines: Iterable[str], *, source_name: str | None = None
    ) -> DesktopFile:
        """Parse an iterable of lines (with or without line terminators).

        Lines are consumed once, front to back. Exceptions raised by the
        iterable (such as StreamReadError) propagate unchanged.

        Raises:
            Same as parse().
        """
        state = _ParseState(document=DesktopFile(self._options), source_name=source_name)

        for line_number, raw_line in enumerate(lines, start=1):
            state.consumed += len(raw_line)
            self._check_size(state.consumed)
            state.line_number = line_number
            state.line = raw_line.strip()
            self._process_line(state)

        if state.pending_comment:
            state.document.end_comment = state.take_comment()

        logger.debug(
            "Parsed desktop file %s: %d lines, %d groups",
            source_name or "<string>",
            state.line_number,
            len(state.document),
        )
        return state.document

    def _check_size(self, size: int) -> None:
        limit = self._options.max_source_size
        if limit > 0 and size > limit:
            msg = (
                f"Source size ({size:,} characters) exceeds maximum "
                f"({limit:,} characters). "
                "Configure Options.max_source_size to increase limit."
            )
            raise ValueError(msg)

    def _process_line(self, state: _ParseState) -> None:
        line = state.line
        match classify_line(line):
            case LineKind.BLANK | LineKind.COMMENT:
                state.pending_comment.append(line + "\n")
            case LineKind.GROUP_HEADER:
                self._start_group(state, line[1:-1].strip())
            case LineKind.ENTRY:
                self._add_key(state)
            case LineKind.INVALID:
                raise MalformedLineError(ErrorTemplate.malformed_line(state.location()))

    def _start_group(self, state: _ParseState, name: str) -> None:
        document = state.document
        if document.has_group(name):
            if not self._options.allow_duplicate_groups:
                raise DuplicateGroupError(
                    ErrorTemplate.duplicate_group(name, state.location()), group=name
                )
            logger.debug("Merging repeated group '%s' at line %d", name, state.line_number)
        group = document.add_group(name)
        group.comment += state.take_comment()
        state.group = group

    def _add_key(self, state: _ParseState) -> None:
        group = state.group
        if group is None:
            raise KeyBeforeGroupError(ErrorTemplate.key_before_group(state.location()))

        key_text, _, value_text = state.line.partition("=")
        key = key_text.strip()
        value = Value(value_text.strip())

        locale: Locale | None = None
        if key.endswith("]") and "[" in key:
            bracket = key.index("[")
            locale = Locale.parse(key[bracket + 1 : -1].strip())
            key = key[:bracket].strip()
            if not locale.language:
                raise MalformedLineError(ErrorTemplate.malformed_line(state.location()))
        if not key:
            raise MalformedLineError(ErrorTemplate.malformed_line(state.location()))

        entry = group.add_entry(key)
        if locale is None:
            self._set_default(state, group, entry, value)
        else:
            self._set_localized(state, group, entry, locale, value)

    def _set_default(
        self, state: _ParseState, group: Group, entry: Entry, value: Value
    ) -> None:
        if not entry.has_default:
            entry.value = value
            entry.comment += state.take_comment()
            return

        match self._options.duplicate_key_policy:
            case DuplicateKeyPolicy.JOIN:
                entry.value = Value(entry.value.raw + value.raw)
                entry.comment += state.take_comment()
            case DuplicateKeyPolicy.IGNORE:
                logger.debug(
                    "Ignoring repeated key '%s' at line %d", entry.key, state.line_number
                )
                state.take_comment()
            case DuplicateKeyPolicy.REJECT:
                raise DuplicateKeyError(
                    ErrorTemplate.duplicate_key(entry.key, group.name, state.location()),
                    key=entry.key,
                )

    def _set_localized(
        self,
        state: _ParseState,
        group: Group,
        entry: Entry,
        locale: Locale,
        value: Value,
    ) -> None:
        if not entry.has_locale(locale):
            locale_value: LocaleValue = entry.add_locale(locale)
            locale_value.value = value
            locale_value.comment += state.take_comment()
            return

        locale_value = entry.get_locale(locale)
        match self._options.duplicate_key_policy:
            case DuplicateKeyPolicy.JOIN:
                locale_value.value = Value(locale_value.value.raw + value.raw)
                locale_value.comment += state.take_comment()
            case DuplicateKeyPolicy.IGNORE:
                logger.debug(
                    "Ignoring repeated key '%s[%s]' at line %d",
                    entry.key,
                    locale,
                    state.line_number,
                )
                state.take_comment()
            case DuplicateKeyPolicy.REJECT:
                raise DuplicateKeyError(
                    ErrorTemplate.duplicate_key(
                        entry.key, group.name, state.location(), locale=locale.render()
                    ),
                    key=entry.key,
                    locale=locale.render(),
                )
