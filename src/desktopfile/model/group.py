"""Groups: the entries under one ``[Group Name]`` header.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .entry import Entry

if TYPE_CHECKING:
    from desktopfile.options import Options

    from .document import DesktopFile

__all__ = ["Group"]


class Group:
    """Ordered, keyed collection of entries under one group header.

    Entries are kept in insertion order, which is the order they are
    serialized in. Iterating a Group yields its entries.

    Attributes:
        name: Group name as written between the brackets
        comment: Comment and blank lines written directly above the header
    """

    __slots__ = ("__weakref__", "_document", "_entries", "_options", "comment", "name")

    def __init__(self, name: str = "", *, comment: str = "") -> None:
        self.name = name
        self.comment = comment
        self._entries: dict[str, Entry] = {}
        self._document: weakref.ref[DesktopFile] | None = None
        self._options: Options | None = None

    def __repr__(self) -> str:
        return f"Group(name={self.name!r}, keys={list(self._entries)!r})"

    @property
    def document(self) -> DesktopFile | None:
        """Owning document, or None for detached groups."""
        return self._document() if self._document is not None else None

    @property
    def options(self) -> Options | None:
        """Options of the owning document; kept after the document is freed."""
        return self._options

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Entries in insertion order."""
        return tuple(self._entries.values())

    def keys(self) -> list[str]:
        """Entry keys in insertion order."""
        return list(self._entries)

    def has_entry(self, key: str) -> bool:
        """Exact membership test."""
        return key in self._entries

    def get_entry(self, key: str) -> Entry:
        """Entry for ``key``.

        If the key is absent, returns a new empty Entry that belongs to no
        group, so lookups can be chained without checks:

            >>> group.get_entry("Missing").value.as_bool()
            False
        """
        existing = self._entries.get(key)
        if existing is not None:
            return existing
        return Entry(key)

    def add_entry(self, key: str) -> Entry:
        """Return the entry for ``key``, appending an empty one if absent."""
        existing = self._entries.get(key)
        if existing is not None:
            return existing
        entry = Entry(key)
        entry._group = weakref.ref(self)  # noqa: SLF001 - owner link
        entry._options = self._options  # noqa: SLF001
        self._entries[key] = entry
        return entry

    def remove_entry(self, key: str) -> None:
        """Remove the entry for ``key``; no-op if absent."""
        entry = self._entries.pop(key, None)
        if entry is not None:
            entry._group = None  # noqa: SLF001 - owner link
            entry._options = None  # noqa: SLF001

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)
