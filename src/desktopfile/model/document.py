"""The in-memory form of a whole desktop file.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import TYPE_CHECKING

from desktopfile.constants import DEFAULT_GROUP

from .group import Group

if TYPE_CHECKING:
    from desktopfile.options import Options

__all__ = ["DesktopFile"]


class DesktopFile:
    """A parsed desktop file: ordered groups plus the trailing comment.

    The document exclusively owns its groups, groups own their entries and
    entries own their localized variants. Groups and entries hold weak
    references back up the tree and a strong reference to the document's
    Options, so ``get_value()`` keeps resolving the default locale after the
    document itself is gone.

    Attributes:
        options: Options the document was parsed with
        end_comment: Comment and blank lines after the last key or header

    Example:
        >>> doc = DesktopFile()
        >>> doc.default_group().add_entry("Name").value = "Editor"
        >>> doc.serialize()
        '[Desktop Entry]\\nName=Editor\\n'
    """

    __slots__ = ("__weakref__", "_groups", "_options", "end_comment")

    def __init__(self, options: Options | None = None, *, end_comment: str = "") -> None:
        if options is None:
            from desktopfile.options import Options  # noqa: PLC0415 - circular

            options = Options()
        self._options = options
        self.end_comment = end_comment
        self._groups: dict[str, Group] = {}

    def __repr__(self) -> str:
        return f"DesktopFile(groups={list(self._groups)!r})"

    @property
    def options(self) -> Options:
        """Options the document was parsed with; shared with its groups and entries."""
        return self._options

    @property
    def groups(self) -> tuple[Group, ...]:
        """Groups in insertion order."""
        return tuple(self._groups.values())

    def group_names(self) -> list[str]:
        """Group names in insertion order."""
        return list(self._groups)

    def default_group(self) -> Group:
        """The ``[Desktop Entry]`` group, created and registered if absent."""
        return self.add_group(DEFAULT_GROUP)

    def has_group(self, name: str) -> bool:
        """Exact membership test."""
        return name in self._groups

    def get_group(self, name: str) -> Group:
        """Group called ``name``, or a new empty Group not attached to this document."""
        existing = self._groups.get(name)
        if existing is not None:
            return existing
        return Group(name)

    def add_group(self, name: str) -> Group:
        """Return the group called ``name``, appending an empty one if absent."""
        existing = self._groups.get(name)
        if existing is not None:
            return existing
        group = Group(name)
        group._document = weakref.ref(self)  # noqa: SLF001 - owner link
        group._options = self._options  # noqa: SLF001
        self._groups[name] = group
        return group

    def remove_group(self, name: str) -> None:
        """Remove the group called ``name``; no-op if absent."""
        group = self._groups.pop(name, None)
        if group is not None:
            group._document = None  # noqa: SLF001 - owner link
            group._options = None  # noqa: SLF001
            for entry in group:
                entry._options = None  # noqa: SLF001

    def serialize(self) -> str:
        """Render the document as desktop file text."""
        from desktopfile.syntax.serializer import serialize  # noqa: PLC0415 - circular

        return serialize(self)

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __iter__(self) -> Iterator[Group]:
        return iter(tuple(self._groups.values()))

    def __len__(self) -> int:
        return len(self._groups)
