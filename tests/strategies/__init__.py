"""Hypothesis strategies for desktopfile property-based testing.

Usage:
    from tests.strategies import desktop_documents, locale_strings
"""

from .desktop import (
    comment_blocks,
    desktop_documents,
    entry_keys,
    group_names,
    locale_strings,
    locales,
    raw_values,
)

__all__ = [
    "comment_blocks",
    "desktop_documents",
    "entry_keys",
    "group_names",
    "locale_strings",
    "locales",
    "raw_values",
]
