"""Data model for desktop files.

DesktopFile -> Group -> Entry -> LocaleValue, plus the Locale and Value
value types.

Python 3.13+.
"""

from .document import DesktopFile
from .entry import Entry, LocaleValue
from .group import Group
from .locale import Locale, LocaleLike, coerce_locale
from .value import Value

__all__ = [
    "DesktopFile",
    "Entry",
    "Group",
    "Locale",
    "LocaleLike",
    "LocaleValue",
    "Value",
    "coerce_locale",
]
