"""desktopfile - freedesktop.org desktop entry files for Python.

Parses ``.desktop`` files into an ordered, comment-preserving document
model, resolves localized values (``Name[de]=...``) for a locale, offers
typed views of raw values (bool, int, float, ``;``-separated lists) and
writes documents back to text.

Public API:
    parse - Parse text into a DesktopFile
    serialize - Serialize a DesktopFile to text
    load, load_path, dump, dump_path - Stream and file helpers
    DesktopFile, Group, Entry, LocaleValue - Document model
    Locale, Value - Value types
    Options - Parser configuration

Exceptions:
    DesktopFileError - Base exception class
    DesktopSyntaxError - Parse errors (MalformedLineError, KeyBeforeGroupError,
        DuplicateGroupError, DuplicateKeyError)
    StreamReadError - Reader failures

Submodules:
    desktopfile.syntax - Parser and serializer
    desktopfile.diagnostics - Error types, codes and formatting
    desktopfile.cli - Command line front end
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    DesktopFileError,
    DesktopSyntaxError,
    DuplicateGroupError,
    DuplicateKeyError,
    KeyBeforeGroupError,
    MalformedLineError,
    StreamReadError,
)
from .loading import dump, dump_path, dumps, load, load_path, loads
from .model import DesktopFile, Entry, Group, Locale, LocaleValue, Value
from .options import Options
from .syntax import DesktopFileParser, DesktopFileSerializer, parse, serialize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("desktopfile")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DesktopFile",
    "DesktopFileError",
    "DesktopFileParser",
    "DesktopFileSerializer",
    "DesktopSyntaxError",
    "DuplicateGroupError",
    "DuplicateKeyError",
    "Entry",
    "Group",
    "KeyBeforeGroupError",
    "Locale",
    "LocaleValue",
    "MalformedLineError",
    "Options",
    "StreamReadError",
    "Value",
    "__version__",
    "dump",
    "dump_path",
    "dumps",
    "load",
    "load_path",
    "loads",
    "parse",
    "serialize",
]
