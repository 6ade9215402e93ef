"""Desktop file syntax: parser and serializer.

Python 3.13+.
"""

from desktopfile.model import DesktopFile
from desktopfile.options import Options

from .parser import DesktopFileParser, classify_line, split_lines
from .serializer import DesktopFileSerializer, SerializationValidationError, serialize

__all__ = [
    "DesktopFileParser",
    "DesktopFileSerializer",
    "SerializationValidationError",
    "classify_line",
    "parse",
    "serialize",
    "split_lines",
]


def parse(source: str, options: Options | None = None) -> DesktopFile:
    """Parse desktop file text into a DesktopFile.

    Convenience function for DesktopFileParser(options).parse().

    Example:
        >>> from desktopfile.syntax import parse
        >>> doc = parse("[Desktop Entry]\\nTerminal=false\\n")
        >>> doc.default_group().get_entry("Terminal").value.as_bool()
        False
    """
    return DesktopFileParser(options).parse(source)
