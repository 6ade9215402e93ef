"""desktopfile exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DesktopFileError",
    "DesktopSyntaxError",
    "DuplicateGroupError",
    "DuplicateKeyError",
    "KeyBeforeGroupError",
    "MalformedLineError",
    "StreamReadError",
]


class DesktopFileError(Exception):
    """Base exception for all desktopfile errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DesktopFileError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DesktopSyntaxError(DesktopFileError):
    """Desktop file syntax error during parsing.

    Parsing stops at the first syntax error; no partial document is returned.

    Attributes:
        line: 1-based number of the offending line (None if unknown)
    """

    def __init__(self, message: str | Diagnostic, *, line: int | None = None) -> None:
        super().__init__(message)
        if line is None and self.diagnostic is not None:
            line = self.diagnostic.line
        self.line = line


class MalformedLineError(DesktopSyntaxError):
    """Line is neither blank, comment, group header nor key assignment.

    Example:
        [Desktop Entry]
        this line has no equals sign
    """


class KeyBeforeGroupError(DesktopSyntaxError):
    """Key assignment appears before the first group header.

    Example:
        Name=Test
        [Desktop Entry]
    """


class DuplicateGroupError(DesktopSyntaxError):
    """Group header repeated while duplicate groups are not allowed.

    Attributes:
        group: Name of the repeated group
    """

    def __init__(
        self, message: str | Diagnostic, *, line: int | None = None, group: str = ""
    ) -> None:
        super().__init__(message, line=line)
        self.group = group


class DuplicateKeyError(DesktopSyntaxError):
    """Key (or key+locale pair) repeated within a group.

    Raised only when neither joining nor ignoring duplicates is enabled.

    Attributes:
        key: The repeated key
        locale: Rendered locale of the repeated variant ("" for the default value)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        line: int | None = None,
        key: str = "",
        locale: str = "",
    ) -> None:
        super().__init__(message, line=line)
        self.key = key
        self.locale = locale


class StreamReadError(DesktopFileError):
    """The underlying reader failed before end of input.

    The original OSError or UnicodeDecodeError is chained as __cause__.
    """
