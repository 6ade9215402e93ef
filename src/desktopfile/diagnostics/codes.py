"""Diagnostic codes and data structures.

Defines error codes, source locations, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceLocation",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (parser failures)
        2000-2999: Input errors (stream and file access)
    """

    # Syntax errors (1000-1999)
    MALFORMED_LINE = 1001
    KEY_BEFORE_GROUP = 1002
    DUPLICATE_GROUP = 1003
    DUPLICATE_KEY = 1004

    # Input errors (2000-2999)
    STREAM_READ_FAILED = 2001


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Location of an error in desktop file source.

    Attributes:
        line: Line number (1-indexed)
        content: Text of the offending line, trimmed of its line ending
        source_name: File name or other label of the source (optional)
    """

    line: int
    content: str = ""
    source_name: str | None = None

    def __post_init__(self) -> None:
        """Validate SourceLocation invariants.

        Raises:
            ValueError: If line is less than 1 (lines are 1-indexed).
        """
        if self.line < 1:
            msg = f"SourceLocation.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)

    def describe(self) -> str:
        """Return "name:line" or "line N" for error output."""
        if self.source_name:
            return f"{self.source_name}:{self.line}"
        return f"line {self.line}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        location: Source location (None for errors not tied to a line)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    location: SourceLocation | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    @property
    def line(self) -> int | None:
        """1-based line number, if the diagnostic has a location."""
        return self.location.line if self.location is not None else None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[DUPLICATE_KEY]: Duplicate key 'Name' in group 'Desktop Entry'
              --> line 3
               |
             3 | Name=B
              = help: Remove the repeated line or enable duplicate key joining

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
