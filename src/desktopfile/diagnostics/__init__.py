"""Diagnostic system for desktop file errors.

Provides structured error diagnostics with codes, source locations and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation
from .errors import (
    DesktopFileError,
    DesktopSyntaxError,
    DuplicateGroupError,
    DuplicateKeyError,
    KeyBeforeGroupError,
    MalformedLineError,
    StreamReadError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DesktopFileError",
    "DesktopSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateGroupError",
    "DuplicateKeyError",
    "ErrorTemplate",
    "KeyBeforeGroupError",
    "MalformedLineError",
    "OutputFormat",
    "SourceLocation",
    "StreamReadError",
]
