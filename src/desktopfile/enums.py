"""Enumerations for desktopfile type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class DuplicateKeyPolicy(StrEnum):
    """What the parser does with a key seen twice in one group.

    StrEnum provides automatic string conversion: str(DuplicateKeyPolicy.JOIN) == "join"
    """

    JOIN = "join"
    """Concatenate the new value and comment onto the first occurrence."""

    IGNORE = "ignore"
    """Keep the first occurrence, drop the repeated line."""

    REJECT = "reject"
    """Abort parsing with DuplicateKeyError."""


class LineKind(StrEnum):
    """Classification of a single source line.

    StrEnum provides automatic string conversion: str(LineKind.COMMENT) == "comment"
    """

    BLANK = "blank"
    """Empty or whitespace-only line."""

    COMMENT = "comment"
    """Line starting with #."""

    GROUP_HEADER = "group_header"
    """Group header: [Desktop Entry]"""

    ENTRY = "entry"
    """Key assignment: Name=Value or Name[de]=Wert"""

    INVALID = "invalid"
    """Anything else."""


class ValueType(StrEnum):
    """Typed views a Value can be coerced into.

    Used by the command line front end to pick a coercion.
    """

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    ARRAY = "array"


__all__ = [
    "DuplicateKeyPolicy",
    "LineKind",
    "ValueType",
]
