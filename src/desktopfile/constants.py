"""Shared constants for desktopfile.

Constants are grouped by domain:
- Format: names and characters fixed by the desktop entry format
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Format
    "DEFAULT_GROUP",
    "COMMENT_PREFIX",
    "LIST_SEPARATOR",
    "DEFAULT_ENCODING",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# FORMAT
# ============================================================================

# Canonical root group of every desktop entry file.
DEFAULT_GROUP: str = "Desktop Entry"

COMMENT_PREFIX: str = "#"

# Separator for multi-valued keys (Categories=Utility;Development;).
LIST_SEPARATOR: str = ";"

# Desktop entry files are UTF-8 encoded.
DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Real desktop files are a few KB; anything near this is not a launcher.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
