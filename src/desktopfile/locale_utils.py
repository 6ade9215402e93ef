"""Locale utilities bridging desktop file locales, POSIX environment and Babel.

Centralizes locale format normalization and Babel lookups so the model
layer never imports Babel eagerly.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Pseudo-locales that carry no language information.
_NEUTRAL_LOCALES = frozenset({"", "C", "POSIX", "C.UTF-8", "C.utf8"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while desktop files and POSIX use
    underscores (en_US).

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("sr_RS@latin")  # Already normalized
        'sr_RS@latin'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("de_DE")
        >>> locale.territory
        'DE'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str | None:
    """Detect the user's message locale from the environment.

    Detection order follows gettext and the desktop entry specification:
    1. LC_ALL environment variable (overrides all)
    2. LC_MESSAGES environment variable (for message catalogs)
    3. LANG environment variable (default locale)
    4. Python locale.getlocale() (OS-level locale)

    Encoding and modifier suffixes are kept; Locale.parse() strips the
    encoding itself. "C" and "POSIX" pseudo-locales are skipped.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return None.

    Returns:
        Raw locale string such as "de_DE.UTF-8@euro", or None.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in _NEUTRAL_LOCALES:
            return value

    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError as e:
        logger.debug("locale.getlocale() failed: %s", e)
        system_locale = None
    if system_locale and system_locale not in _NEUTRAL_LOCALES:
        return system_locale

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return None
