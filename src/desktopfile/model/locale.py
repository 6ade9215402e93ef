"""Desktop file locale identifiers.

Keys may carry a locale suffix, ``Name[sr_RS@latin]=...``, in the POSIX
form ``lang_COUNTRY.ENCODING@MODIFIER``. The encoding part is ignored.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from desktopfile.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = ["Locale", "LocaleLike", "coerce_locale"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Locale:
    """Locale of a localized value: ``language[_COUNTRY][@MODIFIER]``.

    Fields keep the text as written in the source. Rendering normalizes case
    (language lowercase, country and modifier uppercase) and equality compares
    the normalized forms, so ``Locale.parse("EN_us") == Locale.parse("en_US")``.
    Partial matching (language only, language + country) is the job of
    Entry.value_at_locale(), never of equality.

    Attributes:
        language: Language code, should never be empty
        country: Country code ("" when absent)
        modifier: Modifier without the leading @ ("" when absent)
    """

    language: str
    country: str = ""
    modifier: str = ""

    @classmethod
    def parse(cls, text: str) -> Locale:
        """Create a Locale from ``lang_COUNTRY.ENCODING@MODIFIER`` text.

        Splits on the first ``_`` and the first ``@``. An ``_`` that comes
        after the ``@`` belongs to the modifier. Any string parses; missing
        parts are left empty.

        Example:
            >>> Locale.parse("de_DE.UTF-8@euro")
            Locale(language='de', country='DE', modifier='euro')
        """
        at_index = text.find("@")
        under_index = text.find("_")
        if at_index != -1 and under_index > at_index:
            under_index = -1

        if under_index == -1 and at_index == -1:
            language, country, modifier = text, "", ""
        elif under_index == -1:
            language, country, modifier = text[:at_index], "", text[at_index + 1 :]
        elif at_index == -1:
            language, country, modifier = text[:under_index], text[under_index + 1 :], ""
        else:
            language = text[:under_index]
            country = text[under_index + 1 : at_index]
            modifier = text[at_index + 1 :]

        dot_index = country.find(".")
        if dot_index != -1:
            country = country[:dot_index]

        return cls(language=language, country=country, modifier=modifier)

    @classmethod
    def from_babel(cls, locale: BabelLocale) -> Locale:
        """Create a Locale from a babel.Locale (script and variant are dropped)."""
        return cls(
            language=locale.language,
            country=locale.territory or "",
            modifier=getattr(locale, "modifier", None) or "",
        )

    def render(self) -> str:
        """Render the canonical ``lang_COUNTRY@MODIFIER`` form."""
        out = self.language.lower()
        if self.country:
            out += "_" + self.country.upper()
        if self.modifier:
            out += "@" + self.modifier.upper()
        return out

    def to_babel(self) -> BabelLocale:
        """Return the matching babel.Locale (modifier is not passed to Babel).

        Raises:
            babel.core.UnknownLocaleError: If Babel has no data for the locale
            ValueError: If the language is not a valid identifier
        """
        code = self.language.lower()
        if self.country:
            code += "_" + self.country.upper()
        return get_babel_locale(code)

    def display_name(self, in_locale: Locale | str | None = None) -> str:
        """Human-readable name of the locale, e.g. "Deutsch (Deutschland)".

        Falls back to render() when Babel does not know the locale.

        Args:
            in_locale: Locale to express the name in (defaults to the locale itself)
        """
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        try:
            babel_locale = self.to_babel()
            target = coerce_locale(in_locale).to_babel() if in_locale is not None else None
        except (UnknownLocaleError, ValueError) as e:
            logger.debug("No display name for locale '%s': %s", self.render(), e)
            return self.render()
        name = babel_locale.get_display_name(target)
        return name or self.render()

    def _key(self) -> tuple[str, str, str]:
        return (self.language.lower(), self.country.upper(), self.modifier.upper())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.render()


LocaleLike: TypeAlias = Locale | str


def coerce_locale(value: LocaleLike) -> Locale:
    """Accept a Locale or locale text and return a Locale."""
    if isinstance(value, Locale):
        return value
    if isinstance(value, str):
        return Locale.parse(value)
    msg = f"Expected Locale or str, got {type(value).__name__}"
    raise TypeError(msg)
