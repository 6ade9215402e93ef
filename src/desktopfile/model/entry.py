"""Entries: one key with its default value and localized variants.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .locale import Locale, LocaleLike, coerce_locale
from .value import Value

if TYPE_CHECKING:
    from desktopfile.options import Options

    from .group import Group

__all__ = ["Entry", "LocaleValue"]


@dataclass(slots=True)
class LocaleValue:
    """Value of a key for one locale, e.g. the ``Wert`` of ``Name[de]=Wert``.

    Attributes:
        locale: Locale from the key suffix
        value: Raw value
        comment: Comment and blank lines written directly above the line
    """

    locale: Locale
    value: Value = field(default_factory=Value)
    comment: str = ""


class Entry:
    """A key in a group: default value, comment and localized variants.

    Variants keep the order in which their locales were first added; that
    order is the order they are written back in.

    Attributes:
        key: Key name without locale suffix
        comment: Comment and blank lines written directly above the default line
    """

    __slots__ = ("__weakref__", "_group", "_locales", "_options", "_value", "comment", "key")

    def __init__(
        self, key: str = "", value: Value | str | None = None, *, comment: str = ""
    ) -> None:
        self.key = key
        self.comment = comment
        self._value: Value | None = None
        if value is not None:
            self.value = value
        self._locales: dict[Locale, LocaleValue] = {}
        self._group: weakref.ref[Group] | None = None
        self._options: Options | None = None

    def __repr__(self) -> str:
        return (
            f"Entry(key={self.key!r}, value={self.value.raw!r}, "
            f"locales={[str(loc) for loc in self._locales]!r})"
        )

    # ------------------------------------------------------------------
    # Default value
    # ------------------------------------------------------------------

    @property
    def value(self) -> Value:
        """Default (unlocalized) value; empty when no ``key=`` line exists."""
        if self._value is None:
            return Value()
        return self._value

    @value.setter
    def value(self, value: Value | str) -> None:
        self._value = value if isinstance(value, Value) else Value(value)

    @property
    def has_default(self) -> bool:
        """True once a default value was parsed or assigned."""
        return self._value is not None

    def set_value(self, text: str) -> None:
        """Assign plain text as default value, escaping it."""
        self._value = Value.from_text(text)

    @property
    def group(self) -> Group | None:
        """Owning group, or None for detached entries."""
        return self._group() if self._group is not None else None

    def get_value(self) -> Value:
        """Value for the document's default locale.

        Resolves through value_at_locale() when the owning document's options
        name a default locale; otherwise (or for detached entries) returns the
        default value. The options are held directly, so chained lookups on a
        document that is never bound to a name still use its default locale.
        """
        options = self._options
        if options is not None and options.default_locale is not None:
            return self.value_at_locale(options.default_locale)
        return self.value

    # ------------------------------------------------------------------
    # Localized variants
    # ------------------------------------------------------------------

    @property
    def locales(self) -> tuple[LocaleValue, ...]:
        """Localized variants in insertion order."""
        return tuple(self._locales.values())

    def has_locale(self, locale: LocaleLike) -> bool:
        """Exact membership test (no partial matching)."""
        return coerce_locale(locale) in self._locales

    def get_locale(self, locale: LocaleLike) -> LocaleValue:
        """Stored variant for exactly ``locale``, or a detached empty one."""
        loc = coerce_locale(locale)
        existing = self._locales.get(loc)
        if existing is not None:
            return existing
        return LocaleValue(locale=loc)

    def add_locale(self, locale: LocaleLike) -> LocaleValue:
        """Return the variant for ``locale``, creating an empty one if absent."""
        loc = coerce_locale(locale)
        existing = self._locales.get(loc)
        if existing is not None:
            return existing
        locale_value = LocaleValue(locale=loc)
        self._locales[loc] = locale_value
        return locale_value

    def remove_locale(self, locale: LocaleLike) -> None:
        """Drop the variant for ``locale``; no-op if absent."""
        self._locales.pop(coerce_locale(locale), None)

    def value_at_locale(self, locale: LocaleLike) -> Value:
        """Best value for ``locale``.

        Matching, most specific first:
            1. language, country and modifier equal: returned immediately
            2. language and country equal
            3. language equal, variant has no country
            4. language equal, variant has another country
        Within a tier the first variant in insertion order wins. Without any
        language match the default value is returned.

        Example:
            With variants en_US and en, a query for en_GB gives the en value
            and a query for en_US@x gives the en_US value. With only en_US, a
            query for en_GB still gives the en_US value.
        """
        query = coerce_locale(locale)
        language = query.language.lower()
        country = query.country.upper()
        modifier = query.modifier.upper()

        match: LocaleValue | None = None
        match_rank = 0
        for candidate in self._locales.values():
            if candidate.locale.language.lower() != language:
                continue
            candidate_country = candidate.locale.country.upper()
            if candidate_country == country:
                if candidate.locale.modifier.upper() == modifier:
                    return candidate.value
                rank = 3
            elif not candidate_country:
                rank = 2
            else:
                rank = 1
            if rank > match_rank:
                match, match_rank = candidate, rank

        if match is None:
            return self.value
        return match.value
