"""Parser configuration.

Provides a single frozen dataclass read once at parse start. Documents
keep the Options they were parsed with so entries can resolve values for
the configured default locale.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from desktopfile.constants import MAX_SOURCE_SIZE
from desktopfile.enums import DuplicateKeyPolicy
from desktopfile.locale_utils import get_system_locale
from desktopfile.model.locale import Locale

__all__ = ["Options"]


@dataclass(frozen=True, slots=True)
class Options:
    """Immutable configuration for DesktopFileParser.

    All fields have defaults; ``Options()`` gives a strict parser that
    rejects duplicate keys and groups and resolves no locale.

    Attributes:
        default_locale: Locale used by Entry.get_value(). None (default) means
            get_value() returns the unlocalized value. A string is parsed
            with Locale.parse() on construction.
        allow_duplicate_keys_join: Concatenate the value (and comment) of a
            repeated key onto the first occurrence (default: False).
        allow_duplicate_keys_ignore: Keep the first occurrence of a repeated
            key and drop later ones (default: False). Ignored when
            allow_duplicate_keys_join is also set.
        allow_duplicate_groups: Merge a repeated group header into the first
            group of that name instead of failing (default: False).
        max_source_size: Maximum source length in characters (default: 10 MB).
            0 disables the limit.

    Example:
        >>> options = Options(default_locale="de_DE", allow_duplicate_groups=True)
        >>> options.default_locale
        Locale(language='de', country='DE', modifier='')
    """

    default_locale: Locale | None = None
    allow_duplicate_keys_join: bool = False
    allow_duplicate_keys_ignore: bool = False
    allow_duplicate_groups: bool = False
    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Normalize default_locale and validate limits.

        Raises:
            TypeError: If default_locale is neither Locale, str nor None.
            ValueError: If default_locale has an empty language, or
                max_source_size is negative.
        """
        locale = self.default_locale
        if isinstance(locale, str):
            locale = Locale.parse(locale)
            object.__setattr__(self, "default_locale", locale)
        elif locale is not None and not isinstance(locale, Locale):
            msg = f"default_locale must be Locale, str or None, got {type(locale).__name__}"
            raise TypeError(msg)
        if locale is not None and not locale.language:
            msg = "default_locale must have a language"
            raise ValueError(msg)
        if self.max_source_size < 0:
            msg = "max_source_size must be >= 0"
            raise ValueError(msg)

    @property
    def duplicate_key_policy(self) -> DuplicateKeyPolicy:
        """Effective duplicate-key behavior; join wins over ignore."""
        if self.allow_duplicate_keys_join:
            return DuplicateKeyPolicy.JOIN
        if self.allow_duplicate_keys_ignore:
            return DuplicateKeyPolicy.IGNORE
        return DuplicateKeyPolicy.REJECT

    @classmethod
    def from_environment(
        cls,
        *,
        allow_duplicate_keys_join: bool = False,
        allow_duplicate_keys_ignore: bool = False,
        allow_duplicate_groups: bool = False,
        max_source_size: int = MAX_SOURCE_SIZE,
    ) -> Options:
        """Options whose default_locale comes from LC_ALL / LC_MESSAGES / LANG.

        default_locale stays None when no usable locale is set.
        """
        system_locale = get_system_locale()
        locale = Locale.parse(system_locale) if system_locale else None
        if locale is not None and not locale.language:
            locale = None
        return cls(
            default_locale=locale,
            allow_duplicate_keys_join=allow_duplicate_keys_join,
            allow_duplicate_keys_ignore=allow_duplicate_keys_ignore,
            allow_duplicate_groups=allow_duplicate_groups,
            max_source_size=max_source_size,
        )
