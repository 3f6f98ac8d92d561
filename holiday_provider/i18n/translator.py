"""Translator module resolving holiday names per locale."""

import logging
from typing import Dict, Iterable, Mapping, Optional

from holiday_provider.exceptions import UnknownLocaleError
from holiday_provider.i18n.translations import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    TRANSLATIONS,
    TranslationDict,
)

logger = logging.getLogger(__name__)


def normalize_locale(locale: str) -> str:
    """Normalize a locale tag to the ``ll_CC`` form (``en-us`` -> ``en_US``)."""
    tag = locale.strip().replace("-", "_")
    if "." in tag:
        # Drop encodings such as "fr_CA.UTF-8"
        tag = tag.split(".", 1)[0]
    language, _, country = tag.partition("_")
    if country:
        return f"{language.lower()}_{country.upper()}"
    return language.lower()


class Translator:
    """Looks up holiday names by key and locale."""

    def __init__(
        self,
        translations: Optional[Mapping[str, TranslationDict]] = None,
        locales: Optional[Iterable[str]] = None,
        default_locale: str = DEFAULT_LOCALE,
    ):
        """Initialize the translator.

        Args:
            translations: Names per holiday key and locale. Defaults to the bundled table.
            locales: Locales the translator accepts. Defaults to SUPPORTED_LOCALES.
            default_locale: Locale used when a name is missing for the requested one.
        """
        self.translations = translations if translations is not None else TRANSLATIONS
        self.locales = frozenset(locales if locales is not None else SUPPORTED_LOCALES)
        self.default_locale = default_locale

    def validate_locale(self, locale: str) -> str:
        """Normalize ``locale`` and make sure it is supported.

        Raises:
            UnknownLocaleError: If the locale is not recognised.
        """
        normalized = normalize_locale(locale)
        if normalized not in self.locales:
            raise UnknownLocaleError(locale)
        return normalized

    def lookup(self, key: str, locale: str) -> Optional[str]:
        """Return the name of ``key`` in ``locale`` without any fallback."""
        return self.translations.get(key, {}).get(locale)

    def translate(self, key: str, locale: str) -> str:
        """Return the name of ``key`` in ``locale``.

        Falls back to the default locale, then to the key itself, when no
        translation exists. An unknown locale is an error, a missing
        translation is not.
        """
        locale = self.validate_locale(locale)
        name = self.lookup(key, locale)
        if name is None:
            logger.debug(f"No {locale} name for {key}, falling back to {self.default_locale}")
            name = self.lookup(key, self.default_locale)
        return name if name is not None else key

    def names_for(self, key: str, defaults: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """All known names of ``key``; table entries override ``defaults``."""
        names: Dict[str, str] = dict(defaults or {})
        names.update(self.translations.get(key, {}))
        return names


# Global translator instance
_translator: Optional[Translator] = None


def get_translator() -> Translator:
    """Get the shared translator built from the bundled translations."""
    global _translator

    if _translator is None:
        _translator = Translator()

    return _translator

