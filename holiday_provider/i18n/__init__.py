"""Holiday name translations with default-locale fallback."""

from holiday_provider.i18n.translations import DEFAULT_LOCALE, SUPPORTED_LOCALES, TRANSLATIONS
from holiday_provider.i18n.translator import (
    Translator,
    get_translator,
    normalize_locale,
)

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "TRANSLATIONS",
    "Translator",
    "get_translator",
    "normalize_locale",
]
