"""Translated holiday names, keyed by holiday key and then by locale."""

from typing import Dict

# Type alias for the names of one holiday
TranslationDict = Dict[str, str]

DEFAULT_LOCALE = "en_US"

# Every locale the provider accepts. A locale can be supported without
# having a name for every holiday; missing names fall back to DEFAULT_LOCALE.
SUPPORTED_LOCALES = (
    "de_DE",
    "en_CA",
    "en_GB",
    "en_US",
    "es_ES",
    "fr_CA",
    "fr_FR",
    "it_IT",
    "nl_NL",
)

TRANSLATIONS: Dict[str, TranslationDict] = {
    # =============================================================================
    # Common holidays
    # =============================================================================
    "newYearsDay": {
        "de_DE": "Neujahr",
        "en_US": "New Year's Day",
        "es_ES": "Año Nuevo",
        "fr_CA": "Jour de l'An",
        "fr_FR": "Jour de l'An",
        "it_IT": "Capodanno",
        "nl_NL": "Nieuwjaarsdag",
    },
    "labourDay": {
        "de_DE": "Tag der Arbeit",
        "en_US": "Labour Day",
        "es_ES": "Día del Trabajador",
        "fr_CA": "Fête du Travail",
        "fr_FR": "Fête du Travail",
        "it_IT": "Festa del Lavoro",
    },

    # =============================================================================
    # Christian holidays
    # =============================================================================
    "goodFriday": {
        "de_DE": "Karfreitag",
        "en_US": "Good Friday",
        "es_ES": "Viernes Santo",
        "fr_CA": "Vendredi saint",
        "fr_FR": "Vendredi saint",
        "it_IT": "Venerdì santo",
        "nl_NL": "Goede Vrijdag",
    },
    "easterMonday": {
        "de_DE": "Ostermontag",
        "en_US": "Easter Monday",
        "es_ES": "Lunes de Pascua",
        "fr_CA": "Lundi de Pâques",
        "fr_FR": "Lundi de Pâques",
        "it_IT": "Lunedì dell'Angelo",
        "nl_NL": "Tweede paasdag",
    },
    "christmasDay": {
        "de_DE": "1. Weihnachtsfeiertag",
        "en_US": "Christmas",
        "es_ES": "Navidad",
        "fr_CA": "Noël",
        "fr_FR": "Noël",
        "it_IT": "Natale",
        "nl_NL": "Eerste kerstdag",
    },
    "boxingDay": {
        "de_DE": "2. Weihnachtsfeiertag",
        "en_US": "Boxing Day",
        "fr_CA": "Lendemain de Noël",
        "nl_NL": "Tweede kerstdag",
    },

    # =============================================================================
    # Canada
    # =============================================================================
    "canadaDay": {
        "en_US": "Canada Day",
        "fr_CA": "Fête du Canada",
    },
    "victoriaDay": {
        "en_US": "Victoria Day",
        "fr_CA": "Fête de la Reine",
    },
    "remembranceDay": {
        "en_US": "Remembrance Day",
        "fr_CA": "Jour du Souvenir",
    },
    "thanksgivingDay": {
        "en_US": "Thanksgiving Day",
        "fr_CA": "Action de grâce",
    },

    # =============================================================================
    # United States
    # =============================================================================
    "martinLutherKingDay": {
        "en_US": "Dr. Martin Luther King Jr's Birthday",
    },
    "washingtonsBirthday": {
        "en_US": "Washington's Birthday",
    },
    "memorialDay": {
        "en_US": "Memorial Day",
    },
    "juneteenth": {
        "en_US": "Juneteenth",
    },
    "independenceDay": {
        "en_US": "Independence Day",
        "fr_FR": "Jour de l'Indépendance",
    },
    "columbusDay": {
        "en_US": "Columbus Day",
        "es_ES": "Día de la Raza",
    },
    "veteransDay": {
        "en_US": "Veterans Day",
    },
    "valentinesDay": {
        "de_DE": "Valentinstag",
        "en_US": "Valentine's Day",
        "es_ES": "San Valentín",
        "fr_FR": "Saint-Valentin",
        "it_IT": "San Valentino",
    },
}

