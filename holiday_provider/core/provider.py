"""
Holiday provider computing the holidays of one region per year.
"""

import logging
from datetime import date
from typing import List, Optional, Set, Union

from holiday_provider.core.collection import HolidayCollection
from holiday_provider.core.rules import evaluate_rule
from holiday_provider.core.substitutes import derive_substitutes
from holiday_provider.data.regions import get_region
from holiday_provider.data.schemas import Holiday, HolidayRule, Region
from holiday_provider.exceptions import InvalidDateError
from holiday_provider.i18n import DEFAULT_LOCALE, Translator, get_translator

logger = logging.getLogger(__name__)


class HolidayProvider:
    """Computes the holidays observed in a region."""

    def __init__(
        self,
        region: Union[str, Region],
        locale: str = DEFAULT_LOCALE,
        translator: Optional[Translator] = None,
    ):
        """
        Initialize the holiday provider.

        Args:
            region: Region code (e.g. 'CA') or a Region with its own rules.
            locale: Locale used for display names.
            translator: Name lookup; defaults to the bundled translations.

        Raises:
            UnknownRegionError: If the region code is not supported.
            UnknownLocaleError: If the locale is not recognised.
        """
        self.region = region if isinstance(region, Region) else get_region(region)
        self.translator = translator or get_translator()
        self.locale = self.translator.validate_locale(locale)

    @property
    def timezone(self) -> str:
        return self.region.timezone

    def get_holidays_for_year(self, year: int) -> HolidayCollection:
        """
        Compute every holiday of the region in ``year``.

        A new collection is built on each call.

        Args:
            year: Gregorian year, 1 or later.

        Returns:
            HolidayCollection with the rule-based holidays followed by
            their substitutes.

        Raises:
            InvalidDateError: If the year is out of range or a rule is broken.
        """
        if year < 1:
            raise InvalidDateError(f"Year must be 1 or later, got {year}")

        holidays = HolidayCollection()
        for rule in self.region.rules:
            holiday = self._build_holiday(rule, year)
            if holiday is not None:
                holidays.add(holiday)

        holidays.extend(derive_substitutes(holidays.snapshot(), self.region.substitutable_keys))

        logger.debug(f"Computed {len(holidays)} holidays for {self.region.code} {year}")
        return holidays

    def _build_holiday(self, rule: HolidayRule, year: int) -> Optional[Holiday]:
        """Evaluate a rule and wrap the date into a Holiday."""
        holiday_date = evaluate_rule(rule, year)
        if holiday_date is None:
            return None
        return Holiday(
            key=rule.key,
            names=self.translator.names_for(rule.key, rule.names),
            date=holiday_date,
            locale=self.locale,
            fallback_locale=self.translator.default_locale,
            timezone=self.timezone,
            holiday_type=rule.holiday_type,
        )

    def get_holidays_for_range(self, start: date, end: date) -> List[Holiday]:
        """
        Get all holidays within a date range, ordered by date.

        Args:
            start: Start date of the range.
            end: End date of the range (inclusive).

        Returns:
            List of Holiday objects within the range.
        """
        if end < start:
            raise ValueError("end must be on or after start")

        result: List[Holiday] = []
        # One year later too, a Jan 1 on Saturday is observed on the Dec 31 before
        for year in range(start.year, min(end.year + 1, date.max.year) + 1):
            result.extend(self.get_holidays_for_year(year).between(start, end))
        result.sort(key=lambda holiday: holiday.date)
        return result

    def holiday_dates(self, year: int) -> Set[date]:
        """Set of dates that are holidays in ``year``'s collection."""
        return set(self.get_holidays_for_year(year).dates())

    def is_holiday(self, check_date: date) -> bool:
        """
        Check if a specific date is a holiday.

        Args:
            check_date: Date to check.

        Returns:
            True if the date is a holiday, False otherwise.
        """
        return len(self.get_holidays_for_range(check_date, check_date)) > 0


def compute_holidays(region: str, year: int, locale: str = DEFAULT_LOCALE) -> HolidayCollection:
    """Shortcut for ``HolidayProvider(region, locale).get_holidays_for_year(year)``."""
    return HolidayProvider(region, locale=locale).get_holidays_for_year(year)
