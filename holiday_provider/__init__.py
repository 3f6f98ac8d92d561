"""Holiday Provider.

Computes the public holidays observed in a country for a given year,
including substitute days for holidays that land on a weekend, with
holiday names in several locales.
"""

__version__ = "0.1.0"

from holiday_provider.core import HolidayCollection, HolidayProvider, compute_holidays
from holiday_provider.data import Holiday, HolidayRule, Region
from holiday_provider.exceptions import (
    DuplicateHolidayError,
    HolidayProviderError,
    InvalidDateError,
    UnknownLocaleError,
    UnknownRegionError,
)

__all__ = [
    "DuplicateHolidayError",
    "Holiday",
    "HolidayCollection",
    "HolidayProvider",
    "HolidayProviderError",
    "HolidayRule",
    "InvalidDateError",
    "Region",
    "UnknownLocaleError",
    "UnknownRegionError",
    "compute_holidays",
]
