"""
Holiday rule tables for each supported region.
"""

from typing import Dict, List

from holiday_provider.data.schemas import HolidayRule, HolidayType, Region, RuleShape, Weekday
from holiday_provider.exceptions import UnknownRegionError

# Rules shared by several regions
NEW_YEARS_DAY = HolidayRule(
    key="newYearsDay",
    names={"en_US": "New Year's Day"},
    shape=RuleShape.FIXED,
    month=1,
    day=1,
    substitutable=True,
)
CHRISTMAS_DAY = HolidayRule(
    key="christmasDay",
    names={"en_US": "Christmas"},
    shape=RuleShape.FIXED,
    month=12,
    day=25,
    substitutable=True,
)
GOOD_FRIDAY = HolidayRule(
    key="goodFriday",
    names={"en_US": "Good Friday"},
    shape=RuleShape.EASTER_OFFSET,
    offset=-2,
)
EASTER_MONDAY = HolidayRule(
    key="easterMonday",
    names={"en_US": "Easter Monday"},
    shape=RuleShape.EASTER_OFFSET,
    offset=1,
)
# First Monday of September, celebrated since 1887
LABOUR_DAY = HolidayRule(
    key="labourDay",
    names={"en_US": "Labour Day"},
    shape=RuleShape.NTH_WEEKDAY,
    month=9,
    weekday=Weekday.MONDAY,
    ordinal=1,
    start_year=1887,
)


CANADA = Region(
    code="CA",
    name="Canada",
    timezone="America/Toronto",
    rules=[
        NEW_YEARS_DAY,
        CHRISTMAS_DAY,
        HolidayRule(
            key="canadaDay",
            names={"en_US": "Canada Day"},
            shape=RuleShape.FIXED,
            month=7,
            day=1,
        ),
        LABOUR_DAY,
        # The Monday preceding May 25
        HolidayRule(
            key="victoriaDay",
            names={"en_US": "Victoria Day"},
            shape=RuleShape.PRECEDING_WEEKDAY,
            month=5,
            day=24,
            weekday=Weekday.MONDAY,
        ),
        HolidayRule(
            key="remembranceDay",
            names={"en_US": "Remembrance Day"},
            shape=RuleShape.FIXED,
            month=11,
            day=11,
        ),
        HolidayRule(
            key="thanksgivingDay",
            names={"en_US": "Thanksgiving Day"},
            shape=RuleShape.NTH_WEEKDAY,
            month=10,
            weekday=Weekday.MONDAY,
            ordinal=2,
        ),
        HolidayRule(
            key="boxingDay",
            names={"en_US": "Boxing Day"},
            shape=RuleShape.FIXED,
            month=12,
            day=26,
        ),
        GOOD_FRIDAY,
        EASTER_MONDAY,
    ],
)


UNITED_STATES = Region(
    code="US",
    name="United States",
    timezone="America/New_York",
    rules=[
        NEW_YEARS_DAY,
        HolidayRule(
            key="martinLutherKingDay",
            names={"en_US": "Dr. Martin Luther King Jr's Birthday"},
            shape=RuleShape.NTH_WEEKDAY,
            month=1,
            weekday=Weekday.MONDAY,
            ordinal=3,
            start_year=1986,
        ),
        HolidayRule(
            key="washingtonsBirthday",
            names={"en_US": "Washington's Birthday"},
            shape=RuleShape.NTH_WEEKDAY,
            month=2,
            weekday=Weekday.MONDAY,
            ordinal=3,
            start_year=1971,
        ),
        HolidayRule(
            key="memorialDay",
            names={"en_US": "Memorial Day"},
            shape=RuleShape.NTH_WEEKDAY,
            month=5,
            weekday=Weekday.MONDAY,
            ordinal=-1,
            start_year=1971,
        ),
        HolidayRule(
            key="juneteenth",
            names={"en_US": "Juneteenth"},
            shape=RuleShape.FIXED,
            month=6,
            day=19,
            start_year=2021,
            substitutable=True,
        ),
        HolidayRule(
            key="independenceDay",
            names={"en_US": "Independence Day"},
            shape=RuleShape.FIXED,
            month=7,
            day=4,
            start_year=1776,
            substitutable=True,
        ),
        LABOUR_DAY,
        HolidayRule(
            key="columbusDay",
            names={"en_US": "Columbus Day"},
            shape=RuleShape.NTH_WEEKDAY,
            month=10,
            weekday=Weekday.MONDAY,
            ordinal=2,
            start_year=1971,
        ),
        HolidayRule(
            key="veteransDay",
            names={"en_US": "Veterans Day"},
            shape=RuleShape.FIXED,
            month=11,
            day=11,
            start_year=1919,
            substitutable=True,
        ),
        HolidayRule(
            key="thanksgivingDay",
            names={"en_US": "Thanksgiving Day"},
            shape=RuleShape.NTH_WEEKDAY,
            month=11,
            weekday=Weekday.THURSDAY,
            ordinal=4,
            start_year=1942,
        ),
        CHRISTMAS_DAY,
        HolidayRule(
            key="valentinesDay",
            names={"en_US": "Valentine's Day"},
            shape=RuleShape.FIXED,
            month=2,
            day=14,
            holiday_type=HolidayType.OBSERVANCE,
        ),
    ],
)


REGIONS: Dict[str, Region] = {
    region.code: region for region in (CANADA, UNITED_STATES)
}


def get_region(code: str) -> Region:
    """
    Return the region for ``code`` (case-insensitive).

    Raises:
        UnknownRegionError: If no rule set exists for the code.
    """
    region = REGIONS.get(code.strip().upper())
    if region is None:
        raise UnknownRegionError(code, REGIONS)
    return region


def list_regions() -> List[Region]:
    """All supported regions, ordered by code."""
    return [REGIONS[code] for code in sorted(REGIONS)]
