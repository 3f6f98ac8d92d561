"""
Tests for the holiday provider and the holiday collection.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import random

import pytest

from holiday_provider import compute_holidays
from holiday_provider.core.collection import HolidayCollection
from holiday_provider.core.provider import HolidayProvider
from holiday_provider.data.regions import CANADA, get_region, list_regions
from holiday_provider.data.schemas import Holiday, HolidayRule, HolidayType, Region, RuleShape
from holiday_provider.exceptions import (
    DuplicateHolidayError,
    InvalidDateError,
    UnknownLocaleError,
    UnknownRegionError,
)
from holiday_provider.i18n import Translator


@pytest.fixture
def canada():
    """Create a HolidayProvider for Canada."""
    return HolidayProvider("CA")


@pytest.fixture
def united_states():
    """Create a HolidayProvider for the United States."""
    return HolidayProvider("US")


class TestCanada:
    """Tests for the Canadian holidays."""

    def test_holidays_2023(self, canada):
        """Full Canadian holiday set for 2023."""
        holidays = canada.get_holidays_for_year(2023)

        assert {h.key: h.date for h in holidays} == {
            "newYearsDay": date(2023, 1, 1),
            "christmasDay": date(2023, 12, 25),
            "canadaDay": date(2023, 7, 1),
            "labourDay": date(2023, 9, 4),
            "victoriaDay": date(2023, 5, 22),
            "remembranceDay": date(2023, 11, 11),
            "thanksgivingDay": date(2023, 10, 9),
            "boxingDay": date(2023, 12, 26),
            "goodFriday": date(2023, 4, 7),
            "easterMonday": date(2023, 4, 10),
            "substituteHoliday:newYearsDay": date(2023, 1, 2),
        }

    def test_new_years_sunday_observed_monday(self, canada):
        """New Year's Day 2023 is a Sunday, observed on Monday January 2."""
        holidays = canada.get_holidays_for_year(2023)
        substitute = holidays.get("substituteHoliday:newYearsDay")

        assert substitute.date == date(2023, 1, 2)
        assert substitute.name == "New Year's Day observed"

    def test_christmas_monday_has_no_substitute(self, canada):
        holidays = canada.get_holidays_for_year(2023)

        assert holidays.get("christmasDay").date.weekday() == 0
        assert "substituteHoliday:christmasDay" not in holidays

    def test_christmas_saturday(self, canada):
        """Christmas 2021 falls on a Saturday and is observed on Friday."""
        holidays = canada.get_holidays_for_year(2021)

        assert holidays.get("substituteHoliday:christmasDay").date == date(2021, 12, 24)
        assert "substituteHoliday:newYearsDay" not in holidays

    def test_boxing_day_is_never_substituted(self, canada):
        # Boxing Day 2021 is a Sunday
        holidays = canada.get_holidays_for_year(2021)

        assert holidays.get("boxingDay").date == date(2021, 12, 26)
        assert "substituteHoliday:boxingDay" not in holidays

    def test_substitute_keys_only_for_designated_holidays(self, canada):
        for year in range(2000, 2040):
            for holiday in canada.get_holidays_for_year(year):
                if holiday.is_substitute:
                    assert holiday.substitutes in ("newYearsDay", "christmasDay")

    def test_victoria_day_2021_unchanged(self, canada):
        assert canada.get_holidays_for_year(2021).get("victoriaDay").date == date(2021, 5, 24)

    def test_no_labour_day_before_1887(self, canada):
        assert "labourDay" not in canada.get_holidays_for_year(1886)
        assert "labourDay" in canada.get_holidays_for_year(1887)

    def test_holidays_carry_timezone(self, canada):
        holiday = canada.get_holidays_for_year(2023).get("canadaDay")

        assert holiday.timezone == "America/Toronto"
        assert holiday.start == datetime(2023, 7, 1, tzinfo=ZoneInfo("America/Toronto"))

    def test_french_names(self):
        """Names come from the translations, with English as fallback."""
        holidays = HolidayProvider("CA", locale="fr_CA").get_holidays_for_year(2023)

        assert holidays.get("canadaDay").name == "Fête du Canada"
        assert holidays.get("substituteHoliday:newYearsDay").name == "Jour de l'An observed"

    def test_missing_translation_falls_back_to_english(self):
        # There is no Dutch name for Canada Day
        holidays = HolidayProvider("CA", locale="nl_NL").get_holidays_for_year(2023)

        assert holidays.get("canadaDay").name == "Canada Day"
        assert holidays.get("newYearsDay").name == "Nieuwjaarsdag"

    def test_fallback_uses_translator_default_locale(self):
        """Missing names fall back to the default locale of the translator in use."""
        translator = Translator(default_locale="fr_CA")
        holidays = HolidayProvider("CA", locale="de_DE", translator=translator).get_holidays_for_year(2023)

        # There is no German name for Canada Day
        assert holidays.get("canadaDay").name == "Fête du Canada"
        assert holidays.get("canadaDay").name == translator.translate("canadaDay", "de_DE")
        assert holidays.get("newYearsDay").name == "Neujahr"
        assert holidays.get("substituteHoliday:newYearsDay").fallback_locale == "fr_CA"


class TestUnitedStates:
    """Tests for the United States holidays."""

    def test_movable_holidays_2023(self, united_states):
        holidays = united_states.get_holidays_for_year(2023)

        assert holidays.get("martinLutherKingDay").date == date(2023, 1, 16)
        assert holidays.get("memorialDay").date == date(2023, 5, 29)
        assert holidays.get("thanksgivingDay").date == date(2023, 11, 23)

    def test_substitutes_2023(self, united_states):
        holidays = united_states.get_holidays_for_year(2023)
        substitutes = {h.key: h.date for h in holidays if h.is_substitute}

        # New Year's Day on Sunday, Veterans Day on Saturday
        assert substitutes == {
            "substituteHoliday:newYearsDay": date(2023, 1, 2),
            "substituteHoliday:veteransDay": date(2023, 11, 10),
        }

    def test_juneteenth_from_2021(self, united_states):
        assert "juneteenth" not in united_states.get_holidays_for_year(2020)
        # June 19, 2022 is a Sunday
        holidays = united_states.get_holidays_for_year(2022)
        assert holidays.get("substituteHoliday:juneteenth").date == date(2022, 6, 20)

    def test_observance_type(self, united_states):
        holiday = united_states.get_holidays_for_year(2023).get("valentinesDay")

        assert holiday.holiday_type == HolidayType.OBSERVANCE


class TestHolidayProvider:
    """Tests for provider behaviour independent of a region."""

    def test_idempotent(self):
        """Computing a year twice gives identical holidays."""
        first = compute_holidays("CA", 2023, "fr_CA")
        second = compute_holidays("CA", 2023, "fr_CA")

        assert list(first) == list(second)

    @pytest.mark.parametrize("order", ["reversed", "shuffled"])
    def test_rule_order_does_not_change_holidays(self, order):
        """Evaluating the rules in another order gives the same holidays."""
        rules = list(CANADA.rules)
        if order == "reversed":
            rules.reverse()
        else:
            random.Random(1867).shuffle(rules)
        reordered = HolidayProvider(Region(code="CA", name="Canada", timezone=CANADA.timezone, rules=rules))
        canada = HolidayProvider(CANADA)

        for year in range(1880, 2100):
            expected = {(h.key, h.date, h.name) for h in canada.get_holidays_for_year(year)}
            assert {(h.key, h.date, h.name) for h in reordered.get_holidays_for_year(year)} == expected

        # 2022 has substitutes for both New Year's Day and Christmas
        assert len([h for h in reordered.get_holidays_for_year(2022) if h.is_substitute]) == 2

    def test_fresh_collection_per_year(self, canada):
        """A later year does not reuse or change an earlier collection."""
        holidays_2023 = canada.get_holidays_for_year(2023)
        canada.get_holidays_for_year(2022)

        assert holidays_2023.get("canadaDay").date == date(2023, 7, 1)
        assert canada.get_holidays_for_year(2023) is not holidays_2023

    def test_region_code_case_insensitive(self):
        assert HolidayProvider("ca").region.code == "CA"

    def test_unknown_region(self):
        with pytest.raises(UnknownRegionError, match="Supported: CA, US"):
            HolidayProvider("XX")

    def test_unknown_region_is_key_error(self):
        with pytest.raises(KeyError):
            get_region("XX")

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError):
            HolidayProvider("CA", locale="xx_XX")

    def test_locale_normalized(self):
        assert HolidayProvider("CA", locale="fr-ca").locale == "fr_CA"

    def test_invalid_year(self, canada):
        with pytest.raises(InvalidDateError):
            canada.get_holidays_for_year(0)

    def test_broken_rule_aborts_only_that_year(self):
        """An impossible rule fails the computation without affecting other regions."""
        region = Region(
            code="ZZ",
            name="Leapland",
            timezone="UTC",
            rules=[
                HolidayRule(key="leapDay", names={"en_US": "Leap Day"}, shape=RuleShape.FIXED, month=2, day=29),
            ],
        )
        provider = HolidayProvider(region)

        assert provider.get_holidays_for_year(2024).get("leapDay").date == date(2024, 2, 29)
        with pytest.raises(InvalidDateError):
            provider.get_holidays_for_year(2023)
        assert len(compute_holidays("CA", 2023)) == 11

    def test_is_holiday(self, canada):
        assert canada.is_holiday(date(2023, 7, 1)) is True
        assert canada.is_holiday(date(2023, 1, 2)) is True
        assert canada.is_holiday(date(2023, 7, 4)) is False

    def test_is_holiday_substitute_from_next_year(self, canada):
        """December 31, 2021 is the observed New Year's Day of 2022."""
        assert canada.is_holiday(date(2021, 12, 31)) is True

    def test_holidays_for_range(self, canada):
        holidays = canada.get_holidays_for_range(date(2023, 12, 20), date(2024, 1, 5))

        assert [(h.key, h.date) for h in holidays] == [
            ("christmasDay", date(2023, 12, 25)),
            ("boxingDay", date(2023, 12, 26)),
            ("newYearsDay", date(2024, 1, 1)),
        ]

    def test_holidays_for_range_reversed(self, canada):
        with pytest.raises(ValueError):
            canada.get_holidays_for_range(date(2023, 2, 1), date(2023, 1, 1))

    def test_holiday_dates(self, canada):
        dates = canada.holiday_dates(2023)

        assert date(2023, 1, 2) in dates
        assert len(dates) == 11

    def test_list_regions(self):
        assert [region.code for region in list_regions()] == ["CA", "US"]
        assert get_region("CA").substitutable_keys == ["newYearsDay", "christmasDay"]


class TestHolidayCollection:
    """Tests for HolidayCollection."""

    @pytest.fixture
    def collection(self):
        return HolidayCollection([
            Holiday(key="b", names={"en_US": "B"}, date=date(2023, 6, 1)),
            Holiday(key="a", names={"en_US": "A"}, date=date(2023, 3, 1)),
        ])

    def test_insertion_order(self, collection):
        assert collection.keys() == ["b", "a"]
        assert [h.key for h in collection.sorted_by_date()] == ["a", "b"]

    def test_duplicate_key(self, collection):
        with pytest.raises(DuplicateHolidayError):
            collection.add(Holiday(key="a", names={"en_US": "Again"}, date=date(2023, 9, 1)))

    def test_add_while_iterating(self, collection):
        """Iteration walks a snapshot, so new entries are not visited."""
        visited = []
        for holiday in collection:
            visited.append(holiday.key)
            collection.add(Holiday(key=holiday.key + "2", names={"en_US": "x"}, date=holiday.date))

        assert visited == ["b", "a"]
        assert len(collection) == 4

    def test_queries(self, collection):
        assert [h.key for h in collection.on(date(2023, 3, 1))] == ["a"]
        assert collection.between(date(2023, 4, 1), date(2023, 12, 31))[0].key == "b"
        assert collection.get("missing") is None
