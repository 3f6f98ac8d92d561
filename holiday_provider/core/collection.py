"""
Ordered collection of the holidays computed for one region and year.
"""

from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from holiday_provider.data.schemas import Holiday
from holiday_provider.exceptions import DuplicateHolidayError


class HolidayCollection:
    """Insertion-ordered set of holidays, unique by key."""

    def __init__(self, holidays: Iterable[Holiday] = ()):
        self._holidays: Dict[str, Holiday] = {}
        self.extend(holidays)

    def add(self, holiday: Holiday) -> None:
        """
        Add a holiday.

        Raises:
            DuplicateHolidayError: If a holiday with the same key exists.
        """
        if holiday.key in self._holidays:
            raise DuplicateHolidayError(holiday.key)
        self._holidays[holiday.key] = holiday

    def extend(self, holidays: Iterable[Holiday]) -> None:
        for holiday in holidays:
            self.add(holiday)

    def snapshot(self) -> Tuple[Holiday, ...]:
        """Immutable copy of the current entries, safe to iterate while adding."""
        return tuple(self._holidays.values())

    def get(self, key: str) -> Optional[Holiday]:
        return self._holidays.get(key)

    def keys(self) -> List[str]:
        return list(self._holidays)

    def dates(self) -> List[date]:
        return [holiday.date for holiday in self._holidays.values()]

    def on(self, day: date) -> List[Holiday]:
        """All holidays falling on ``day``."""
        return [holiday for holiday in self._holidays.values() if holiday.date == day]

    def between(self, start: date, end: date) -> List[Holiday]:
        """Holidays from ``start`` to ``end`` inclusive, ordered by date."""
        return [holiday for holiday in self.sorted_by_date() if start <= holiday.date <= end]

    def sorted_by_date(self) -> List[Holiday]:
        # sorted() is stable, so same-day holidays keep insertion order
        return sorted(self._holidays.values(), key=lambda holiday: holiday.date)

    def __contains__(self, key: object) -> bool:
        return key in self._holidays

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._holidays)

    def __repr__(self) -> str:
        return f"HolidayCollection({self.keys()!r})"
