"""
Date rule evaluators.

Each evaluator turns a year into one concrete calendar date. Weekdays
follow the ``datetime`` convention: 0 = Monday ... 6 = Sunday.
"""

from datetime import date, timedelta
from typing import Callable, Dict, Optional

from dateutil.easter import easter

from holiday_provider.data.schemas import HolidayRule, RuleShape
from holiday_provider.exceptions import InvalidDateError


def fixed_date(year: int, month: int, day: int) -> date:
    """Return ``day``/``month`` in ``year``.

    Raises:
        InvalidDateError: If the day does not exist, e.g. 30 February.
    """
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date {year}-{month:02d}-{day:02d}: {e}") from e


def nth_weekday(year: int, month: int, weekday: int, ordinal: int) -> date:
    """Return the *ordinal*-th *weekday* in *month* of *year*.

    *ordinal* is 1-based (1 = first, 2 = second, ...); -1 selects the
    last occurrence in the month.

    Raises:
        InvalidDateError: If the month has no such occurrence, e.g. a fifth
            Monday in a month with four.
    """
    if ordinal == -1:
        return last_weekday(year, month, weekday)
    if ordinal < 1:
        raise InvalidDateError(f"Ordinal must be positive or -1, got {ordinal}")

    first = fixed_date(year, month, 1)
    # Days until the first target weekday
    delta = (weekday - first.weekday()) % 7
    result = first + timedelta(days=delta, weeks=ordinal - 1)
    if result.month != month:
        raise InvalidDateError(f"There is no occurrence {ordinal} of weekday {weekday} in {year}-{month:02d}")
    return result


def last_weekday(year: int, month: int, weekday: int) -> date:
    """Return the last occurrence of *weekday* in *month* of *year*."""
    # Start from the last day of the month
    if month == 12:
        last = fixed_date(year, 12, 31)
    else:
        last = fixed_date(year, month + 1, 1) - timedelta(days=1)
    delta = (last.weekday() - weekday) % 7
    return last - timedelta(days=delta)


def preceding_weekday(anchor: date, weekday: int) -> date:
    """Return *anchor* if it is a *weekday*, else the closest earlier *weekday*.

    Only ever steps backward, at most six days.
    """
    current = anchor
    while current.weekday() != weekday:
        current -= timedelta(days=1)
    return current


def easter_sunday(year: int) -> date:
    """Western (Gregorian) Easter Sunday of *year*."""
    return easter(year)


def easter_offset(year: int, offset: int) -> date:
    """Return the day *offset* days from Easter Sunday (Good Friday is -2)."""
    return easter_sunday(year) + timedelta(days=offset)


def _evaluate_fixed(rule: HolidayRule, year: int) -> date:
    return fixed_date(year, rule.month, rule.day)


def _evaluate_nth_weekday(rule: HolidayRule, year: int) -> date:
    return nth_weekday(year, rule.month, rule.weekday, rule.ordinal)


def _evaluate_preceding_weekday(rule: HolidayRule, year: int) -> date:
    return preceding_weekday(fixed_date(year, rule.month, rule.day), rule.weekday)


def _evaluate_easter_offset(rule: HolidayRule, year: int) -> date:
    return easter_offset(year, rule.offset)


_EVALUATORS: Dict[RuleShape, Callable[[HolidayRule, int], date]] = {
    RuleShape.FIXED: _evaluate_fixed,
    RuleShape.NTH_WEEKDAY: _evaluate_nth_weekday,
    RuleShape.PRECEDING_WEEKDAY: _evaluate_preceding_weekday,
    RuleShape.EASTER_OFFSET: _evaluate_easter_offset,
}


def evaluate_rule(rule: HolidayRule, year: int) -> Optional[date]:
    """
    Compute the date of ``rule`` in ``year``.

    Args:
        rule: Rule descriptor from a region table.
        year: Gregorian year.

    Returns:
        The date, or None when the holiday did not exist in that year.

    Raises:
        InvalidDateError: If the rule describes an impossible date.
    """
    if not rule.applies_to(year):
        return None
    return _EVALUATORS[rule.shape](rule, year)
