"""
Substitute (observed) holidays for holidays landing on a weekend.

When a designated holiday falls on a Saturday the preceding Friday is
also a holiday; when it falls on a Sunday the following Monday is.
"""

import logging
from datetime import timedelta
from typing import Collection, Iterable, List, Optional

from holiday_provider.data.schemas import SUBSTITUTE_PREFIX, Holiday, Weekday

logger = logging.getLogger(__name__)

OBSERVED_SUFFIX = " observed"

# Shift applied to the original date, per weekday that triggers a substitute
_SHIFTS = {
    Weekday.SATURDAY: timedelta(days=-1),
    Weekday.SUNDAY: timedelta(days=1),
}


def substitute_for(holiday: Holiday) -> Optional[Holiday]:
    """
    Build the observed replacement of a single holiday.

    Returns:
        The substitute holiday, or None if ``holiday`` is on a weekday.
    """
    shift = _SHIFTS.get(holiday.weekday)
    if shift is None:
        return None

    # The suffix is appended in every locale, not translated
    names = {locale: name + OBSERVED_SUFFIX for locale, name in holiday.names.items()}
    return Holiday(
        key=SUBSTITUTE_PREFIX + holiday.key,
        names=names,
        date=holiday.date + shift,
        locale=holiday.locale,
        fallback_locale=holiday.fallback_locale,
        timezone=holiday.timezone,
        holiday_type=holiday.holiday_type,
        substitutes=holiday.key,
    )


def derive_substitutes(holidays: Iterable[Holiday], substitutable_keys: Collection[str]) -> List[Holiday]:
    """
    Derive observed holidays for the substitutable holidays in ``holidays``.

    Each eligible holiday is evaluated on its own; substitutes are never
    themselves substituted. The input is only read, the results go into a
    new list for the caller to merge.

    Args:
        holidays: Holidays already computed for the year.
        substitutable_keys: Keys of the holidays that get an observed day.

    Returns:
        The new substitute holidays, in the order of their originals.
    """
    substitutes: List[Holiday] = []
    for holiday in holidays:
        if holiday.is_substitute or holiday.key not in substitutable_keys:
            continue
        substitute = substitute_for(holiday)
        if substitute is not None:
            logger.debug(f"{holiday.key} falls on {holiday.weekday.name.title()}, observed on {substitute.iso_date}")
            substitutes.append(substitute)
    return substitutes
