"""
Data models, schemas and region rule tables.
"""

from holiday_provider.data.schemas import (
    Config,
    Holiday,
    HolidayRule,
    HolidayType,
    Region,
    RuleShape,
    Weekday,
)

__all__ = [
    "Config",
    "Holiday",
    "HolidayRule",
    "HolidayType",
    "Region",
    "RuleShape",
    "Weekday",
]
