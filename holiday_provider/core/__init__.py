"""
Core holiday computation: rule evaluation, substitutes and orchestration.
"""

from holiday_provider.core.collection import HolidayCollection
from holiday_provider.core.provider import HolidayProvider, compute_holidays
from holiday_provider.core.rules import evaluate_rule
from holiday_provider.core.substitutes import derive_substitutes

__all__ = [
    "HolidayCollection",
    "HolidayProvider",
    "compute_holidays",
    "derive_substitutes",
    "evaluate_rule",
]
