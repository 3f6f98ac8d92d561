"""
Exceptions raised while computing holidays.
"""

from typing import Iterable


class HolidayProviderError(Exception):
    """Base class for all holiday provider errors."""


class InvalidDateError(HolidayProviderError, ValueError):
    """A rule produced a date that does not exist on the calendar."""


class UnknownLocaleError(HolidayProviderError, ValueError):
    """The requested locale is not recognised at all."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Unknown locale: {locale!r}")


class UnknownRegionError(HolidayProviderError, KeyError):
    """No rule set exists for the requested region code."""

    def __init__(self, region: str, supported: Iterable[str] = ()):
        self.region = region
        self.supported = sorted(supported)
        message = f"Unknown region {region!r}"
        if self.supported:
            message += f". Supported: {', '.join(self.supported)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]


class DuplicateHolidayError(HolidayProviderError):
    """A holiday key was added twice to the same collection."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Holiday {key!r} already exists in this collection")
