"""
Data models for the holiday provider using Pydantic.
"""

import datetime
from enum import Enum, IntEnum
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from holiday_provider.i18n.translations import DEFAULT_LOCALE

SUBSTITUTE_PREFIX = "substituteHoliday:"


class Weekday(IntEnum):
    """Days of the week, numbered like ``datetime.date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class HolidayType(str, Enum):
    """Classification of a holiday."""

    OFFICIAL = "official"
    OBSERVANCE = "observance"
    BANK = "bank"
    OTHER = "other"


class RuleShape(str, Enum):
    """The ways a holiday date can be derived from a year."""

    FIXED = "fixed"  # same month/day every year
    NTH_WEEKDAY = "nth_weekday"  # e.g. second Monday of October
    PRECEDING_WEEKDAY = "preceding_weekday"  # e.g. Monday on or before May 24
    EASTER_OFFSET = "easter_offset"  # days relative to Easter Sunday


class Holiday(BaseModel):
    """A single observed holiday."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Stable identifier, e.g. 'canadaDay'")
    names: Dict[str, str] = Field(..., description="Localized names keyed by locale tag")
    date: datetime.date = Field(..., description="Calendar day of the holiday")
    locale: str = Field(default=DEFAULT_LOCALE, description="Locale used to pick the display name")
    fallback_locale: str = Field(
        default=DEFAULT_LOCALE, description="Locale used when no name exists for the requested one"
    )
    timezone: str = Field(default="UTC", description="IANA timezone of the region")
    holiday_type: HolidayType = Field(default=HolidayType.OFFICIAL, description="Holiday classification")
    substitutes: Optional[str] = Field(
        default=None, description="Key of the holiday this one replaces, for observed days"
    )

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Require at least one localized name."""
        if not v:
            raise ValueError("A holiday needs at least one localized name")
        return v

    @property
    def name(self) -> str:
        """Display name for the requested locale, falling back to the fallback locale."""
        if self.locale in self.names:
            return self.names[self.locale]
        if self.fallback_locale in self.names:
            return self.names[self.fallback_locale]
        return self.key

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.date.weekday())

    @property
    def is_weekend(self) -> bool:
        return self.weekday in (Weekday.SATURDAY, Weekday.SUNDAY)

    @property
    def is_substitute(self) -> bool:
        return self.substitutes is not None or self.key.startswith(SUBSTITUTE_PREFIX)

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    @property
    def start(self) -> datetime.datetime:
        """Midnight at the start of the holiday in the region's timezone."""
        return datetime.datetime.combine(self.date, datetime.time.min, tzinfo=ZoneInfo(self.timezone))


class HolidayRule(BaseModel):
    """
    Declarative description of how one holiday is placed in a year.

    Only the parameters relevant to ``shape`` are used:

    - ``fixed``: ``month``, ``day``
    - ``nth_weekday``: ``month``, ``weekday``, ``ordinal`` (1-5, or -1 for the last)
    - ``preceding_weekday``: ``month``, ``day`` (the anchor) and ``weekday``
    - ``easter_offset``: ``offset`` in days from Easter Sunday
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    names: Dict[str, str] = Field(..., description="Default names, at least en_US")
    shape: RuleShape
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    weekday: Optional[Weekday] = None
    ordinal: Optional[int] = Field(default=None, ge=-1, le=5)
    offset: Optional[int] = None
    start_year: Optional[int] = Field(default=None, description="First year the holiday applies")
    end_year: Optional[int] = Field(default=None, description="Last year the holiday applies")
    substitutable: bool = Field(default=False, description="Gets an observed day when on a weekend")
    holiday_type: HolidayType = HolidayType.OFFICIAL

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Require a default-locale name."""
        if DEFAULT_LOCALE not in v:
            raise ValueError(f"Rule names must include {DEFAULT_LOCALE}")
        return v

    @model_validator(mode="after")
    def validate_shape_parameters(self) -> "HolidayRule":
        """Ensure the parameters the shape needs are present."""
        required = {
            RuleShape.FIXED: ("month", "day"),
            RuleShape.NTH_WEEKDAY: ("month", "weekday", "ordinal"),
            RuleShape.PRECEDING_WEEKDAY: ("month", "day", "weekday"),
            RuleShape.EASTER_OFFSET: ("offset",),
        }[self.shape]
        missing = [name for name in required if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Rule {self.key!r} ({self.shape.value}) is missing: {', '.join(missing)}")
        if self.ordinal == 0:
            raise ValueError("ordinal must be 1-5 or -1")
        if self.start_year and self.end_year and self.end_year < self.start_year:
            raise ValueError("end_year must not be before start_year")
        return self

    def applies_to(self, year: int) -> bool:
        """Whether the holiday existed in ``year``."""
        if self.start_year is not None and year < self.start_year:
            return False
        if self.end_year is not None and year > self.end_year:
            return False
        return True


class Region(BaseModel):
    """A country or sub-region and the rules for its holidays."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="ISO 3166 style code, e.g. 'CA'")
    name: str = Field(..., description="English name of the region")
    timezone: str = Field(..., description="IANA timezone, e.g. 'America/Toronto'")
    rules: List[HolidayRule] = Field(default_factory=list)

    @field_validator("rules")
    @classmethod
    def validate_unique_keys(cls, v: List[HolidayRule]) -> List[HolidayRule]:
        """Rule keys must be unique within a region."""
        seen = set()
        for rule in v:
            if rule.key in seen:
                raise ValueError(f"Duplicate rule key: {rule.key}")
            seen.add(rule.key)
        return v

    @property
    def substitutable_keys(self) -> List[str]:
        return [rule.key for rule in self.rules if rule.substitutable]


class Config(BaseModel):
    """Configuration for the holiday provider."""

    default_region: str = Field(default="CA", description="Region used when none is given")
    default_locale: str = Field(default=DEFAULT_LOCALE, description="Locale for holiday names")
    output_format: str = Field(default="console", description="Default output: console, json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Restrict output formats to the supported ones."""
        if v not in ("console", "json", "csv"):
            raise ValueError("output_format must be console, json or csv")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level
