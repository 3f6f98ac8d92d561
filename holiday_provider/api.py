"""
FastAPI REST API for the holiday provider.
"""

from datetime import date
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from holiday_provider import __version__
from holiday_provider.config.manager import ConfigManager
from holiday_provider.core.provider import HolidayProvider
from holiday_provider.data.regions import list_regions
from holiday_provider.data.schemas import Holiday
from holiday_provider.exceptions import HolidayProviderError, UnknownRegionError

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()


# API Models
class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    key: str
    name: str
    date: date
    weekday: str
    type: str
    substitutes: Optional[str] = None
    names: Dict[str, str]


class HolidaysResponse(BaseModel):
    """Response model for the holidays of a region and year."""

    region: str
    year: int
    locale: str
    timezone: str
    count: int
    holidays: List[HolidayResponse]


class CheckResponse(BaseModel):
    """Response model for a single date check."""

    region: str
    date: date
    is_holiday: bool
    holidays: List[HolidayResponse]


class RegionInfo(BaseModel):
    """Information about a region."""

    code: str
    name: str
    timezone: str
    holidays: List[str]
    substitutable: List[str]


def _to_response(holiday: Holiday) -> HolidayResponse:
    return HolidayResponse(
        key=holiday.key,
        name=holiday.name,
        date=holiday.date,
        weekday=holiday.weekday.name.title(),
        type=holiday.holiday_type.value,
        substitutes=holiday.substitutes,
        names=dict(holiday.names),
    )


def _get_provider(region: str, locale: Optional[str]) -> HolidayProvider:
    """Build a provider, translating errors to HTTP responses."""
    try:
        return HolidayProvider(region, locale=locale or config.default_locale)
    except UnknownRegionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except HolidayProviderError as e:
        raise HTTPException(status_code=400, detail=str(e))


# FastAPI app
app = FastAPI(
    title="Holiday Provider API",
    description="Public holidays per country and year, with observed substitute days",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Holiday Provider API",
        "version": __version__,
        "endpoints": {
            "GET /holidays/{region}/{year}": "Get holidays for a year",
            "GET /check/{region}/{date}": "Check whether a date is a holiday",
            "GET /regions": "List all supported regions",
        },
    }


@app.get("/holidays/{region}/{year}", response_model=HolidaysResponse)
async def get_holidays(
    region: str,
    year: int,
    locale: Optional[str] = Query(None, description="Locale for holiday names, e.g. fr_CA"),
):
    """
    Get all holidays for a specific year and region, ordered by date.

    Args:
        region: Region code (e.g., CA, US)
        year: Year (e.g., 2024, 2025)
    """
    # Validate year
    if year < 1 or year > 9999:
        raise HTTPException(
            status_code=400,
            detail="Year must be between 1 and 9999",
        )

    provider = _get_provider(region, locale)
    try:
        holidays = provider.get_holidays_for_year(year).sorted_by_date()
    except HolidayProviderError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return HolidaysResponse(
        region=provider.region.code,
        year=year,
        locale=provider.locale,
        timezone=provider.timezone,
        count=len(holidays),
        holidays=[_to_response(h) for h in holidays],
    )


@app.get("/check/{region}/{check_date}", response_model=CheckResponse)
async def check_holiday(
    region: str,
    check_date: date,
    locale: Optional[str] = Query(None, description="Locale for holiday names"),
):
    """
    Check whether a date is a holiday in a region.
    """
    provider = _get_provider(region, locale)
    holidays = provider.get_holidays_for_range(check_date, check_date)
    return CheckResponse(
        region=provider.region.code,
        date=check_date,
        is_holiday=bool(holidays),
        holidays=[_to_response(h) for h in holidays],
    )


@app.get("/regions", response_model=List[RegionInfo])
async def regions():
    """
    List all supported regions with the keys of their holidays.
    """
    return [
        RegionInfo(
            code=region.code,
            name=region.name,
            timezone=region.timezone,
            holidays=[rule.key for rule in region.rules],
            substitutable=region.substitutable_keys,
        )
        for region in list_regions()
    ]


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
