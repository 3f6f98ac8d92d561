"""
MCP Server for the Holiday Provider.

This module provides an MCP (Model Context Protocol) server that exposes
holiday lookups to MCP clients.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from datetime import date
from typing import Optional

from mcp.server.fastmcp import FastMCP

from holiday_provider.config.manager import ConfigManager
from holiday_provider.core.provider import HolidayProvider
from holiday_provider.data.regions import list_regions
from holiday_provider.exceptions import HolidayProviderError
from holiday_provider.output.exporter import ResultExporter

logger = logging.getLogger(__name__)


def get_holidays(year: int, region: Optional[str] = None, locale: Optional[str] = None) -> dict:
    """
    Get all public holidays for a year and region, including observed days.

    When a holiday such as New Year's Day or Christmas falls on a weekend,
    an extra "observed" holiday is listed on the nearest weekday
    (Friday for Saturday, Monday for Sunday).

    Args:
        year: Year (e.g., 2025)
        region: Region code, "CA" for Canada or "US" for the United States
        locale: Locale for holiday names (e.g., "en_US", "fr_CA")

    Returns:
        Dictionary with the region, year and a list of holidays with
        key, name, date, weekday and type.

    Examples:
        >>> get_holidays(2023, region="CA")
        >>> get_holidays(2025, region="CA", locale="fr_CA")
    """
    try:
        config = ConfigManager().load_config()
        provider = HolidayProvider(region or config.default_region, locale=locale or config.default_locale)
        holidays = provider.get_holidays_for_year(year).sorted_by_date()
    except (HolidayProviderError, ValueError) as e:
        logger.error(f"get_holidays failed: {e}")
        return {"error": str(e)}

    return {
        "region": provider.region.code,
        "region_name": provider.region.name,
        "year": year,
        "count": len(holidays),
        "holidays": [ResultExporter.holiday_to_dict(h) for h in holidays],
    }


def is_holiday(check_date: str, region: Optional[str] = None, locale: Optional[str] = None) -> dict:
    """
    Check whether a date is a public holiday in a region.

    Args:
        check_date: Date in format YYYY-MM-DD (e.g., "2023-01-02")
        region: Region code, "CA" or "US"
        locale: Locale for holiday names

    Returns:
        Dictionary with is_holiday and the matching holidays.
    """
    try:
        day = date.fromisoformat(check_date)
    except ValueError as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

    try:
        config = ConfigManager().load_config()
        provider = HolidayProvider(region or config.default_region, locale=locale or config.default_locale)
        holidays = provider.get_holidays_for_range(day, day)
    except (HolidayProviderError, ValueError) as e:
        logger.error(f"is_holiday failed: {e}")
        return {"error": str(e)}

    return {
        "date": day.isoformat(),
        "region": provider.region.code,
        "is_holiday": bool(holidays),
        "holidays": [ResultExporter.holiday_to_dict(h) for h in holidays],
    }


def get_regions() -> dict:
    """
    List all supported regions.

    Returns:
        Dictionary with the count and the code, name and timezone of each region.
    """
    regions = list_regions()
    return {
        "count": len(regions),
        "regions": [
            {"code": region.code, "name": region.name, "timezone": region.timezone}
            for region in regions
        ],
    }


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Holiday Provider", host=host, port=port)

    mcp.tool()(get_holidays)
    mcp.tool()(is_holiday)
    mcp.tool()(get_regions)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Holiday Provider MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", "8080")),
        help="Port to listen on (SSE mode only, default: 8080)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    mcp = create_mcp_server(host=args.host, port=args.port)
    logger.info(f"Starting Holiday Provider MCP server ({args.transport})")
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
