"""
CLI interface for the holiday provider.
"""

import logging
import sys
from datetime import date, datetime
from typing import Optional

import click

from holiday_provider import __version__
from holiday_provider.config.manager import ConfigManager
from holiday_provider.core.provider import HolidayProvider
from holiday_provider.data.regions import REGIONS, list_regions
from holiday_provider.data.schemas import Config
from holiday_provider.exceptions import HolidayProviderError
from holiday_provider.i18n import SUPPORTED_LOCALES
from holiday_provider.output.exporter import ResultExporter
from holiday_provider.output.formatter import ConsoleFormatter

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def load_config(config_path: Optional[str]) -> Config:
    """Load configuration and apply its log level."""
    cfg = ConfigManager(config_path).load_config()
    if not logging.getLogger().isEnabledFor(logging.DEBUG):
        logging.getLogger().setLevel(cfg.log_level)
    return cfg


@click.group()
@click.version_option(version=__version__, prog_name="holiday-provider")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
def main(debug):
    """Holiday Provider - Public holidays per country and year."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.option(
    "--year", "-y",
    type=click.IntRange(min=1),
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--region", "-r",
    type=click.Choice(sorted(REGIONS), case_sensitive=False),
    default=None,
    help="Region code (default: from config)",
)
@click.option(
    "--locale", "-l",
    default=None,
    help=f"Locale for holiday names ({', '.join(SUPPORTED_LOCALES)})",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["console", "json", "csv"]),
    default=None,
    help="Output format (default: from config)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path for json/csv (optional)",
)
@click.option(
    "--sort/--no-sort",
    default=True,
    help="Sort holidays by date (default) or keep computation order",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def holidays(year, region, locale, output_format, output, sort, config):
    """List holidays for a specific year and region."""
    formatter = ConsoleFormatter()

    try:
        # Default to current year
        if year is None:
            year = date.today().year

        cfg = load_config(config)
        provider = HolidayProvider(region or cfg.default_region, locale=locale or cfg.default_locale)
        collection = provider.get_holidays_for_year(year)
        holiday_list = collection.sorted_by_date() if sort else list(collection)

        output_format = output_format or cfg.output_format
        if output_format == "console":
            formatter.print_holidays_for_year(year, provider.region, holiday_list)
            return

        exporter = ResultExporter(output_directory=cfg.output_directory)
        if output_format == "json":
            path = exporter.export_holidays_json(holiday_list, output, region=provider.region.code, year=year)
        else:
            path = exporter.export_holidays_csv(holiday_list, output)
        formatter.print_success(f"Holidays saved to {path}")

    except (HolidayProviderError, ValueError) as e:
        logger.debug("Detailed error:", exc_info=True)
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.argument("check_date")
@click.option(
    "--region", "-r",
    type=click.Choice(sorted(REGIONS), case_sensitive=False),
    default=None,
    help="Region code (default: from config)",
)
@click.option(
    "--locale", "-l",
    default=None,
    help="Locale for holiday names",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def check(check_date, region, locale, config):
    """Check whether CHECK_DATE is a holiday."""
    formatter = ConsoleFormatter()

    try:
        day = parse_date(check_date)
        cfg = load_config(config)
        provider = HolidayProvider(region or cfg.default_region, locale=locale or cfg.default_locale)
        found = provider.get_holidays_for_range(day, day)
    except (HolidayProviderError, ValueError) as e:
        formatter.print_error(str(e))
        sys.exit(1)

    formatter.print_check(day, provider.region, found)


@main.command()
def regions():
    """List all supported regions with their codes."""
    formatter = ConsoleFormatter()
    formatter.print_regions(list_regions())


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
def serve(host, port, config):
    """Start the FastAPI server."""
    import uvicorn

    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    # Use provided values or fall back to config
    api_host = host or cfg.api_host
    api_port = port or cfg.api_port

    formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
    formatter.console.print("Press Ctrl+C to stop")
    formatter.console.print()

    uvicorn.run(
        "holiday_provider.api:app",
        host=api_host,
        port=api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
