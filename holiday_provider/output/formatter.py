"""
Console output formatting using Rich.
"""

from datetime import date
from typing import Iterable, List, Optional

from rich.console import Console
from rich.table import Table

from holiday_provider.data.schemas import Holiday, Region


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_holidays(self, holidays: Iterable[Holiday], title: str = "Holidays") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: Holidays to display.
            title: Table title.
        """
        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=10)
        holiday_table.add_column("Name", style="white")
        holiday_table.add_column("Key", style="dim")

        for holiday in holidays:
            name = f"[italic]{holiday.name}[/italic]" if holiday.is_substitute else holiday.name
            holiday_table.add_row(
                holiday.iso_date,
                holiday.weekday.name.title(),
                name,
                holiday.key,
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, region: Region, holidays: List[Holiday]) -> None:
        """
        Print all holidays for a year and region.

        Args:
            year: Year.
            region: Region the holidays belong to.
            holidays: List of holidays.
        """
        self.console.print()
        self.console.rule(f"[bold blue]Holidays {year} - {region.name}[/bold blue]")
        self.console.print()

        if holidays:
            self.print_holidays(holidays, title=f"{len(holidays)} holidays ({region.timezone})")
        else:
            self.console.print("[dim]No holidays found for this year.[/dim]")

        self.console.print()

    def print_check(self, check_date: date, region: Region, holidays: List[Holiday]) -> None:
        """Print whether a date is a holiday in a region."""
        if holidays:
            names = ", ".join(holiday.name for holiday in holidays)
            self.console.print(
                f"[bold green]{check_date.isoformat()}[/bold green] is a holiday in {region.name}: {names}"
            )
        else:
            self.console.print(f"[yellow]{check_date.isoformat()}[/yellow] is not a holiday in {region.name}")

    def print_regions(self, regions: List[Region]) -> None:
        """Print a table of all supported regions."""
        self.console.print()
        self.console.rule("[bold blue]Supported Regions[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Code", style="cyan", width=6)
        table.add_column("Name", style="white")
        table.add_column("Timezone", style="dim")
        table.add_column("Rules", justify="right")

        for region in regions:
            table.add_row(region.code, region.name, region.timezone, str(len(region.rules)))

        self.console.print(table)
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
