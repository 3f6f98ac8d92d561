"""
Export functionality for computed holidays.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from holiday_provider.data.schemas import Holiday


class ResultExporter:
    """Exports holiday lists to JSON and CSV files."""

    CSV_HEADER = ["Date", "Weekday", "Key", "Name", "Type", "Substitutes", "Timezone"]

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, output_path: Optional[str], prefix: str, extension: str) -> Path:
        """Use the given path, or a timestamped file in the output directory."""
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"{prefix}_{timestamp}.{extension}"

    @staticmethod
    def holiday_to_dict(holiday: Holiday) -> Dict[str, Any]:
        """JSON-serializable view of a holiday."""
        return {
            "key": holiday.key,
            "name": holiday.name,
            "date": holiday.iso_date,
            "weekday": holiday.weekday.name.title(),
            "type": holiday.holiday_type.value,
            "substitutes": holiday.substitutes,
            "names": dict(holiday.names),
            "locale": holiday.locale,
            "timezone": holiday.timezone,
        }

    def export_holidays_json(
        self,
        holidays: List[Holiday],
        output_path: Optional[str] = None,
        region: Optional[str] = None,
        year: Optional[int] = None,
    ) -> str:
        """
        Export holidays to a JSON file.

        Args:
            holidays: Holidays to export.
            output_path: Optional specific output path.
            region: Region code recorded in the file.
            year: Year recorded in the file.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "holidays", "json")

        data = {
            "region": region,
            "year": year,
            "count": len(holidays),
            "holidays": [self.holiday_to_dict(holiday) for holiday in holidays],
        }

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return str(file_path)

    def export_holidays_csv(self, holidays: List[Holiday], output_path: Optional[str] = None) -> str:
        """
        Export holidays to a CSV file.

        Args:
            holidays: Holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "holidays", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self.CSV_HEADER)

            for holiday in holidays:
                writer.writerow([
                    holiday.iso_date,
                    holiday.weekday.name.title(),
                    holiday.key,
                    holiday.name,
                    holiday.holiday_type.value,
                    holiday.substitutes or "",
                    holiday.timezone,
                ])

        return str(file_path)
