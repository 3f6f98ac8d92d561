"""
Output formatting and export functionality.
"""

from holiday_provider.output.formatter import ConsoleFormatter
from holiday_provider.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
