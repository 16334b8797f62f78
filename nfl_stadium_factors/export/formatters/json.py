"""
JSON Formatter - Export stadium factor reports to JSON format.

This module contains:
- JSONFormatter: Format reports as JSON
"""

import json
from pathlib import Path
from typing import Optional

from nfl_stadium_factors.models.results import StadiumFactorReport


class JSONFormatter:
    """
    Format stadium factor reports as JSON.

    Usage:
        formatter = JSONFormatter()
        json_string = formatter.format_report(report)
        formatter.write_to_file(report, "stadium_factors.json")
    """

    def __init__(self, indent: Optional[int] = 2, sort_keys: bool = False):
        """
        Initialize the formatter.

        Args:
            indent: JSON indentation level (None for compact output)
            sort_keys: Whether to sort dictionary keys
        """
        self.indent = indent
        self.sort_keys = sort_keys

    def format_report(self, report: StadiumFactorReport) -> str:
        """
        Format a report as a JSON string.

        Args:
            report: StadiumFactorReport

        Returns:
            JSON formatted string
        """
        return json.dumps(
            report.to_dict(),
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=False
        )

    def write_to_file(self, report: StadiumFactorReport, filepath: str) -> None:
        """Write a report to a JSON file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format_report(report))
