"""
Formatters package - Output format converters.

This package contains:
- json.py: JSON output formatter
- markdown.py: Markdown output formatter
"""

from nfl_stadium_factors.export.formatters.json import JSONFormatter
from nfl_stadium_factors.export.formatters.markdown import MarkdownFormatter

__all__ = [
    "JSONFormatter",
    "MarkdownFormatter",
]
