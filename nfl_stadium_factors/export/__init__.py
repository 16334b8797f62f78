"""
Export package - Report formatters.

This package contains:
- formatters/: JSON and Markdown formatters
"""

from nfl_stadium_factors.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
)

__all__ = [
    "JSONFormatter",
    "MarkdownFormatter",
]
