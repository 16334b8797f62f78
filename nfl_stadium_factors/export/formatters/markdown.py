"""
Markdown Formatter - Export stadium factor reports to Markdown format.

This module contains:
- MarkdownFormatter: Format reports as a ranked Markdown table
"""

from pathlib import Path
from typing import Optional

from nfl_stadium_factors.models.results import StadiumFactorReport
from nfl_stadium_factors.utils.helpers import format_factor


class MarkdownFormatter:
    """
    Format stadium factor reports as Markdown.

    Usage:
        formatter = MarkdownFormatter()
        md_string = formatter.format_report(report)
    """

    def __init__(self, include_legend: bool = True):
        """
        Initialize the formatter.

        Args:
            include_legend: Whether to append the column legend
        """
        self.include_legend = include_legend

    def format_report(self, report: StadiumFactorReport, title: Optional[str] = None) -> str:
        """
        Format a report as a Markdown string.

        Args:
            report: StadiumFactorReport
            title: Custom title

        Returns:
            Markdown formatted string
        """
        if title:
            header = f"# {title}\n"
        elif report.game_date:
            header = f"# NFL Stadium Weather Factors ({report.game_date.isoformat()})\n"
        else:
            header = "# NFL Stadium Weather Factors\n"

        lines = [header]
        lines.append(f"*Generated: {report.generated_at.strftime('%Y-%m-%d %H:%M')}*\n")

        if report.is_empty:
            lines.append(report.message or "No stadium factors available.")
            return "\n".join(lines) + "\n"

        lines.append("| # | Stadium | Matchup | Pass | Rush | Kick | Weather | Adv | Narrative |")
        lines.append("|:-:|:--------|:--------|:----:|:----:|:----:|:--------|:---:|:----------|")

        for rank, result in enumerate(report.stadium_factors, start=1):
            advantage = result.team_weather_advantage
            lines.append(
                f"| {rank} | {result.stadium_name} | {result.matchup} | "
                f"{format_factor(result.passing_factor)} | {format_factor(result.rushing_factor)} | "
                f"{format_factor(result.kicking_factor)} | {result.weather_summary} | "
                f"{advantage.advantage_score} | {advantage.narrative} |"
            )

        if self.include_legend:
            lines.append("")
            lines.append("### Legend\n")
            lines.append("- **Pass/Rush/Kick**: Baseline factor after weather (1.000 = neutral)")
            lines.append("- **Adv**: Home weather advantage score (100 = no edge)")

        if report.data_sources:
            lines.append("")
            lines.append("### Sources\n")
            for source in report.data_sources:
                lines.append(f"- {source}")

        return "\n".join(lines) + "\n"

    def write_to_file(self, report: StadiumFactorReport, filepath: str) -> None:
        """Write a report to a Markdown file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format_report(report))
