"""
Command line entry point.

Usage:
    nfl-stadium-factors --date 2025-12-14
    nfl-stadium-factors --all-stadiums --format markdown --output out/factors.md
"""

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from nfl_stadium_factors.config.settings import get_settings
from nfl_stadium_factors.engine import StadiumFactorEngine
from nfl_stadium_factors.export.formatters import JSONFormatter, MarkdownFormatter
from nfl_stadium_factors.utils.log import configure_logging
from nfl_stadium_factors.utils.validators import (
    OUTPUT_FORMATS,
    ValidationError,
    validate_game_date,
    validate_output_format,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nfl-stadium-factors",
        description="Weather-adjusted passing, rushing and kicking factors for NFL stadiums.",
    )
    parser.add_argument("--date", help="Game date (YYYY-MM-DD); defaults to today")
    parser.add_argument("--all-stadiums", action="store_true",
                        help="Score every stadium against a sample opponent instead of the schedule")
    parser.add_argument("--away-team", help="Sample opponent for --all-stadiums")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None,
                        help="Output format (defaults to the configured format)")
    parser.add_argument("--output", help="Write the report to this file instead of stdout")
    parser.add_argument("--log-level", default=None, help="Log level (e.g. DEBUG, INFO)")
    return parser


def main(argv: Optional[List[str]] = None, engine: Optional[StadiumFactorEngine] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        engine: Engine to use (built from settings when omitted)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.logging, args.log_level)

    fmt = args.format or settings.output.default_format
    try:
        validate_output_format(fmt)
        game_date = validate_game_date(args.date) if args.date else date.today()
    except ValidationError as e:
        logger.error("%s", e)
        return 2

    engine = engine or StadiumFactorEngine.from_settings(settings)
    if args.all_stadiums:
        report = engine.calculate_all_stadiums(args.away_team)
    else:
        report = engine.calculate(game_date)

    if fmt == "markdown":
        formatter = MarkdownFormatter()
    else:
        formatter = JSONFormatter(indent=2 if settings.output.pretty_print else None)

    if args.output:
        formatter.write_to_file(report, args.output)
        logger.info("Wrote %d stadium factors to %s", len(report.stadium_factors), args.output)
    else:
        sys.stdout.write(formatter.format_report(report) + "\n")

    return 0
