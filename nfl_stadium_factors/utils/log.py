"""
Logging setup for command line runs.
"""

import logging
from pathlib import Path
from typing import Optional

from nfl_stadium_factors.config.settings import LoggingSettings


def configure_logging(settings: Optional[LoggingSettings] = None, level: Optional[str] = None) -> None:
    """
    Configure the root logger from logging settings.

    Args:
        settings: Logging settings (defaults are used when omitted)
        level: Level name overriding the configured one
    """
    settings = settings or LoggingSettings()
    handlers = [logging.StreamHandler()]

    if settings.log_to_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, (level or settings.level).upper(), logging.INFO),
        format=settings.format,
        handlers=handlers,
        force=True,
    )
