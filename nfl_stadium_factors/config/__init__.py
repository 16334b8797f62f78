"""
Config package - Configuration and parameter management.

This package contains:
- parameters.py: Scoring thresholds and multipliers
- settings.py: Application settings
"""

from nfl_stadium_factors.config.parameters import (
    ScoringParameters,
    PassingParameters,
    RushingParameters,
    KickingParameters,
    AdvantageParameters,
    DEFAULT_PARAMETERS,
)
from nfl_stadium_factors.config.settings import (
    Settings,
    WeatherSettings,
    ScheduleSettings,
    LoggingSettings,
    get_settings,
    set_settings,
    reset_settings,
)

__all__ = [
    "ScoringParameters",
    "PassingParameters",
    "RushingParameters",
    "KickingParameters",
    "AdvantageParameters",
    "DEFAULT_PARAMETERS",
    "Settings",
    "WeatherSettings",
    "ScheduleSettings",
    "LoggingSettings",
    "get_settings",
    "set_settings",
    "reset_settings",
]
