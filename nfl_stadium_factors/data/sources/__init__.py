"""
Data Sources - Pluggable data source implementations.

This package contains:
- base.py: Abstract base classes for data sources
- espn.py: ESPN scoreboard schedule source
- openweather.py: OpenWeatherMap weather source
"""

from nfl_stadium_factors.data.sources.base import (
    DataSource,
    ScheduleDataSource,
    WeatherDataSource,
)
from nfl_stadium_factors.data.sources.espn import ESPNScheduleSource, parse_scoreboard
from nfl_stadium_factors.data.sources.openweather import OpenWeatherMapSource, parse_observation

__all__ = [
    "DataSource",
    "ScheduleDataSource",
    "WeatherDataSource",
    "ESPNScheduleSource",
    "parse_scoreboard",
    "OpenWeatherMapSource",
    "parse_observation",
]
