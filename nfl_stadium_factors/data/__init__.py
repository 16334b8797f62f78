"""
Data package - Reference tables, data sources, and the weather pipeline.

This package contains:
- stadiums.py: Stadium coordinates, baselines and roof types
- team_profiles.py: Team weather profiles
- positions.py: Position group weather coefficients
- sources/: Schedule and weather data sources
- pipeline.py: Concurrent weather lookups
"""

from nfl_stadium_factors.data.stadiums import (
    StadiumProfile,
    STADIUM_PROFILES,
    TEAM_STADIUMS,
    get_stadium,
    get_stadium_for_team,
    resolve_stadium,
)
from nfl_stadium_factors.data.team_profiles import (
    ClimateType,
    TeamWeatherProfile,
    TEAM_WEATHER_PROFILES,
    get_team_profile,
)
from nfl_stadium_factors.data.positions import (
    PositionGroup,
    PositionWeatherImpact,
    POSITION_WEATHER_IMPACTS,
)
from nfl_stadium_factors.data.pipeline import WeatherPipeline

__all__ = [
    "StadiumProfile",
    "STADIUM_PROFILES",
    "TEAM_STADIUMS",
    "get_stadium",
    "get_stadium_for_team",
    "resolve_stadium",
    "ClimateType",
    "TeamWeatherProfile",
    "TEAM_WEATHER_PROFILES",
    "get_team_profile",
    "PositionGroup",
    "PositionWeatherImpact",
    "POSITION_WEATHER_IMPACTS",
    "WeatherPipeline",
]
