"""
Models package - Data classes and enums for the stadium factor system.

This package contains the core data models:
- weather.py: Weather observations and precipitation classes
- games.py: Scheduled games
- results.py: Team advantage, position impacts and stadium results
"""

from nfl_stadium_factors.models.weather import (
    Precipitation,
    WeatherObservation,
)
from nfl_stadium_factors.models.games import (
    GameStatus,
    ScheduledGame,
)
from nfl_stadium_factors.models.results import (
    TeamAdvantage,
    PositionImpacts,
    StadiumFactorResult,
    StadiumFactorReport,
)

__all__ = [
    # Weather models
    "Precipitation",
    "WeatherObservation",
    # Game models
    "GameStatus",
    "ScheduledGame",
    # Result models
    "TeamAdvantage",
    "PositionImpacts",
    "StadiumFactorResult",
    "StadiumFactorReport",
]
