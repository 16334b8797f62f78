"""
NFL Stadium Factors - Weather-adjusted performance factors for NFL stadiums.

This package provides tools for:
- Research-backed passing, rushing and kicking weather impacts
- Stadium baseline factors adjusted for current weather
- Home-vs-away team weather advantage scores
- Position group weather multipliers
- Live schedule and weather lookups with concurrent fan-out
- JSON and Markdown export of ranked stadium factors

Example usage:
    from nfl_stadium_factors import StadiumFactorEngine, JSONFormatter

    engine = StadiumFactorEngine.from_settings()
    report = engine.calculate("2025-12-14")
    print(JSONFormatter().format_report(report))
"""

__version__ = "1.0.0"

# Core models
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

# Reference data
from nfl_stadium_factors.data.stadiums import (
    StadiumProfile,
    STADIUM_PROFILES,
)
from nfl_stadium_factors.data.team_profiles import (
    ClimateType,
    TeamWeatherProfile,
    TEAM_WEATHER_PROFILES,
)

# Scoring engine
from nfl_stadium_factors.scoring import (
    ImpactKind,
    passing_impact,
    rushing_impact,
    kicking_impact,
    apply_adjustment,
    compute_advantage,
    build_narrative,
    compute_position_impacts,
    build_stadium_result,
    rank_results,
)

# Data sources and orchestration
from nfl_stadium_factors.data.sources import (
    ScheduleDataSource,
    WeatherDataSource,
    ESPNScheduleSource,
    OpenWeatherMapSource,
)
from nfl_stadium_factors.data.pipeline import WeatherPipeline
from nfl_stadium_factors.engine import StadiumFactorEngine

# Export formatters
from nfl_stadium_factors.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
)

# Configuration
from nfl_stadium_factors.config.parameters import (
    ScoringParameters,
    DEFAULT_PARAMETERS,
)
from nfl_stadium_factors.config.settings import (
    Settings,
    get_settings,
)

# Utilities
from nfl_stadium_factors.utils.validators import ValidationError

__all__ = [
    # Version
    "__version__",
    # Models
    "Precipitation",
    "WeatherObservation",
    "GameStatus",
    "ScheduledGame",
    "TeamAdvantage",
    "PositionImpacts",
    "StadiumFactorResult",
    "StadiumFactorReport",
    # Reference data
    "StadiumProfile",
    "STADIUM_PROFILES",
    "ClimateType",
    "TeamWeatherProfile",
    "TEAM_WEATHER_PROFILES",
    # Scoring
    "ImpactKind",
    "passing_impact",
    "rushing_impact",
    "kicking_impact",
    "apply_adjustment",
    "compute_advantage",
    "build_narrative",
    "compute_position_impacts",
    "build_stadium_result",
    "rank_results",
    # Data sources
    "ScheduleDataSource",
    "WeatherDataSource",
    "ESPNScheduleSource",
    "OpenWeatherMapSource",
    "WeatherPipeline",
    "StadiumFactorEngine",
    # Export
    "JSONFormatter",
    "MarkdownFormatter",
    # Config
    "ScoringParameters",
    "DEFAULT_PARAMETERS",
    "Settings",
    "get_settings",
    # Utils
    "ValidationError",
]
