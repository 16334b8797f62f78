"""
Team Weather Profiles - How each team performs in adverse conditions.

Multipliers above 1.0 help a team in the matching condition, below 1.0
hurt it. Profiles are research-backed (2022-2024 seasons). Teams missing
from the table are treated as perfectly neutral.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from enum import Enum


class ClimateType(Enum):
    """A team's home weather adaptation class."""
    COLD_WEATHER = "cold_weather"
    WARM_WEATHER = "warm_weather"
    HIGH_ALTITUDE = "high_altitude"
    PACIFIC_NORTHWEST = "pacific_northwest"
    MIDWEST_VARIABLE = "midwest_variable"
    DOME_TEAM = "dome_team"
    MILD_COASTAL = "mild_coastal"


@dataclass(frozen=True)
class TeamWeatherProfile:
    """
    Weather sensitivity of a single team.

    Every multiplier has an explicit neutral default. The three
    precipitation fields stay optional because the rain and snow rules
    fall back from one to the other; the resolved values are computed
    once at construction as ``rain_multiplier`` and ``snow_multiplier``.

    Attributes:
        team: Team name
        cold_advantage: Multiplier in cold and freezing games
        wind_resistance: Multiplier in strong wind
        heat_advantage: Multiplier in high heat
        altitude_advantage: Home multiplier from altitude
        outdoor_disadvantage: Penalty when a dome team plays outside
        dome_opponent_advantage: Edge when hosting a dome team
        precipitation_impact: Multiplier in precipitation
        rain_advantage: Rain multiplier when precipitation_impact is unset
        snow_advantage: Snow multiplier, preferred over precipitation_impact
        climate_type: Home climate class
        visiting_altitude_sickness: Visitors suffer from the home altitude
        notes: Supporting record, informational
    """
    team: str
    cold_advantage: float = 1.0
    wind_resistance: float = 1.0
    heat_advantage: float = 1.0
    altitude_advantage: float = 1.0
    outdoor_disadvantage: float = 0.88
    dome_opponent_advantage: float = 1.0
    precipitation_impact: Optional[float] = None
    rain_advantage: Optional[float] = None
    snow_advantage: Optional[float] = None
    climate_type: Optional[ClimateType] = None
    visiting_altitude_sickness: bool = False
    notes: str = ""

    rain_multiplier: float = field(init=False, default=1.0)
    snow_multiplier: float = field(init=False, default=1.0)

    def __post_init__(self):
        """Resolve precipitation fallbacks once."""
        rain = _first_set(self.precipitation_impact, self.rain_advantage)
        snow = _first_set(self.snow_advantage, self.precipitation_impact)
        object.__setattr__(self, "rain_multiplier", rain)
        object.__setattr__(self, "snow_multiplier", snow)

    @property
    def is_dome_team(self) -> bool:
        return self.climate_type is ClimateType.DOME_TEAM

    @property
    def is_warm_weather_team(self) -> bool:
        return self.climate_type is ClimateType.WARM_WEATHER

    @classmethod
    def neutral(cls, team: str) -> 'TeamWeatherProfile':
        """Profile for a team missing from the table."""
        return cls(team=team)


def _first_set(*values: Optional[float]) -> float:
    for value in values:
        if value is not None:
            return value
    return 1.0


# Team weather profiles keyed by team name
TEAM_WEATHER_PROFILES: Dict[str, TeamWeatherProfile] = {p.team: p for p in (
    # Cold weather teams
    TeamWeatherProfile("Green Bay Packers", cold_advantage=1.15, wind_resistance=1.08,
                       precipitation_impact=0.96, dome_opponent_advantage=1.12,
                       climate_type=ClimateType.COLD_WEATHER,
                       notes="12-3 in sub-40F games (2022-2024)"),
    TeamWeatherProfile("Buffalo Bills", cold_advantage=1.12, wind_resistance=1.10,
                       snow_advantage=1.15, dome_opponent_advantage=1.10,
                       climate_type=ClimateType.COLD_WEATHER),
    TeamWeatherProfile("Chicago Bears", cold_advantage=1.08, wind_resistance=1.12,
                       precipitation_impact=0.94, dome_opponent_advantage=1.08,
                       climate_type=ClimateType.COLD_WEATHER),
    TeamWeatherProfile("Cleveland Browns", cold_advantage=1.06, wind_resistance=1.06,
                       precipitation_impact=0.92, dome_opponent_advantage=1.06,
                       climate_type=ClimateType.COLD_WEATHER),
    TeamWeatherProfile("Pittsburgh Steelers", cold_advantage=1.07, wind_resistance=1.05,
                       precipitation_impact=0.95, dome_opponent_advantage=1.07,
                       climate_type=ClimateType.COLD_WEATHER),
    TeamWeatherProfile("New England Patriots", cold_advantage=1.09, wind_resistance=1.06,
                       precipitation_impact=0.96, dome_opponent_advantage=1.08,
                       climate_type=ClimateType.COLD_WEATHER),
    TeamWeatherProfile("Baltimore Ravens", cold_advantage=1.05, wind_resistance=1.04,
                       precipitation_impact=0.96, dome_opponent_advantage=1.05,
                       climate_type=ClimateType.COLD_WEATHER),

    # Warm weather teams
    TeamWeatherProfile("Miami Dolphins", cold_advantage=0.82, heat_advantage=1.15,
                       wind_resistance=0.90, dome_opponent_advantage=0.92,
                       climate_type=ClimateType.WARM_WEATHER,
                       notes="3-8 in sub-50F games (2022-2024)"),
    TeamWeatherProfile("Tampa Bay Buccaneers", cold_advantage=0.85, heat_advantage=1.12,
                       wind_resistance=0.92, precipitation_impact=1.02,
                       dome_opponent_advantage=0.94, climate_type=ClimateType.WARM_WEATHER),
    TeamWeatherProfile("Jacksonville Jaguars", cold_advantage=0.81, heat_advantage=1.14,
                       wind_resistance=0.88, dome_opponent_advantage=0.89,
                       climate_type=ClimateType.WARM_WEATHER),

    # High altitude
    TeamWeatherProfile("Denver Broncos", altitude_advantage=1.18, cold_advantage=1.05,
                       wind_resistance=1.04, dome_opponent_advantage=1.15,
                       climate_type=ClimateType.HIGH_ALTITUDE,
                       visiting_altitude_sickness=True),

    # Regional climates
    TeamWeatherProfile("Seattle Seahawks", rain_advantage=1.12, wind_resistance=1.09,
                       cold_advantage=1.03, dome_opponent_advantage=1.06,
                       climate_type=ClimateType.PACIFIC_NORTHWEST,
                       notes="Most rain-affected stadium 2022-2024"),
    TeamWeatherProfile("Kansas City Chiefs", wind_resistance=1.08, cold_advantage=1.06,
                       dome_opponent_advantage=1.08, climate_type=ClimateType.MIDWEST_VARIABLE),
    TeamWeatherProfile("San Francisco 49ers", climate_type=ClimateType.MILD_COASTAL),
    TeamWeatherProfile("Los Angeles Chargers", climate_type=ClimateType.MILD_COASTAL),

    # Dome teams suffer outdoors in adverse weather
    TeamWeatherProfile("New Orleans Saints", outdoor_disadvantage=0.88, cold_advantage=0.86,
                       wind_resistance=0.84, precipitation_impact=0.82,
                       climate_type=ClimateType.DOME_TEAM),
    TeamWeatherProfile("Atlanta Falcons", outdoor_disadvantage=0.90, cold_advantage=0.88,
                       wind_resistance=0.86, climate_type=ClimateType.DOME_TEAM),
    TeamWeatherProfile("Detroit Lions", outdoor_disadvantage=0.92, cold_advantage=0.94,
                       wind_resistance=0.88, climate_type=ClimateType.DOME_TEAM),
    TeamWeatherProfile("Minnesota Vikings", outdoor_disadvantage=0.91, cold_advantage=0.93,
                       wind_resistance=0.89, climate_type=ClimateType.DOME_TEAM),
)}


def get_team_profile(
    team: str,
    profiles: Optional[Dict[str, TeamWeatherProfile]] = None
) -> TeamWeatherProfile:
    """
    Get the weather profile for a team.

    Args:
        team: Team name
        profiles: Profile table to search (defaults to TEAM_WEATHER_PROFILES)

    Returns:
        The team's profile, or a neutral profile for unknown teams
    """
    table = TEAM_WEATHER_PROFILES if profiles is None else profiles
    profile = table.get(team)
    if profile is None:
        return TeamWeatherProfile.neutral(team)
    return profile
