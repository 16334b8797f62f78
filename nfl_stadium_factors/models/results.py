"""
Result Models - Scored output records.

This module contains:
- TeamAdvantage: Home-vs-away weather edge for one game
- PositionImpacts: Per position-group weather multipliers
- StadiumFactorResult: Everything the dashboard shows for one stadium
- StadiumFactorReport: The ranked collection returned to callers
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple, Dict, Any

from nfl_stadium_factors.models.weather import WeatherObservation
from nfl_stadium_factors.utils.helpers import round_factor


@dataclass(frozen=True)
class TeamAdvantage:
    """
    Weather advantage of the home team over the visitor.

    Attributes:
        home_advantage: Cumulative home multiplier
        away_disadvantage: Cumulative visitor multiplier
        advantage_score: 100 x home / away (100 = no edge)
        narrative: Human-readable label
        factors: Weather conditions that contributed, in application order
    """
    home_advantage: float = 1.0
    away_disadvantage: float = 1.0
    advantage_score: int = 100
    narrative: str = "Neutral weather conditions"
    factors: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_advantage": self.home_advantage,
            "away_disadvantage": self.away_disadvantage,
            "advantage_score": self.advantage_score,
            "weather_narrative": self.narrative,
            "weather_factors": list(self.factors),
        }


@dataclass(frozen=True)
class PositionImpacts:
    """
    Weather multipliers per position group (1.0 = unaffected).

    Attributes:
        passing_offense: Passing game multiplier
        rushing_offense: Running game multiplier
        field_goal_unit: Kicking multiplier
        defense: Defensive effectiveness multiplier
        turnover_rate: Turnover likelihood multiplier
    """
    passing_offense: float = 1.0
    rushing_offense: float = 1.0
    field_goal_unit: float = 1.0
    defense: float = 1.0
    turnover_rate: float = 1.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "passing_offense": self.passing_offense,
            "rushing_offense": self.rushing_offense,
            "field_goal_unit": self.field_goal_unit,
            "defense": self.defense,
            "turnover_rate": self.turnover_rate,
        }


@dataclass(frozen=True)
class StadiumFactorResult:
    """
    Weather-adjusted factors for one stadium and matchup.

    Attributes:
        stadium_name: Stadium name
        home_team: Home team name
        away_team: Visiting team name
        passing_factor: Baseline passing factor after weather
        rushing_factor: Baseline rushing factor after weather
        kicking_factor: Baseline kicking factor after weather
        is_dome: Indoor stadium
        weather_summary: Short weather description
        baseline_passing: Stadium's weather-independent passing factor
        baseline_rushing: Stadium's weather-independent rushing factor
        baseline_kicking: Stadium's weather-independent kicking factor
        team_weather_advantage: Home-vs-away weather edge
        position_impacts: Position group multipliers
        raw_weather: Observation used, None for domes or missing data
    """
    stadium_name: str
    home_team: str
    away_team: str
    passing_factor: float
    rushing_factor: float
    kicking_factor: float
    is_dome: bool
    weather_summary: str
    baseline_passing: float
    baseline_rushing: float
    baseline_kicking: float
    team_weather_advantage: TeamAdvantage = field(default_factory=TeamAdvantage)
    position_impacts: PositionImpacts = field(default_factory=PositionImpacts)
    raw_weather: Optional[WeatherObservation] = None

    @property
    def matchup(self) -> str:
        """Short "Away @ Home" label."""
        return f"{self.away_team} @ {self.home_team}"

    @property
    def weather_displacement(self) -> float:
        """Total distance of the adjusted factors from their baselines, in 3-decimal form."""
        return round_factor(
            abs(self.passing_factor - self.baseline_passing)
            + abs(self.rushing_factor - self.baseline_rushing)
            + abs(self.kicking_factor - self.baseline_kicking)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dashboard's stadium record."""
        return {
            "stadium": self.stadium_name,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "passing_factor": self.passing_factor,
            "rushing_factor": self.rushing_factor,
            "kicking_factor": self.kicking_factor,
            "weather": self.weather_summary,
            "base_passing_factor": self.baseline_passing,
            "base_rushing_factor": self.baseline_rushing,
            "base_kicking_factor": self.baseline_kicking,
            "is_dome": self.is_dome,
            "team_weather_advantage": self.team_weather_advantage.to_dict(),
            "position_impacts": self.position_impacts.to_dict(),
            "weather_details": self.raw_weather.to_dict() if self.raw_weather else None,
        }


@dataclass(frozen=True)
class StadiumFactorReport:
    """
    Ranked stadium factors for one request.

    Attributes:
        stadium_factors: Results in ranked order
        generated_at: When the report was computed
        game_date: Requested date, None for a league-wide snapshot
        message: Explanation when there is nothing to score
        data_sources: Research the multiplier tables are based on
    """
    stadium_factors: Tuple[StadiumFactorResult, ...]
    generated_at: datetime
    game_date: Optional[date] = None
    message: Optional[str] = None
    data_sources: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.stadium_factors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_updated": self.generated_at.isoformat(),
            "date": self.game_date.isoformat() if self.game_date else None,
            "stadium_factors": [result.to_dict() for result in self.stadium_factors],
            "message": self.message,
            "data_sources": list(self.data_sources),
        }
