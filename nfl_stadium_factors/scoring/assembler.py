"""
Result Assembler & Ranker - Join the scoring components per stadium.

This module contains:
- weather_summary: Short display string for a game's weather
- build_stadium_result: Score one stadium and matchup
- rank_results: Order results by weather impact
"""

from typing import Dict, Iterable, List, Optional

from nfl_stadium_factors.config.parameters import ScoringParameters
from nfl_stadium_factors.data.stadiums import StadiumProfile
from nfl_stadium_factors.data.team_profiles import TeamWeatherProfile
from nfl_stadium_factors.models.results import StadiumFactorResult
from nfl_stadium_factors.models.weather import WeatherObservation
from nfl_stadium_factors.scoring.adjustments import apply_adjustment
from nfl_stadium_factors.scoring.advantage import compute_advantage
from nfl_stadium_factors.scoring.impacts import ImpactKind
from nfl_stadium_factors.scoring.positions import compute_position_impacts
from nfl_stadium_factors.utils.helpers import format_reading


def weather_summary(observation: Optional[WeatherObservation], is_dome: bool) -> str:
    """
    Display string for a game's weather.

    Examples:
        "Indoor (Dome)", "Weather unavailable", "28°F, 17 mph wind, snow"
    """
    if is_dome:
        return "Indoor (Dome)"
    if observation is None:
        return "Weather unavailable"

    summary = (
        f"{format_reading(observation.temperature_f)}°F, "
        f"{format_reading(observation.wind_mph)} mph wind"
    )
    if observation.has_precipitation:
        summary += f", {observation.precipitation.value}"
    return summary


def build_stadium_result(
    stadium: StadiumProfile,
    home_team: str,
    away_team: str,
    observation: Optional[WeatherObservation],
    profiles: Optional[Dict[str, TeamWeatherProfile]] = None,
    params: Optional[ScoringParameters] = None
) -> StadiumFactorResult:
    """
    Score one stadium for one matchup.

    Weather is ignored for domes, so their factors always equal the
    baselines.

    Args:
        stadium: Stadium profile
        home_team: Home team name
        away_team: Visiting team name
        observation: Weather at the stadium, or None
        profiles: Team profile table (defaults to TEAM_WEATHER_PROFILES)
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        StadiumFactorResult
    """
    is_dome = stadium.is_dome
    if is_dome:
        observation = None

    return StadiumFactorResult(
        stadium_name=stadium.name,
        home_team=home_team,
        away_team=away_team,
        passing_factor=apply_adjustment(stadium.base_passing, observation, ImpactKind.PASSING, params),
        rushing_factor=apply_adjustment(stadium.base_rushing, observation, ImpactKind.RUSHING, params),
        kicking_factor=apply_adjustment(stadium.base_kicking, observation, ImpactKind.KICKING, params),
        is_dome=is_dome,
        weather_summary=weather_summary(observation, is_dome),
        baseline_passing=stadium.base_passing,
        baseline_rushing=stadium.base_rushing,
        baseline_kicking=stadium.base_kicking,
        team_weather_advantage=compute_advantage(
            home_team, away_team, observation, is_dome, profiles, params
        ),
        position_impacts=compute_position_impacts(observation, is_dome, params),
        raw_weather=observation,
    )


def _rank_key(result: StadiumFactorResult):
    return (result.is_dome, -result.weather_displacement, -result.passing_factor)


def rank_results(results: Iterable[StadiumFactorResult]) -> List[StadiumFactorResult]:
    """
    Order results by weather impact.

    Outdoor stadiums come before domes; among them the largest total
    displacement from baseline comes first, then the higher passing
    factor. The sort is stable.
    """
    return sorted(results, key=_rank_key)
