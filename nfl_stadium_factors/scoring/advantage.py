"""
Team Advantage Calculator - Which side the weather favors.

This module contains:
- compute_advantage: Home-vs-away weather multipliers for a matchup
- build_narrative: Label an advantage score

Both teams' profiles are applied condition by condition; the ratio of
the home multiplier to the visitor multiplier is the advantage score
(100 = no edge).
"""

import operator
from typing import Dict, List, Optional, Sequence

from nfl_stadium_factors.config.parameters import DEFAULT_PARAMETERS, ScoringParameters
from nfl_stadium_factors.data.team_profiles import TeamWeatherProfile, get_team_profile
from nfl_stadium_factors.models.results import TeamAdvantage
from nfl_stadium_factors.models.weather import Precipitation, WeatherObservation
from nfl_stadium_factors.utils.helpers import round_factor, round_half_up

INDOOR_NARRATIVE = "Indoor game - no weather impact"
UNAVAILABLE_NARRATIVE = "Weather data unavailable"
NEUTRAL_NARRATIVE = "Neutral weather conditions"


def build_narrative(
    advantage_score: int,
    factors: Sequence[str],
    params: Optional[ScoringParameters] = None
) -> str:
    """
    Describe an advantage score.

    Cutoffs are checked top-down and the first match wins. Non-neutral
    labels list the contributing factors in parentheses.

    Args:
        advantage_score: 100 x home / away multiplier
        factors: Contributing conditions, in application order
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        Narrative string
    """
    cfg = (params or DEFAULT_PARAMETERS).advantage
    tiers = (
        (operator.ge, cfg.major_home_score, "Major home weather advantage"),
        (operator.ge, cfg.strong_home_score, "Strong home weather advantage"),
        (operator.ge, cfg.moderate_home_score, "Moderate home weather advantage"),
        (operator.le, cfg.away_better_score, "Away team handles conditions better"),
        (operator.le, cfg.slight_away_score, "Slight away team advantage"),
    )

    for compare, cutoff, label in tiers:
        if compare(advantage_score, cutoff):
            if factors:
                return f"{label} ({', '.join(factors)})"
            return label

    return NEUTRAL_NARRATIVE


def _graduated(multiplier: float, weight: float) -> float:
    """Scale a multiplier's distance from 1.0 by weight (0-1)."""
    return 1 + (multiplier - 1) * weight


def compute_advantage(
    home_team: str,
    away_team: str,
    observation: Optional[WeatherObservation],
    is_dome: bool,
    profiles: Optional[Dict[str, TeamWeatherProfile]] = None,
    params: Optional[ScoringParameters] = None
) -> TeamAdvantage:
    """
    Calculate the weather edge of the home team over the visitor.

    Args:
        home_team: Home team name
        away_team: Visiting team name
        observation: Weather for the game, or None
        is_dome: Game is played indoors
        profiles: Team profile table (defaults to TEAM_WEATHER_PROFILES)
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        TeamAdvantage with multipliers rounded to 3 decimals
    """
    if is_dome:
        return TeamAdvantage(narrative=INDOOR_NARRATIVE)
    if observation is None:
        return TeamAdvantage(narrative=UNAVAILABLE_NARRATIVE)

    params = params or DEFAULT_PARAMETERS
    cfg = params.advantage
    home = get_team_profile(home_team, profiles)
    away = get_team_profile(away_team, profiles)

    temp = observation.temperature_f
    wind = observation.wind_mph
    precipitation = observation.precipitation

    home_advantage = 1.0
    away_disadvantage = 1.0
    factors: List[str] = []

    # Cold
    if temp <= params.freezing_threshold:
        home_advantage *= home.cold_advantage
        away_disadvantage *= away.cold_advantage
        factors.append("freezing conditions")

        if away.is_warm_weather_team:
            away_disadvantage *= cfg.warm_weather_freezing_penalty
    elif temp <= cfg.cold_threshold:
        cold_factor = (cfg.cold_threshold - temp) / cfg.cold_scale
        home_advantage *= _graduated(home.cold_advantage, cold_factor)
        away_disadvantage *= _graduated(away.cold_advantage, cold_factor)
        factors.append("cold weather")

    # Heat
    if temp >= cfg.heat_threshold:
        home_advantage *= home.heat_advantage
        away_disadvantage *= away.heat_advantage
        factors.append("high heat")

    # Wind
    if wind >= cfg.wind_threshold:
        home_advantage *= home.wind_resistance
        away_disadvantage *= away.wind_resistance
        factors.append("strong winds")

    # Precipitation
    if precipitation is Precipitation.RAIN:
        home_advantage *= home.rain_multiplier
        away_disadvantage *= away.rain_multiplier
        factors.append("rain")
    elif precipitation is Precipitation.SNOW:
        home_advantage *= home.snow_multiplier
        away_disadvantage *= away.snow_multiplier
        factors.append("snow")

    # Dome team playing outdoors
    if away.is_dome_team and (
        temp < cfg.dome_team_cold_threshold
        or wind > cfg.dome_team_wind_threshold
        or precipitation.is_present
    ):
        away_disadvantage *= away.outdoor_disadvantage
        factors.append("dome team outdoors")

    # Altitude
    if home.visiting_altitude_sickness:
        home_advantage *= home.altitude_advantage
        factors.append("altitude")

    advantage_score = round_half_up(home_advantage / away_disadvantage * 100)

    return TeamAdvantage(
        home_advantage=round_factor(home_advantage),
        away_disadvantage=round_factor(away_disadvantage),
        advantage_score=advantage_score,
        narrative=build_narrative(advantage_score, factors, params),
        factors=tuple(factors),
    )
