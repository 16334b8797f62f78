"""
Position Impact Calculator - Weather multipliers per position group.
"""

from typing import Optional

from nfl_stadium_factors.config.parameters import DEFAULT_PARAMETERS, ScoringParameters
from nfl_stadium_factors.data.positions import PositionGroup, get_position_impact
from nfl_stadium_factors.models.results import PositionImpacts
from nfl_stadium_factors.models.weather import WeatherObservation
from nfl_stadium_factors.scoring.impacts import (
    passing_impact,
    rushing_impact,
    kicking_impact,
)
from nfl_stadium_factors.utils.helpers import round_factor


def _condition_multiplier(group: PositionGroup, is_freezing: bool, has_precipitation: bool) -> float:
    coefficients = get_position_impact(group)
    multiplier = 1.0
    if has_precipitation:
        multiplier *= coefficients.precipitation
    if is_freezing:
        multiplier *= coefficients.freezing
    return round_factor(multiplier)


def compute_position_impacts(
    observation: Optional[WeatherObservation],
    is_dome: bool,
    params: Optional[ScoringParameters] = None
) -> PositionImpacts:
    """
    Weather multipliers for each position group.

    Indoor games and games without weather data are neutral across the
    board. Offense and kicking reuse the impact functions; defense and
    turnover rate use the position coefficient table.

    Args:
        observation: Weather for the game, or None
        is_dome: Game is played indoors
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        PositionImpacts rounded to 3 decimals
    """
    if is_dome or observation is None:
        return PositionImpacts()

    params = params or DEFAULT_PARAMETERS
    temp = observation.temperature_f
    wind = observation.wind_mph
    precipitation = observation.precipitation
    is_freezing = temp <= params.freezing_threshold

    return PositionImpacts(
        passing_offense=passing_impact(temp, wind, precipitation, params),
        rushing_offense=rushing_impact(temp, wind, precipitation, params),
        field_goal_unit=kicking_impact(temp, wind, precipitation, params),
        defense=_condition_multiplier(PositionGroup.DEFENSE, is_freezing, precipitation.is_present),
        turnover_rate=_condition_multiplier(PositionGroup.TURNOVER_RATE, is_freezing, precipitation.is_present),
    )
