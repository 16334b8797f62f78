"""
Adjustment Applier - Apply weather impacts to stadium baseline factors.
"""

from typing import Optional, Union

from nfl_stadium_factors.config.parameters import ScoringParameters
from nfl_stadium_factors.models.weather import WeatherObservation
from nfl_stadium_factors.scoring.impacts import ImpactKind, calculate_impact
from nfl_stadium_factors.utils.helpers import round_factor


def apply_adjustment(
    baseline: float,
    observation: Optional[WeatherObservation],
    kind: Union[ImpactKind, str],
    params: Optional[ScoringParameters] = None
) -> float:
    """
    Adjust a baseline factor for the observed weather.

    Callers pass ``None`` for dome stadiums; a missing observation leaves
    the baseline unchanged.

    Args:
        baseline: Stadium baseline factor
        observation: Weather for the game, or None
        kind: Which impact function to apply
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        Adjusted factor rounded to 3 decimals

    Raises:
        ValidationError: If kind is not a known ImpactKind
    """
    kind = ImpactKind.parse(kind)

    if observation is None:
        return round_factor(baseline)

    impact = calculate_impact(
        kind,
        observation.temperature_f,
        observation.wind_mph,
        observation.precipitation,
        params,
    )
    return round_factor(baseline * impact)
