"""
Impact Functions - Weather multipliers for passing, rushing, and kicking.

This module contains:
- ImpactKind: Enum naming the three factor types
- passing_impact: QB completion drops in rain, wind and cold
- rushing_impact: Teams lean on the run in bad weather
- kicking_impact: Wind and cold shorten field goal range
- calculate_impact: Dispatch on an ImpactKind

Every function starts from 1.0, multiplies in one factor from each of its
own threshold tables, and returns the product rounded to 3 decimals.
"""

from typing import Optional, Union
from enum import Enum

from nfl_stadium_factors.config.parameters import (
    DEFAULT_PARAMETERS,
    ScoringParameters,
    Tiers,
)
from nfl_stadium_factors.models.weather import Precipitation
from nfl_stadium_factors.utils.helpers import round_factor
from nfl_stadium_factors.utils.validators import ValidationError


class ImpactKind(Enum):
    """Factor types a stadium baseline is reported for."""
    PASSING = "passing"
    RUSHING = "rushing"
    KICKING = "kicking"

    @classmethod
    def parse(cls, kind: Union['ImpactKind', str]) -> 'ImpactKind':
        """Accept an ImpactKind or its string value."""
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError:
            raise ValidationError(
                f"Unknown impact kind. Valid kinds: {', '.join(k.value for k in cls)}",
                field="kind",
                value=kind
            ) from None


def _at_least(value: float, tiers: Tiers) -> float:
    """Multiplier of the first tier whose floor the value reaches."""
    for threshold, multiplier in tiers:
        if value >= threshold:
            return multiplier
    return 1.0


def _at_most(value: float, tiers: Tiers) -> float:
    """Multiplier of the first tier whose ceiling the value is under."""
    for threshold, multiplier in tiers:
        if value <= threshold:
            return multiplier
    return 1.0


def passing_impact(
    temperature_f: float,
    wind_mph: float,
    precipitation: Precipitation,
    params: Optional[ScoringParameters] = None
) -> float:
    """
    Passing multiplier for the given conditions.

    Rain and drizzle cut completion rates alike; snow is worse. Wind and
    cold each add their own reduction.

    Args:
        temperature_f: Temperature in Fahrenheit
        wind_mph: Wind speed in mph
        precipitation: Precipitation class
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        Multiplier rounded to 3 decimals
    """
    cfg = (params or DEFAULT_PARAMETERS).passing
    factor = 1.0

    if precipitation in (Precipitation.RAIN, Precipitation.LIGHT_RAIN):
        factor *= cfg.rain_multiplier
    elif precipitation is Precipitation.SNOW:
        factor *= cfg.snow_multiplier

    factor *= _at_least(wind_mph, cfg.wind_tiers)
    factor *= _at_most(temperature_f, cfg.cold_tiers)

    return round_factor(factor)


def rushing_impact(
    temperature_f: float,
    wind_mph: float,
    precipitation: Precipitation,
    params: Optional[ScoringParameters] = None
) -> float:
    """
    Rushing multiplier for the given conditions.

    Args:
        temperature_f: Temperature in Fahrenheit
        wind_mph: Wind speed in mph
        precipitation: Precipitation class
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        Multiplier rounded to 3 decimals
    """
    cfg = (params or DEFAULT_PARAMETERS).rushing
    factor = 1.0

    if precipitation is Precipitation.RAIN:
        factor *= cfg.rain_multiplier
    elif precipitation is Precipitation.SNOW:
        factor *= cfg.snow_multiplier

    factor *= _at_most(temperature_f, cfg.cold_tiers)

    # Only extreme wind affects the run game
    if wind_mph > cfg.severe_wind_threshold:
        factor *= cfg.severe_wind_multiplier

    return round_factor(factor)


def kicking_impact(
    temperature_f: float,
    wind_mph: float,
    precipitation: Precipitation,
    params: Optional[ScoringParameters] = None
) -> float:
    """
    Kicking multiplier for the given conditions.

    Args:
        temperature_f: Temperature in Fahrenheit
        wind_mph: Wind speed in mph
        precipitation: Precipitation class
        params: Scoring parameters (defaults to DEFAULT_PARAMETERS)

    Returns:
        Multiplier rounded to 3 decimals
    """
    cfg = (params or DEFAULT_PARAMETERS).kicking
    factor = 1.0

    factor *= _at_least(wind_mph, cfg.wind_tiers)
    factor *= _at_most(temperature_f, cfg.cold_tiers)

    if precipitation is Precipitation.RAIN:
        factor *= cfg.rain_multiplier
    elif precipitation is Precipitation.SNOW:
        factor *= cfg.snow_multiplier

    return round_factor(factor)


_IMPACT_FUNCTIONS = {
    ImpactKind.PASSING: passing_impact,
    ImpactKind.RUSHING: rushing_impact,
    ImpactKind.KICKING: kicking_impact,
}


def calculate_impact(
    kind: Union[ImpactKind, str],
    temperature_f: float,
    wind_mph: float,
    precipitation: Precipitation,
    params: Optional[ScoringParameters] = None
) -> float:
    """
    Impact multiplier of the given kind.

    Raises:
        ValidationError: If kind is not a known ImpactKind
    """
    function = _IMPACT_FUNCTIONS[ImpactKind.parse(kind)]
    return function(temperature_f, wind_mph, precipitation, params)
