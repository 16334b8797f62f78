"""
Position Weather Impacts - Sensitivity coefficients per position group.

Passing, rushing and kicking groups take their multipliers straight from
the impact functions; the groups below are driven by simple condition
coefficients instead.
"""

from dataclasses import dataclass
from typing import Dict
from enum import Enum


class PositionGroup(Enum):
    """Position groups reported in the impact breakdown."""
    PASSING_OFFENSE = "passing_offense"
    RUSHING_OFFENSE = "rushing_offense"
    FIELD_GOAL_UNIT = "field_goal_unit"
    DEFENSE = "defense"
    TURNOVER_RATE = "turnover_rate"


@dataclass(frozen=True)
class PositionWeatherImpact:
    """
    Condition multipliers for one position group.

    Attributes:
        precipitation: Applied when any precipitation is falling
        freezing: Applied at or below freezing
    """
    precipitation: float = 1.0
    freezing: float = 1.0


POSITION_WEATHER_IMPACTS: Dict[PositionGroup, PositionWeatherImpact] = {
    # Easier to tackle in rain/snow; ball carriers slower in the cold
    PositionGroup.DEFENSE: PositionWeatherImpact(precipitation=1.08, freezing=1.03),
    # Fumble rates rise 23% below freezing
    PositionGroup.TURNOVER_RATE: PositionWeatherImpact(precipitation=1.12, freezing=1.23),
}


def get_position_impact(group: PositionGroup) -> PositionWeatherImpact:
    """Coefficients for a position group, neutral when none are defined."""
    return POSITION_WEATHER_IMPACTS.get(group, PositionWeatherImpact())
