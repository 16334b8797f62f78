"""
Weather Models - Normalized weather observations used for scoring.

This module contains:
- Precipitation: Enum for the precipitation classes the scoring tables know
- WeatherObservation: A point-in-time weather snapshot for one venue
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from enum import Enum

from nfl_stadium_factors.utils.validators import ValidationError


class Precipitation(Enum):
    """Precipitation classes recognised by the impact tables."""
    NONE = "none"
    RAIN = "rain"
    LIGHT_RAIN = "light_rain"  # drizzle
    SNOW = "snow"

    @property
    def is_present(self) -> bool:
        """Any falling precipitation at all."""
        return self is not Precipitation.NONE

    @classmethod
    def from_condition(cls, condition: Optional[str]) -> 'Precipitation':
        """
        Classify a provider condition group (e.g. "Rain", "Drizzle").

        Args:
            condition: Free-text condition from the weather provider

        Returns:
            Matching Precipitation, NONE when nothing matches
        """
        if not condition:
            return cls.NONE

        text = condition.lower()
        if "rain" in text:
            return cls.RAIN
        if "snow" in text:
            return cls.SNOW
        if "drizzle" in text:
            return cls.LIGHT_RAIN
        return cls.NONE


@dataclass(frozen=True)
class WeatherObservation:
    """
    Normalized weather snapshot for a single game.

    Only temperature, wind and precipitation feed the scoring tables;
    humidity, visibility and description are carried for display.

    Attributes:
        temperature_f: Air temperature in Fahrenheit
        wind_mph: Sustained wind speed in miles per hour
        precipitation: Precipitation class (its string value is also accepted)
        humidity: Relative humidity percentage
        visibility: Visibility in meters
        description: Provider's condition description
    """
    temperature_f: float
    wind_mph: float
    precipitation: Precipitation = Precipitation.NONE
    humidity: Optional[float] = None
    visibility: Optional[float] = None
    description: str = ""

    def __post_init__(self):
        """Coerce a string precipitation value such as "snow" to the enum."""
        if not isinstance(self.precipitation, Precipitation):
            try:
                precipitation = Precipitation(self.precipitation)
            except ValueError:
                raise ValidationError(
                    f"Unknown precipitation. Valid values: {', '.join(p.value for p in Precipitation)}",
                    field="precipitation",
                    value=self.precipitation
                ) from None
            object.__setattr__(self, "precipitation", precipitation)

    @property
    def has_precipitation(self) -> bool:
        return self.precipitation.is_present

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the raw weather block of the report."""
        return {
            "temp": self.temperature_f,
            "wind": self.wind_mph,
            "condition": self.description,
            "humidity": self.humidity,
            "precipitation": self.precipitation.value if self.has_precipitation else None,
            "visibility": self.visibility,
        }
