"""
OpenWeatherMap Source - Current weather at a stadium.

This module contains:
- OpenWeatherMapSource: Weather data source backed by the current weather API
- parse_observation: Normalize a current weather payload
"""

import logging
from typing import Any, Dict, Optional

import requests

from nfl_stadium_factors.config.settings import WeatherSettings
from nfl_stadium_factors.data.sources.base import WeatherDataSource
from nfl_stadium_factors.models.weather import Precipitation, WeatherObservation
from nfl_stadium_factors.utils.helpers import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_VISIBILITY = 10000


def parse_observation(payload: Dict[str, Any]) -> Optional[WeatherObservation]:
    """
    Normalize an OpenWeatherMap current weather payload.

    Temperature and wind are rounded to whole numbers. The condition group
    decides precipitation: rain, snow, or drizzle (light rain).

    Args:
        payload: Decoded JSON response

    Returns:
        WeatherObservation, or None when the payload is malformed
    """
    try:
        condition = payload["weather"][0]
        main = payload["main"]
        return WeatherObservation(
            temperature_f=round_half_up(float(main["temp"])),
            wind_mph=round_half_up(float(payload["wind"]["speed"])),
            precipitation=Precipitation.from_condition(condition.get("main")),
            humidity=main.get("humidity"),
            visibility=payload.get("visibility") or DEFAULT_VISIBILITY,
            description=condition.get("description", ""),
        )
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Malformed weather payload: %r", e)
        return None


class OpenWeatherMapSource(WeatherDataSource):
    """
    Weather source using the OpenWeatherMap current weather endpoint.

    Usage:
        source = OpenWeatherMapSource(api_key="...")
        observation = source.fetch_observation(44.5013, -88.0622)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = WeatherSettings.base_url,
        timeout_seconds: float = 3.0,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the source.

        Args:
            api_key: OpenWeatherMap API key
            base_url: Current weather endpoint
            timeout_seconds: Request timeout
            session: HTTP session (a new one is created if omitted)
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: WeatherSettings,
                      session: Optional[requests.Session] = None) -> 'OpenWeatherMapSource':
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            session=session,
        )

    @property
    def source_name(self) -> str:
        return "openweathermap"

    def is_available(self) -> bool:
        return bool(self.api_key)

    def fetch_observation(self, latitude: float, longitude: float) -> Optional[WeatherObservation]:
        """Fetch current weather; any failure yields None."""
        if not self.is_available():
            logger.debug("No OpenWeatherMap API key configured, skipping lookup")
            return None

        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self.api_key,
            "units": "imperial",
        }

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Weather lookup failed for (%s, %s): %s", latitude, longitude, e)
            return None

        return parse_observation(payload)
