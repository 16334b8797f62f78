"""
Base Data Sources - Abstract base classes for data source implementations.

This module defines the interface that all data sources must implement.
Sources never raise for data-availability problems: a failed or
malformed response becomes ``None`` or an empty list.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from datetime import date

from nfl_stadium_factors.models.games import ScheduledGame
from nfl_stadium_factors.models.weather import WeatherObservation


class DataSource(ABC):
    """Abstract base class for all data sources."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Short name used in logs."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the data source is configured and usable."""
        pass


class ScheduleDataSource(DataSource):
    """Abstract base class for schedule data sources."""

    @abstractmethod
    def fetch_games(self, game_date: date) -> List[ScheduledGame]:
        """
        Fetch the games scheduled on a date.

        Args:
            game_date: Date to fetch

        Returns:
            List of ScheduledGame, empty when none are scheduled or the
            provider could not be read
        """
        pass


class WeatherDataSource(DataSource):
    """Abstract base class for weather data sources."""

    @abstractmethod
    def fetch_observation(self, latitude: float, longitude: float) -> Optional[WeatherObservation]:
        """
        Fetch current weather at a location.

        Args:
            latitude: Latitude coordinate
            longitude: Longitude coordinate

        Returns:
            WeatherObservation or None if unavailable
        """
        pass
