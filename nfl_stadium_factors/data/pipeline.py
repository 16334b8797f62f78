"""
Weather Pipeline - Concurrent weather lookups for a set of stadiums.

This module contains:
- WeatherPipeline: Fans lookups out to a thread pool and joins them

Every outdoor stadium gets one lookup. Domes and venues without
coordinates are never looked up. A slow or failed lookup turns into a
missing observation for that stadium only.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Dict, Iterable, Optional

from nfl_stadium_factors.config.settings import WeatherSettings
from nfl_stadium_factors.data.sources.base import WeatherDataSource
from nfl_stadium_factors.data.stadiums import StadiumProfile
from nfl_stadium_factors.models.weather import WeatherObservation

logger = logging.getLogger(__name__)


class WeatherPipeline:
    """
    Fetches weather for many stadiums at once.

    Usage:
        pipeline = WeatherPipeline(OpenWeatherMapSource(api_key))
        observations = pipeline.fetch_observations(stadiums)
    """

    def __init__(self, source: WeatherDataSource, max_workers: int = 8, timeout_seconds: float = 3.0):
        """
        Initialize the pipeline.

        Args:
            source: Weather data source
            max_workers: Maximum concurrent lookups
            timeout_seconds: Time allowed per lookup
        """
        self.source = source
        self.max_workers = max(1, max_workers)
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, source: WeatherDataSource, settings: WeatherSettings) -> 'WeatherPipeline':
        return cls(source, max_workers=settings.max_workers, timeout_seconds=settings.timeout_seconds)

    def _lookup(self, stadium: StadiumProfile) -> Optional[WeatherObservation]:
        latitude, longitude = stadium.coordinates
        try:
            return self.source.fetch_observation(latitude, longitude)
        except Exception as e:
            # One stadium's failure must not affect the others
            logger.warning("Weather lookup failed for %s: %s", stadium.name, e)
            return None

    def fetch_observations(
        self,
        stadiums: Iterable[StadiumProfile]
    ) -> Dict[str, Optional[WeatherObservation]]:
        """
        Fetch weather for each distinct stadium.

        Args:
            stadiums: Stadium profiles (duplicates are looked up once)

        Returns:
            Dict mapping stadium name to its observation or None
        """
        observations: Dict[str, Optional[WeatherObservation]] = {}
        lookups: Dict[str, StadiumProfile] = {}

        for stadium in stadiums:
            if stadium.name in observations or stadium.name in lookups:
                continue
            if stadium.is_dome or stadium.coordinates is None:
                observations[stadium.name] = None
            else:
                lookups[stadium.name] = stadium

        if not lookups:
            return observations

        workers = min(len(lookups), self.max_workers)
        # Each worker runs its share of lookups back to back
        deadline = self.timeout_seconds * math.ceil(len(lookups) / workers)

        logger.info("Fetching weather for %d stadiums", len(lookups))
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="weather")
        try:
            futures = {
                executor.submit(self._lookup, stadium): name
                for name, stadium in lookups.items()
            }
            done, pending = wait(futures, timeout=deadline)

            for future in done:
                observations[futures[future]] = future.result()
            for future in pending:
                future.cancel()
                logger.warning("Weather lookup for %s timed out", futures[future])
                observations[futures[future]] = None
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        available = sum(1 for name in lookups if observations.get(name) is not None)
        logger.info("Weather available for %d of %d stadiums", available, len(lookups))
        return observations
