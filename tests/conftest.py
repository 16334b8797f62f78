import pytest
import requests

from nfl_stadium_factors.config.settings import Settings, reset_settings, set_settings
from nfl_stadium_factors.data.sources.base import ScheduleDataSource, WeatherDataSource
from nfl_stadium_factors.models.weather import Precipitation, WeatherObservation


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeSession:
    """Records GET calls and replays a fixed response (or raises an error)."""

    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self._error is not None:
            raise self._error
        return self._response


class FakeScheduleSource(ScheduleDataSource):
    def __init__(self, games=None):
        self.games = list(games or [])
        self.requested = []

    @property
    def source_name(self):
        return "fake-schedule"

    def is_available(self):
        return True

    def fetch_games(self, game_date):
        self.requested.append(game_date)
        return list(self.games)


class FakeWeatherSource(WeatherDataSource):
    """Serves observations keyed by (latitude, longitude)."""

    def __init__(self, observations=None, default=None, available=True):
        self.observations = dict(observations or {})
        self.default = default
        self.available = available
        self.lookups = []

    @property
    def source_name(self):
        return "fake-weather"

    def is_available(self):
        return self.available

    def fetch_observation(self, latitude, longitude):
        self.lookups.append((latitude, longitude))
        return self.observations.get((latitude, longitude), self.default)


@pytest.fixture
def settings():
    """Isolated default settings installed as the global instance."""
    s = Settings()
    set_settings(s)
    yield s
    reset_settings()


@pytest.fixture
def snowy_cold():
    return WeatherObservation(temperature_f=15, wind_mph=22, precipitation=Precipitation.SNOW)


@pytest.fixture
def mild():
    return WeatherObservation(temperature_f=70, wind_mph=5)
