from datetime import date

import requests

from nfl_stadium_factors.config.settings import ScheduleSettings, WeatherSettings
from nfl_stadium_factors.data.sources.espn import ESPNScheduleSource, parse_scoreboard
from nfl_stadium_factors.data.sources.openweather import OpenWeatherMapSource, parse_observation
from nfl_stadium_factors.models.games import GameStatus
from nfl_stadium_factors.models.weather import Precipitation

from tests.conftest import FakeResponse, FakeSession

GAME_DATE = date(2025, 12, 14)

_WEATHER_RESPONSE = {
    "main": {"temp": 24.6, "humidity": 81},
    "wind": {"speed": 12.5},
    "weather": [{"main": "Drizzle", "description": "light intensity drizzle"}],
}


def _competitor(side, display_name, abbreviation):
    return {"homeAway": side, "team": {"displayName": display_name, "abbreviation": abbreviation}}


_SCOREBOARD_RESPONSE = {
    "events": [
        {
            "id": 401772001,
            "date": "2025-12-14T18:00Z",
            "status": {"type": {"name": "STATUS_SCHEDULED"}},
            "competitions": [{
                "neutralSite": False,
                "venue": {"fullName": "Lambeau Field"},
                "competitors": [
                    _competitor("away", "Chicago Bears", "CHI"),
                    _competitor("home", "Green Bay Packers", "GB"),
                ],
            }],
        },
        {
            "id": "401772002",
            "date": "2025-12-14T14:30Z",
            "status": {"type": {"name": "STATUS_FINAL"}},
            "competitions": [{
                "neutralSite": True,
                "venue": {"fullName": "Tottenham Hotspur Stadium"},
                "competitors": [
                    _competitor("home", "Washington", "WSH"),
                    _competitor("away", "Jacksonville", "JAC"),
                ],
            }],
        },
        {
            "id": "401772003",
            "competitions": [],
        },
        {
            "id": "401772004",
            "status": {"type": {"name": "STATUS_SCHEDULED"}},
            "competitions": [{
                "venue": {"fullName": "MetLife Stadium"},
                "competitors": [
                    _competitor("home", "New York Jets", "NYJ"),
                    _competitor("away", "Miami Dolphins", "MIA"),
                ],
            }],
        },
    ]
}


class TestOpenWeatherMap:

    def test_parse_observation(self):
        observation = parse_observation(_WEATHER_RESPONSE)

        assert observation.temperature_f == 25
        assert observation.wind_mph == 13
        assert observation.precipitation is Precipitation.LIGHT_RAIN
        assert observation.humidity == 81
        assert observation.visibility == 10000
        assert observation.description == "light intensity drizzle"

    def test_parse_snow_and_clear(self):
        snow = dict(_WEATHER_RESPONSE, weather=[{"main": "Snow", "description": "heavy snow"}])
        clear = dict(_WEATHER_RESPONSE, weather=[{"main": "Clear", "description": "clear sky"}], visibility=8000)

        assert parse_observation(snow).precipitation is Precipitation.SNOW
        assert parse_observation(clear).precipitation is Precipitation.NONE
        assert parse_observation(clear).visibility == 8000

    def test_malformed_payload(self):
        assert parse_observation({}) is None
        assert parse_observation({"main": {"temp": 50}, "wind": {"speed": 3}, "weather": []}) is None

    def test_fetch_observation(self):
        session = FakeSession(FakeResponse(_WEATHER_RESPONSE))
        source = OpenWeatherMapSource("key", timeout_seconds=2.5, session=session)

        observation = source.fetch_observation(44.5013, -88.0622)

        assert observation.temperature_f == 25
        call = session.calls[0]
        assert call["url"] == WeatherSettings().base_url
        assert call["params"] == {"lat": 44.5013, "lon": -88.0622, "appid": "key", "units": "imperial"}
        assert call["timeout"] == 2.5

    def test_no_api_key_skips_lookup(self):
        session = FakeSession(FakeResponse(_WEATHER_RESPONSE))
        source = OpenWeatherMapSource("", session=session)

        assert not source.is_available()
        assert source.fetch_observation(44.5, -88.0) is None
        assert session.calls == []

    def test_transport_error_yields_none(self):
        session = FakeSession(error=requests.ConnectionError("unreachable"))
        source = OpenWeatherMapSource("key", session=session)

        assert source.fetch_observation(44.5, -88.0) is None

    def test_http_error_yields_none(self):
        source = OpenWeatherMapSource("key", session=FakeSession(FakeResponse({}, status_code=401)))

        assert source.fetch_observation(44.5, -88.0) is None

    def test_from_settings(self):
        settings = WeatherSettings(api_key="abc", timeout_seconds=1.5)
        source = OpenWeatherMapSource.from_settings(settings, session=FakeSession())

        assert source.api_key == "abc"
        assert source.timeout_seconds == 1.5
        assert source.source_name == "openweathermap"


class TestESPN:

    def test_parse_scoreboard(self):
        games = parse_scoreboard(_SCOREBOARD_RESPONSE, GAME_DATE)

        # The event without competitions is skipped
        assert len(games) == 3

        home_game = games[0]
        assert home_game.home_team == "Green Bay Packers"
        assert home_game.away_team == "Chicago Bears"
        assert home_game.stadium_name == "Lambeau Field"
        assert home_game.status is GameStatus.SCHEDULED
        assert home_game.game_id == "401772001"
        assert home_game.game_date == GAME_DATE
        assert not home_game.neutral_site

    def test_neutral_site_keeps_venue_and_resolves_aliases(self):
        game = parse_scoreboard(_SCOREBOARD_RESPONSE, GAME_DATE)[1]

        assert game.neutral_site
        assert game.stadium_name == "Tottenham Hotspur Stadium"
        assert game.home_team == "Washington Commanders"
        assert game.away_team == "Jacksonville Jaguars"
        assert game.status is GameStatus.FINAL

    def test_shared_stadium_tenant(self):
        game = parse_scoreboard(_SCOREBOARD_RESPONSE, GAME_DATE)[2]

        assert game.home_team == "New York Jets"
        assert game.stadium_name == "MetLife Stadium"

    def test_payload_without_events(self):
        assert parse_scoreboard({"leagues": []}, GAME_DATE) == []

    def test_fetch_games(self):
        session = FakeSession(FakeResponse(_SCOREBOARD_RESPONSE))
        source = ESPNScheduleSource(session=session)

        games = source.fetch_games(GAME_DATE)

        assert len(games) == 3
        assert session.calls[0]["url"] == ScheduleSettings().base_url
        assert session.calls[0]["params"] == {"dates": "20251214"}
        assert session.calls[0]["timeout"] == 10.0

    def test_http_error_yields_no_games(self):
        source = ESPNScheduleSource(session=FakeSession(FakeResponse({}, status_code=503)))

        assert source.fetch_games(GAME_DATE) == []

    def test_invalid_json_yields_no_games(self):
        source = ESPNScheduleSource(session=FakeSession(FakeResponse(None)))

        assert source.fetch_games(GAME_DATE) == []
