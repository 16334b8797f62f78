"""
Stadium Factor Engine - Schedule and weather in, ranked stadium factors out.

This module contains:
- StadiumFactorEngine: Orchestrates providers and the scoring core

Usage:
    engine = StadiumFactorEngine.from_settings()
    report = engine.calculate("2025-12-14")
"""

import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Union

from nfl_stadium_factors.config.parameters import DEFAULT_PARAMETERS, ScoringParameters
from nfl_stadium_factors.config.settings import Settings, get_settings
from nfl_stadium_factors.constants import (
    DATA_SOURCES,
    SAMPLE_INDOOR_OPPONENT,
    SAMPLE_OUTDOOR_OPPONENT,
)
from nfl_stadium_factors.data.pipeline import WeatherPipeline
from nfl_stadium_factors.data.sources.base import ScheduleDataSource, WeatherDataSource
from nfl_stadium_factors.data.sources.espn import ESPNScheduleSource
from nfl_stadium_factors.data.sources.openweather import OpenWeatherMapSource
from nfl_stadium_factors.data.stadiums import STADIUM_PROFILES, StadiumProfile, resolve_stadium
from nfl_stadium_factors.data.team_profiles import TEAM_WEATHER_PROFILES, TeamWeatherProfile
from nfl_stadium_factors.models.games import ScheduledGame
from nfl_stadium_factors.models.results import StadiumFactorReport, StadiumFactorResult
from nfl_stadium_factors.scoring.assembler import build_stadium_result, rank_results
from nfl_stadium_factors.utils.validators import validate_game_date

logger = logging.getLogger(__name__)


class StadiumFactorEngine:
    """
    Computes weather-adjusted stadium factors.

    Weather lookups run concurrently; scoring runs afterwards, one
    independent computation per game. Each call recomputes from scratch.
    """

    def __init__(
        self,
        schedule_source: ScheduleDataSource,
        weather_source: WeatherDataSource,
        settings: Optional[Settings] = None,
        parameters: Optional[ScoringParameters] = None,
        stadiums: Optional[Dict[str, StadiumProfile]] = None,
        team_profiles: Optional[Dict[str, TeamWeatherProfile]] = None
    ):
        """
        Initialize the engine.

        Args:
            schedule_source: Source of scheduled games
            weather_source: Source of weather observations
            settings: Application settings (defaults to get_settings())
            parameters: Scoring parameters (defaults to DEFAULT_PARAMETERS)
            stadiums: Stadium profile table (defaults to STADIUM_PROFILES)
            team_profiles: Team profile table (defaults to TEAM_WEATHER_PROFILES)
        """
        self.settings = settings or get_settings()
        self.parameters = parameters or DEFAULT_PARAMETERS
        self.stadiums = STADIUM_PROFILES if stadiums is None else stadiums
        self.team_profiles = TEAM_WEATHER_PROFILES if team_profiles is None else team_profiles
        self.schedule_source = schedule_source
        self.weather_source = weather_source
        self.pipeline = WeatherPipeline.from_settings(weather_source, self.settings.weather)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> 'StadiumFactorEngine':
        """Build an engine backed by ESPN and OpenWeatherMap."""
        settings = settings or get_settings()
        return cls(
            schedule_source=ESPNScheduleSource.from_settings(settings.schedule),
            weather_source=OpenWeatherMapSource.from_settings(settings.weather),
            settings=settings,
        )

    def _report(
        self,
        results: List[StadiumFactorResult],
        game_date: Optional[date] = None,
        message: Optional[str] = None
    ) -> StadiumFactorReport:
        return StadiumFactorReport(
            stadium_factors=tuple(rank_results(results)),
            generated_at=datetime.now(),
            game_date=game_date,
            message=message,
            data_sources=DATA_SOURCES,
        )

    def _check_weather_source(self) -> None:
        if not self.weather_source.is_available():
            logger.warning(
                "Weather source %s is not configured; outdoor stadiums will use baselines",
                self.weather_source.source_name,
            )

    def resolve_stadium(self, game: ScheduledGame) -> StadiumProfile:
        """Stadium profile for a game, neutral when the venue is unknown."""
        stadium_name = game.stadium_name
        if not stadium_name and game.neutral_site:
            return StadiumProfile.neutral("Neutral site", game.home_team)
        return resolve_stadium(stadium_name, game.home_team, self.stadiums)

    def score_games(self, games: List[ScheduledGame]) -> List[StadiumFactorResult]:
        """
        Fetch weather for the games' stadiums and score each game.

        Args:
            games: Scheduled games

        Returns:
            One unranked result per game
        """
        venues = [(game, self.resolve_stadium(game)) for game in games]
        observations = self.pipeline.fetch_observations(stadium for _, stadium in venues)

        return [
            build_stadium_result(
                stadium,
                game.home_team,
                game.away_team,
                observations.get(stadium.name),
                self.team_profiles,
                self.parameters,
            )
            for game, stadium in venues
        ]

    def calculate(self, game_date: Union[date, datetime, str]) -> StadiumFactorReport:
        """
        Ranked stadium factors for every game on a date.

        An empty schedule is not an error: the report is empty and carries
        an explanatory message.

        Args:
            game_date: Date as a date, datetime or YYYY-MM-DD string

        Returns:
            StadiumFactorReport

        Raises:
            ValidationError: If game_date cannot be parsed
        """
        game_date = validate_game_date(game_date)
        games = self.schedule_source.fetch_games(game_date)

        if not games:
            logger.info("No games scheduled for %s", game_date.isoformat())
            return self._report([], game_date, f"No games scheduled for {game_date.isoformat()}")

        self._check_weather_source()
        results = self.score_games(games)
        logger.info("Scored %d games for %s", len(results), game_date.isoformat())
        return self._report(results, game_date)

    def calculate_all_stadiums(self, sample_away_team: Optional[str] = None) -> StadiumFactorReport:
        """
        League-wide snapshot: score every stadium in the table.

        Each stadium hosts a sample visitor, a warm-weather team outdoors
        and a cold-weather team indoors unless one is given.

        Args:
            sample_away_team: Visitor to use for every stadium

        Returns:
            StadiumFactorReport without a game date
        """
        today = date.today()
        games = [
            ScheduledGame(
                stadium_name=stadium.name,
                home_team=stadium.home_team,
                away_team=sample_away_team or (
                    SAMPLE_INDOOR_OPPONENT if stadium.is_dome else SAMPLE_OUTDOOR_OPPONENT
                ),
                kickoff_time="",
                game_date=today,
            )
            for stadium in self.stadiums.values()
        ]

        self._check_weather_source()
        return self._report(self.score_games(games))
