"""
ESPN Schedule Source - Games on a date from the public scoreboard.

This module contains:
- ESPNScheduleSource: Schedule data source backed by the ESPN scoreboard
- parse_scoreboard: Convert a scoreboard payload into ScheduledGame values
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests

from nfl_stadium_factors.config.settings import ScheduleSettings
from nfl_stadium_factors.constants import resolve_team_name
from nfl_stadium_factors.data.sources.base import ScheduleDataSource
from nfl_stadium_factors.data.stadiums import TEAM_STADIUMS
from nfl_stadium_factors.models.games import GameStatus, ScheduledGame

logger = logging.getLogger(__name__)


def _team_name(competitor: Dict[str, Any]) -> str:
    team = competitor["team"]
    return resolve_team_name(team.get("displayName"), team.get("abbreviation"))


def _parse_event(event: Dict[str, Any], game_date: date) -> ScheduledGame:
    competition = event["competitions"][0]
    by_side = {c.get("homeAway"): c for c in competition["competitors"]}
    home_team = _team_name(by_side["home"])
    away_team = _team_name(by_side["away"])

    neutral_site = bool(competition.get("neutralSite", False))
    venue = (competition.get("venue") or {}).get("fullName", "")

    # Our stadium names are canonical; the provider's venue name is only
    # kept when the home team is not at home.
    if neutral_site:
        stadium_name = venue
    else:
        stadium_name = TEAM_STADIUMS.get(home_team, venue)

    status = (event.get("status") or {}).get("type") or {}

    return ScheduledGame(
        stadium_name=stadium_name,
        home_team=home_team,
        away_team=away_team,
        kickoff_time=event.get("date", ""),
        game_date=game_date,
        status=GameStatus.from_provider(status.get("name")),
        game_id=str(event.get("id", "")),
        neutral_site=neutral_site,
    )


def parse_scoreboard(payload: Dict[str, Any], game_date: date) -> List[ScheduledGame]:
    """
    Convert a scoreboard payload into scheduled games.

    Events that cannot be parsed are logged and skipped.

    Args:
        payload: Decoded scoreboard JSON
        game_date: Date the scoreboard was requested for

    Returns:
        List of ScheduledGame
    """
    events = payload.get("events") if isinstance(payload, dict) else None
    if not isinstance(events, list):
        logger.warning("Scoreboard payload has no events list")
        return []

    games = []
    for event in events:
        try:
            games.append(_parse_event(event, game_date))
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.warning("Skipping malformed scoreboard event %s: %r",
                           event.get("id") if isinstance(event, dict) else "?", e)
    return games


class ESPNScheduleSource(ScheduleDataSource):
    """
    Schedule source using the ESPN public scoreboard.

    Usage:
        source = ESPNScheduleSource()
        games = source.fetch_games(date(2025, 12, 14))
    """

    def __init__(
        self,
        base_url: str = ScheduleSettings.base_url,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the source.

        Args:
            base_url: Scoreboard endpoint
            timeout_seconds: Request timeout
            session: HTTP session (a new one is created if omitted)
        """
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: ScheduleSettings,
                      session: Optional[requests.Session] = None) -> 'ESPNScheduleSource':
        return cls(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            session=session,
        )

    @property
    def source_name(self) -> str:
        return "espn"

    def is_available(self) -> bool:
        return bool(self.base_url)

    def fetch_games(self, game_date: date) -> List[ScheduledGame]:
        """Fetch games on a date; any failure yields an empty list."""
        params = {"dates": game_date.strftime("%Y%m%d")}

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Schedule lookup failed for %s: %s", game_date.isoformat(), e)
            return []

        games = parse_scoreboard(payload, game_date)
        logger.info("Found %d games on %s", len(games), game_date.isoformat())
        return games
