"""
Game Models - Scheduled games handed to the scoring engine.

This module contains:
- GameStatus: Enum for a game's schedule status
- ScheduledGame: One game on the requested date
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from enum import Enum


class GameStatus(Enum):
    """Schedule status of a game."""
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    FINAL = "final"
    POSTPONED = "postponed"
    UNKNOWN = "unknown"

    @classmethod
    def from_provider(cls, status_name: Optional[str]) -> 'GameStatus':
        """
        Map a provider status name (e.g. "STATUS_SCHEDULED") to a GameStatus.

        Args:
            status_name: Raw status name from the schedule provider

        Returns:
            Matching GameStatus, UNKNOWN for anything unrecognised
        """
        if not status_name:
            return cls.UNKNOWN

        name = status_name.upper()
        if "POSTPONED" in name or "CANCELED" in name or "DELAYED" in name:
            return cls.POSTPONED
        if "FINAL" in name:
            return cls.FINAL
        if "IN_PROGRESS" in name or "HALFTIME" in name or "END_PERIOD" in name:
            return cls.IN_PROGRESS
        if "SCHEDULED" in name:
            return cls.SCHEDULED
        return cls.UNKNOWN


@dataclass(frozen=True)
class ScheduledGame:
    """
    A game scheduled on the requested date.

    Attributes:
        stadium_name: Venue the game is played at
        home_team: Home team name
        away_team: Away team name
        kickoff_time: Kickoff timestamp as reported by the provider (ISO 8601)
        game_date: Date of the game
        status: Schedule status
        game_id: Provider game identifier
        neutral_site: Game is not at the home team's stadium
    """
    stadium_name: str
    home_team: str
    away_team: str
    kickoff_time: str
    game_date: date
    status: GameStatus = GameStatus.SCHEDULED
    game_id: str = ""
    neutral_site: bool = False
