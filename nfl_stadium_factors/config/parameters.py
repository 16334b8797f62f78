"""
Parameters - Scoring thresholds and multipliers.

This module contains:
- PassingParameters: Passing impact threshold tables
- RushingParameters: Rushing impact threshold tables
- KickingParameters: Kicking impact threshold tables
- AdvantageParameters: Team advantage rules and narrative cutoffs
- ScoringParameters: Complete parameter set

Tier tables are ordered most severe first: ``(threshold, multiplier)``
pairs where the first matching threshold wins.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Tuple
import json

Tiers = Tuple[Tuple[float, float], ...]


def _tiers(rows: Any) -> Tiers:
    """Normalize a JSON list of pairs back into a tier table."""
    return tuple((float(threshold), float(multiplier)) for threshold, multiplier in rows)


@dataclass
class PassingParameters:
    """
    Passing impact multipliers.

    Attributes:
        rain_multiplier: Applied for rain and light rain
        snow_multiplier: Applied for snow
        wind_tiers: Wind speed floors (mph) and multipliers
        cold_tiers: Temperature ceilings (F) and multipliers
    """
    rain_multiplier: float = 0.88
    snow_multiplier: float = 0.82
    wind_tiers: Tiers = ((20.0, 0.85), (15.0, 0.92), (10.0, 0.97))
    cold_tiers: Tiers = ((20.0, 0.88), (32.0, 0.94), (40.0, 0.98))


@dataclass
class RushingParameters:
    """
    Rushing impact multipliers.

    Attributes:
        rain_multiplier: Applied for rain (not light rain)
        snow_multiplier: Applied for snow
        cold_tiers: Temperature ceilings (F) and multipliers
        severe_wind_threshold: Wind above this (mph) slows the run game
        severe_wind_multiplier: Multiplier above the severe wind threshold
    """
    rain_multiplier: float = 1.08
    snow_multiplier: float = 1.12
    cold_tiers: Tiers = ((20.0, 1.06), (32.0, 1.04))
    severe_wind_threshold: float = 25.0
    severe_wind_multiplier: float = 0.98


@dataclass
class KickingParameters:
    """
    Kicking impact multipliers.

    Attributes:
        wind_tiers: Wind speed floors (mph) and multipliers
        cold_tiers: Temperature ceilings (F) and multipliers
        rain_multiplier: Applied for rain (not light rain)
        snow_multiplier: Applied for snow
    """
    wind_tiers: Tiers = ((20.0, 0.77), (15.0, 0.85), (10.0, 0.92))
    cold_tiers: Tiers = ((30.0, 0.82), (40.0, 0.90))
    rain_multiplier: float = 0.95
    snow_multiplier: float = 0.76


@dataclass
class AdvantageParameters:
    """
    Team weather advantage rules.

    Attributes:
        cold_threshold: Graduated cold effects start at or below this (F)
        cold_scale: Degrees over which graduated cold ramps up
        warm_weather_freezing_penalty: Extra visitor multiplier for warm-weather teams
        heat_threshold: Heat advantages apply at or above this (F)
        wind_threshold: Wind resistance applies at or above this (mph)
        dome_team_cold_threshold: Dome teams suffer below this (F)
        dome_team_wind_threshold: Dome teams suffer above this (mph)
        major_home_score: Score at or above which the home edge is major
        strong_home_score: Score at or above which the home edge is strong
        moderate_home_score: Score at or above which the home edge is moderate
        away_better_score: Score at or below which the visitor handles conditions better
        slight_away_score: Score at or below which the visitor has a slight edge
    """
    cold_threshold: float = 45.0
    cold_scale: float = 20.0
    warm_weather_freezing_penalty: float = 0.90
    heat_threshold: float = 85.0
    wind_threshold: float = 15.0
    dome_team_cold_threshold: float = 50.0
    dome_team_wind_threshold: float = 12.0

    major_home_score: int = 115
    strong_home_score: int = 108
    moderate_home_score: int = 104
    away_better_score: int = 92
    slight_away_score: int = 96


@dataclass
class ScoringParameters:
    """
    Complete scoring parameter set.

    Attributes:
        passing: Passing impact tables
        rushing: Rushing impact tables
        kicking: Kicking impact tables
        advantage: Team advantage rules
        freezing_threshold: At or below this (F) counts as freezing
        version: Parameter version for tracking
    """
    passing: PassingParameters = field(default_factory=PassingParameters)
    rushing: RushingParameters = field(default_factory=RushingParameters)
    kicking: KickingParameters = field(default_factory=KickingParameters)
    advantage: AdvantageParameters = field(default_factory=AdvantageParameters)
    freezing_threshold: float = 32.0
    version: str = "1.0.0"

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScoringParameters':
        """Create parameters from dictionary, keeping defaults for missing keys."""
        params = cls()

        if "passing" in data:
            p = dict(data["passing"])
            for key in ("wind_tiers", "cold_tiers"):
                if key in p:
                    p[key] = _tiers(p[key])
            params.passing = PassingParameters(**p)

        if "rushing" in data:
            r = dict(data["rushing"])
            if "cold_tiers" in r:
                r["cold_tiers"] = _tiers(r["cold_tiers"])
            params.rushing = RushingParameters(**r)

        if "kicking" in data:
            k = dict(data["kicking"])
            for key in ("wind_tiers", "cold_tiers"):
                if key in k:
                    k[key] = _tiers(k[key])
            params.kicking = KickingParameters(**k)

        if "advantage" in data:
            params.advantage = AdvantageParameters(**data["advantage"])

        params.freezing_threshold = data.get("freezing_threshold", 32.0)
        params.version = data.get("version", "1.0.0")
        return params

    def save_to_file(self, filepath: str) -> None:
        """Save parameters to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'ScoringParameters':
        """Load parameters from JSON file."""
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)


# Default parameter instance
DEFAULT_PARAMETERS = ScoringParameters()
