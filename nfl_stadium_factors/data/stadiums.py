"""
Stadium Data - NFL stadium coordinates, baseline factors, and roof types.

Baseline factors are weather-independent multipliers (centered at 1.0)
reflecting structural features such as altitude, field surface and
prevailing wind patterns.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Optional


@dataclass(frozen=True)
class StadiumProfile:
    """
    Static scoring profile of an NFL stadium.

    Attributes:
        name: Stadium name
        home_team: Primary home team name
        latitude: Latitude coordinate (None when unknown)
        longitude: Longitude coordinate (None when unknown)
        base_passing: Baseline passing factor
        base_rushing: Baseline rushing factor
        base_kicking: Baseline kicking factor
        is_dome: Indoor or roofed stadium, weather never applies
    """
    name: str
    home_team: str
    latitude: Optional[float]
    longitude: Optional[float]
    base_passing: float = 1.0
    base_rushing: float = 1.0
    base_kicking: float = 1.0
    is_dome: bool = False

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        """Get latitude/longitude tuple."""
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)

    @classmethod
    def neutral(cls, name: str, home_team: str = "") -> 'StadiumProfile':
        """Profile for a venue missing from the table: no coordinates, 1.0 baselines."""
        return cls(name=name, home_team=home_team, latitude=None, longitude=None)


def _stadium(name: str, team: str, lat: float, lon: float,
             passing: float, rushing: float, kicking: float,
             dome: bool = False) -> StadiumProfile:
    return StadiumProfile(name, team, lat, lon, passing, rushing, kicking, dome)


# Stadium profiles keyed by stadium name
STADIUM_PROFILES: Dict[str, StadiumProfile] = {s.name: s for s in (
    # Cold-weather outdoor stadiums
    _stadium("Lambeau Field", "Green Bay Packers", 44.5013, -88.0622, 0.95, 1.05, 0.90),
    _stadium("Soldier Field", "Chicago Bears", 41.8623, -87.6167, 0.96, 1.03, 0.92),
    _stadium("Highmark Stadium", "Buffalo Bills", 42.7738, -78.7870, 0.95, 1.04, 0.89),
    _stadium("Cleveland Browns Stadium", "Cleveland Browns", 41.5061, -81.6995, 0.97, 1.02, 0.93),
    _stadium("Acrisure Stadium", "Pittsburgh Steelers", 40.4469, -80.0158, 0.96, 1.04, 0.91),
    _stadium("Gillette Stadium", "New England Patriots", 42.0909, -71.2643, 0.98, 1.01, 0.94),
    _stadium("Arrowhead Stadium", "Kansas City Chiefs", 39.0489, -94.4839, 0.98, 1.02, 0.95),
    _stadium("M&T Bank Stadium", "Baltimore Ravens", 39.2780, -76.6227, 1.00, 1.00, 0.98),
    _stadium("MetLife Stadium", "New York Giants", 40.8135, -74.0745, 1.01, 0.99, 0.97),
    _stadium("Lincoln Financial Field", "Philadelphia Eagles", 39.9008, -75.1675, 0.99, 1.01, 0.96),
    _stadium("Paycor Stadium", "Cincinnati Bengals", 39.0955, -84.5160, 0.99, 1.01, 0.97),
    _stadium("Northwest Stadium", "Washington Commanders", 38.9076, -76.8645, 1.00, 1.00, 0.98),
    _stadium("Nissan Stadium", "Tennessee Titans", 36.1665, -86.7713, 1.00, 1.00, 0.99),
    _stadium("Bank of America Stadium", "Carolina Panthers", 35.2258, -80.8528, 1.01, 0.99, 1.00),

    # Altitude and west coast
    _stadium("Empower Field", "Denver Broncos", 39.7439, -105.0201, 1.08, 0.95, 0.85),
    _stadium("Lumen Field", "Seattle Seahawks", 47.5952, -122.3316, 0.99, 1.01, 0.96),
    _stadium("Levi's Stadium", "San Francisco 49ers", 37.4031, -121.9695, 1.01, 0.99, 1.00),

    # Warm-weather outdoor stadiums
    _stadium("Hard Rock Stadium", "Miami Dolphins", 25.9580, -80.2389, 1.03, 0.98, 1.02),
    _stadium("EverBank Stadium", "Jacksonville Jaguars", 30.3240, -81.6373, 1.02, 0.99, 1.01),
    _stadium("Raymond James Stadium", "Tampa Bay Buccaneers", 27.9759, -82.5033, 1.02, 0.98, 1.01),

    # Domes and retractable roofs
    _stadium("NRG Stadium", "Houston Texans", 29.6847, -95.4107, 1.02, 0.98, 1.03, dome=True),
    _stadium("Lucas Oil Stadium", "Indianapolis Colts", 39.7601, -86.1639, 1.03, 0.97, 1.05, dome=True),
    _stadium("Allegiant Stadium", "Las Vegas Raiders", 36.0908, -115.1834, 1.02, 0.98, 1.04, dome=True),
    _stadium("SoFi Stadium", "Los Angeles Rams", 33.9535, -118.3392, 1.03, 0.97, 1.02, dome=True),
    _stadium("State Farm Stadium", "Arizona Cardinals", 33.5276, -112.2626, 1.02, 0.98, 1.03, dome=True),
    _stadium("AT&T Stadium", "Dallas Cowboys", 32.7473, -97.0945, 1.04, 0.96, 1.05, dome=True),
    _stadium("U.S. Bank Stadium", "Minnesota Vikings", 44.9738, -93.2581, 1.03, 0.97, 1.05, dome=True),
    _stadium("Ford Field", "Detroit Lions", 42.3400, -83.0456, 1.02, 0.98, 1.04, dome=True),
    _stadium("Caesars Superdome", "New Orleans Saints", 29.9511, -90.0812, 1.03, 0.97, 1.05, dome=True),
    _stadium("Mercedes-Benz Stadium", "Atlanta Falcons", 33.7553, -84.4006, 1.03, 0.97, 1.05, dome=True),
)}

# Home stadium of every team, including tenants that share a building
TEAM_STADIUMS: Dict[str, str] = {
    profile.home_team: name for name, profile in STADIUM_PROFILES.items()
}
TEAM_STADIUMS["New York Jets"] = "MetLife Stadium"
TEAM_STADIUMS["Los Angeles Chargers"] = "SoFi Stadium"


def get_stadium(name: str) -> Optional[StadiumProfile]:
    """Get a stadium profile by stadium name."""
    return STADIUM_PROFILES.get(name)


def get_stadium_for_team(team: str) -> Optional[StadiumProfile]:
    """Get the home stadium profile for a team."""
    name = TEAM_STADIUMS.get(team)
    return STADIUM_PROFILES.get(name) if name else None


def resolve_stadium(
    stadium_name: str,
    home_team: str = "",
    stadiums: Optional[Dict[str, StadiumProfile]] = None
) -> StadiumProfile:
    """
    Resolve a venue to a profile, falling back to a neutral one.

    The stadium name is tried first, then the home team's stadium when no
    name is given. Unknown venues never raise.

    Args:
        stadium_name: Venue name reported for the game
        home_team: Home team name
        stadiums: Profile table to search (defaults to STADIUM_PROFILES)

    Returns:
        Matching StadiumProfile or a neutral profile
    """
    table = STADIUM_PROFILES if stadiums is None else stadiums
    profile = table.get(stadium_name)
    if profile is not None:
        return profile

    if not stadium_name and home_team:
        profile = table.get(TEAM_STADIUMS.get(home_team, ""))
        if profile is not None:
            return profile

    return StadiumProfile.neutral(stadium_name or f"{home_team} home stadium", home_team)
