"""
NFL Constants - Teams, abbreviations, and reference labels.

This module contains the static NFL data shared by the data sources,
the scoring engine and the exporters.
"""

from typing import Dict, List, Optional, Tuple

# NFL Team Structure by Conference and Division
NFL_TEAMS: Dict[str, Dict[str, List[str]]] = {
    "AFC": {
        "East": ["Buffalo Bills", "Miami Dolphins", "New England Patriots", "New York Jets"],
        "North": ["Baltimore Ravens", "Cincinnati Bengals", "Cleveland Browns", "Pittsburgh Steelers"],
        "South": ["Houston Texans", "Indianapolis Colts", "Jacksonville Jaguars", "Tennessee Titans"],
        "West": ["Denver Broncos", "Kansas City Chiefs", "Las Vegas Raiders", "Los Angeles Chargers"]
    },
    "NFC": {
        "East": ["Dallas Cowboys", "New York Giants", "Philadelphia Eagles", "Washington Commanders"],
        "North": ["Chicago Bears", "Detroit Lions", "Green Bay Packers", "Minnesota Vikings"],
        "South": ["Atlanta Falcons", "Carolina Panthers", "New Orleans Saints", "Tampa Bay Buccaneers"],
        "West": ["Arizona Cardinals", "Los Angeles Rams", "San Francisco 49ers", "Seattle Seahawks"]
    }
}

# All 32 NFL teams as a flat list
ALL_NFL_TEAMS: List[str] = []
for conf, divisions in NFL_TEAMS.items():
    for div, teams in divisions.items():
        ALL_NFL_TEAMS.extend(teams)

# Team abbreviations to full names
TEAM_ABBREVIATIONS: Dict[str, str] = {
    "ARI": "Arizona Cardinals",
    "ATL": "Atlanta Falcons",
    "BAL": "Baltimore Ravens",
    "BUF": "Buffalo Bills",
    "CAR": "Carolina Panthers",
    "CHI": "Chicago Bears",
    "CIN": "Cincinnati Bengals",
    "CLE": "Cleveland Browns",
    "DAL": "Dallas Cowboys",
    "DEN": "Denver Broncos",
    "DET": "Detroit Lions",
    "GB": "Green Bay Packers",
    "HOU": "Houston Texans",
    "IND": "Indianapolis Colts",
    "JAX": "Jacksonville Jaguars",
    "KC": "Kansas City Chiefs",
    "LAC": "Los Angeles Chargers",
    "LAR": "Los Angeles Rams",
    "LV": "Las Vegas Raiders",
    "MIA": "Miami Dolphins",
    "MIN": "Minnesota Vikings",
    "NE": "New England Patriots",
    "NO": "New Orleans Saints",
    "NYG": "New York Giants",
    "NYJ": "New York Jets",
    "PHI": "Philadelphia Eagles",
    "PIT": "Pittsburgh Steelers",
    "SEA": "Seattle Seahawks",
    "SF": "San Francisco 49ers",
    "TB": "Tampa Bay Buccaneers",
    "TEN": "Tennessee Titans",
    "WAS": "Washington Commanders",
}

# Alternate abbreviations used by schedule providers
TEAM_ABBREVIATION_ALIASES: Dict[str, str] = {
    "WSH": "WAS",
    "LA": "LAR",
    "JAC": "JAX",
}

# Reverse mapping: full name to abbreviation
TEAM_TO_ABBREVIATION: Dict[str, str] = {v: k for k, v in TEAM_ABBREVIATIONS.items()}

# Opponents used when scoring every stadium without a schedule
SAMPLE_OUTDOOR_OPPONENT = "Miami Dolphins"
SAMPLE_INDOOR_OPPONENT = "Green Bay Packers"

# Research behind the multiplier tables, echoed in every report
DATA_SOURCES: Tuple[str, ...] = (
    "NFL Weather Impact Research 2022-2024",
    "Field Goal Analysis by Wind/Temperature",
    "QB Completion Rate Studies",
    "Team Performance by Climate Type",
)


def resolve_team_name(name: Optional[str] = None, abbreviation: Optional[str] = None) -> str:
    """
    Resolve a provider team reference to a full team name.

    Full names that match a known team win; otherwise the abbreviation is
    looked up (aliases included). Unknown teams keep whatever name was given.

    Args:
        name: Display name from the provider
        abbreviation: Team abbreviation from the provider

    Returns:
        Full team name, or the best available label
    """
    if name and name in TEAM_TO_ABBREVIATION:
        return name

    if abbreviation:
        abbrev = abbreviation.upper()
        abbrev = TEAM_ABBREVIATION_ALIASES.get(abbrev, abbrev)
        if abbrev in TEAM_ABBREVIATIONS:
            return TEAM_ABBREVIATIONS[abbrev]

    return name or abbreviation or ""
