from nfl_stadium_factors.constants import ALL_NFL_TEAMS, resolve_team_name
from nfl_stadium_factors.data.stadiums import (
    STADIUM_PROFILES,
    TEAM_STADIUMS,
    StadiumProfile,
    get_stadium,
    get_stadium_for_team,
    resolve_stadium,
)


def test_get_stadium():
    assert get_stadium("Lambeau Field").home_team == "Green Bay Packers"
    assert get_stadium("Wembley Stadium") is None


def test_get_stadium_for_team_covers_shared_buildings():
    assert get_stadium_for_team("New York Jets") is get_stadium("MetLife Stadium")
    assert get_stadium_for_team("Los Angeles Chargers") is get_stadium("SoFi Stadium")
    assert get_stadium_for_team("London Monarchs") is None


def test_every_team_has_a_known_home_stadium():
    assert set(TEAM_STADIUMS) == set(ALL_NFL_TEAMS)
    for stadium_name in TEAM_STADIUMS.values():
        assert stadium_name in STADIUM_PROFILES


def test_resolve_stadium():
    assert resolve_stadium("Lambeau Field") is STADIUM_PROFILES["Lambeau Field"]
    assert resolve_stadium("", "Chicago Bears") is STADIUM_PROFILES["Soldier Field"]

    neutral = resolve_stadium("Estadio Azteca", "Kansas City Chiefs")
    assert neutral.name == "Estadio Azteca"
    assert neutral.coordinates is None
    assert (neutral.base_passing, neutral.base_rushing, neutral.base_kicking) == (1.0, 1.0, 1.0)


def test_resolve_stadium_with_custom_table():
    table = {"Test Dome": StadiumProfile("Test Dome", "Home", 40.0, -80.0, is_dome=True)}

    assert resolve_stadium("Test Dome", stadiums=table).is_dome
    assert resolve_stadium("Lambeau Field", stadiums=table).coordinates is None


def test_resolve_team_name():
    assert resolve_team_name("Green Bay Packers", "GB") == "Green Bay Packers"
    assert resolve_team_name("Washington", "WSH") == "Washington Commanders"
    assert resolve_team_name(None, "LA") == "Los Angeles Rams"
    assert resolve_team_name("London Monarchs", "LON") == "London Monarchs"
