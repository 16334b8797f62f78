import pytest

from nfl_stadium_factors.data.team_profiles import TEAM_WEATHER_PROFILES, TeamWeatherProfile
from nfl_stadium_factors.models.weather import Precipitation, WeatherObservation
from nfl_stadium_factors.scoring.advantage import (
    INDOOR_NARRATIVE,
    NEUTRAL_NARRATIVE,
    UNAVAILABLE_NARRATIVE,
    build_narrative,
    compute_advantage,
)


def weather(temp, wind=5, precipitation=Precipitation.NONE):
    return WeatherObservation(temperature_f=temp, wind_mph=wind, precipitation=precipitation)


def test_cold_team_hosting_warm_team_below_freezing():
    advantage = compute_advantage("Green Bay Packers", "Miami Dolphins", weather(25), is_dome=False)

    assert advantage.home_advantage == 1.15
    # 0.82 cold advantage x 0.90 warm-weather freezing penalty
    assert advantage.away_disadvantage == 0.738
    assert advantage.advantage_score == 156
    assert advantage.factors == ("freezing conditions",)
    assert advantage.narrative == "Major home weather advantage (freezing conditions)"


def test_dome_game_is_neutral():
    advantage = compute_advantage("Detroit Lions", "Miami Dolphins", weather(10, 30), is_dome=True)

    assert advantage.advantage_score == 100
    assert advantage.home_advantage == 1.0
    assert advantage.away_disadvantage == 1.0
    assert advantage.narrative == INDOOR_NARRATIVE
    assert advantage.factors == ()


def test_missing_weather_is_neutral():
    advantage = compute_advantage("Green Bay Packers", "Miami Dolphins", None, is_dome=False)

    assert advantage.advantage_score == 100
    assert advantage.narrative == UNAVAILABLE_NARRATIVE


def test_identical_profiles_cancel_out():
    advantage = compute_advantage(
        "Green Bay Packers", "Green Bay Packers",
        weather(25, 20, Precipitation.SNOW), is_dome=False,
    )

    assert advantage.advantage_score == 100
    assert advantage.factors == ("freezing conditions", "strong winds", "snow")
    assert advantage.narrative == NEUTRAL_NARRATIVE


def test_dome_team_penalized_outdoors_in_the_cold():
    advantage = compute_advantage("Green Bay Packers", "New Orleans Saints", weather(48), is_dome=False)

    assert advantage.away_disadvantage == 0.88
    assert advantage.advantage_score == 114
    assert advantage.factors == ("dome team outdoors",)
    assert advantage.narrative == "Strong home weather advantage (dome team outdoors)"


def test_dome_team_unaffected_in_fair_weather():
    advantage = compute_advantage("Green Bay Packers", "New Orleans Saints", weather(60), is_dome=False)

    assert advantage.advantage_score == 100
    assert advantage.factors == ()


def test_dome_team_penalized_by_drizzle():
    advantage = compute_advantage(
        "Kansas City Chiefs", "Atlanta Falcons",
        weather(60, 5, Precipitation.LIGHT_RAIN), is_dome=False,
    )

    # Drizzle is not a rain step of its own, only the dome penalty fires
    assert advantage.factors == ("dome team outdoors",)
    assert advantage.away_disadvantage == 0.9


def test_altitude_helps_denver_at_home():
    advantage = compute_advantage("Denver Broncos", "Kansas City Chiefs", weather(70), is_dome=False)

    assert advantage.home_advantage == 1.18
    assert advantage.away_disadvantage == 1.0
    assert advantage.advantage_score == 118
    assert advantage.narrative == "Major home weather advantage (altitude)"


def test_cold_weather_is_graduated_above_freezing():
    # (45 - 41) / 20 = 0.2 of the 0.15 edge
    advantage = compute_advantage("Green Bay Packers", "Las Vegas Raiders", weather(41), is_dome=False)

    assert advantage.home_advantage == 1.03
    assert advantage.away_disadvantage == 1.0
    assert advantage.factors == ("cold weather",)
    assert advantage.narrative == NEUTRAL_NARRATIVE


def test_rain_advantage_used_when_precipitation_impact_unset():
    advantage = compute_advantage(
        "Seattle Seahawks", "Las Vegas Raiders",
        weather(60, 5, Precipitation.RAIN), is_dome=False,
    )

    assert advantage.home_advantage == 1.12
    assert advantage.advantage_score == 112
    assert advantage.narrative == "Strong home weather advantage (rain)"


def test_away_team_can_handle_conditions_better():
    advantage = compute_advantage("Miami Dolphins", "Green Bay Packers", weather(25), is_dome=False)

    assert advantage.advantage_score == 71
    assert advantage.narrative == "Away team handles conditions better (freezing conditions)"


def test_heat_favors_warm_weather_home_team():
    advantage = compute_advantage("Miami Dolphins", "Las Vegas Raiders", weather(90), is_dome=False)

    assert advantage.home_advantage == 1.15
    assert advantage.factors == ("high heat",)


def test_custom_profile_table():
    profiles = {"Home": TeamWeatherProfile("Home", wind_resistance=1.2)}
    advantage = compute_advantage("Home", "Away", weather(70, 20), is_dome=False, profiles=profiles)

    assert advantage.advantage_score == 120
    assert advantage.factors == ("strong winds",)


def test_precipitation_fallbacks_resolved_at_construction():
    assert TEAM_WEATHER_PROFILES["Buffalo Bills"].rain_multiplier == 1.0
    assert TEAM_WEATHER_PROFILES["Buffalo Bills"].snow_multiplier == 1.15
    assert TEAM_WEATHER_PROFILES["Green Bay Packers"].rain_multiplier == 0.96
    assert TEAM_WEATHER_PROFILES["Green Bay Packers"].snow_multiplier == 0.96
    assert TEAM_WEATHER_PROFILES["Seattle Seahawks"].rain_multiplier == 1.12
    assert TEAM_WEATHER_PROFILES["Seattle Seahawks"].snow_multiplier == 1.0


@pytest.mark.parametrize("score,label", [
    (130, "Major home weather advantage"),
    (115, "Major home weather advantage"),
    (108, "Strong home weather advantage"),
    (104, "Moderate home weather advantage"),
    (92, "Away team handles conditions better"),
    (80, "Away team handles conditions better"),
    (96, "Slight away team advantage"),
])
def test_narrative_tiers(score, label):
    assert build_narrative(score, ["wind"]) == f"{label} (wind)"


@pytest.mark.parametrize("score", [97, 100, 103])
def test_narrative_neutral_band(score):
    assert build_narrative(score, ["wind"]) == NEUTRAL_NARRATIVE


def test_narrative_without_factors_has_no_parentheses():
    assert build_narrative(120, []) == "Major home weather advantage"
