import pytest

from nfl_stadium_factors.models.weather import Precipitation
from nfl_stadium_factors.scoring.impacts import (
    ImpactKind,
    calculate_impact,
    kicking_impact,
    passing_impact,
    rushing_impact,
)
from nfl_stadium_factors.utils.validators import ValidationError

IMPACTS = (passing_impact, rushing_impact, kicking_impact)


def test_passing_in_snow_wind_and_cold():
    # 0.82 (snow) x 0.85 (20+ mph) x 0.88 (<= 20F)
    assert passing_impact(15, 22, Precipitation.SNOW) == 0.613


def test_calm_weather_is_neutral():
    for impact in IMPACTS:
        assert impact(70, 5, Precipitation.NONE) == 1.0


def test_rushing_in_snow_and_cold():
    assert rushing_impact(15, 22, Precipitation.SNOW) == 1.187


def test_kicking_in_snow_wind_and_cold():
    assert kicking_impact(15, 22, Precipitation.SNOW) == 0.48


@pytest.mark.parametrize("temp,expected", [(10, 1.06), (20, 1.06), (25, 1.04), (32, 1.04), (33, 1.0)])
def test_rushing_cold_tiers(temp, expected):
    assert rushing_impact(temp, 5, Precipitation.NONE) == expected


def test_rushing_only_feels_severe_wind():
    assert rushing_impact(70, 25, Precipitation.NONE) == 1.0
    assert rushing_impact(70, 26, Precipitation.NONE) == 0.98


def test_kicking_drops_when_wind_crosses_15_mph():
    assert kicking_impact(70, 16, Precipitation.NONE) < kicking_impact(70, 14, Precipitation.NONE)


def test_light_rain_only_affects_passing():
    assert passing_impact(60, 0, Precipitation.LIGHT_RAIN) == 0.88
    assert rushing_impact(60, 0, Precipitation.LIGHT_RAIN) == 1.0
    assert kicking_impact(60, 0, Precipitation.LIGHT_RAIN) == 1.0


def test_rain_multipliers():
    assert passing_impact(60, 0, Precipitation.RAIN) == 0.88
    assert rushing_impact(60, 0, Precipitation.RAIN) == 1.08
    assert kicking_impact(60, 0, Precipitation.RAIN) == 0.95


def test_factors_are_positive_and_in_three_decimal_form():
    for temp in (-10, 0, 20, 32, 40, 45, 60, 90):
        for wind in (0, 10, 15, 20, 26, 40):
            for precipitation in Precipitation:
                for impact in IMPACTS:
                    factor = impact(temp, wind, precipitation)
                    assert factor > 0
                    assert abs(factor * 1000 - round(factor * 1000)) < 1e-6


def test_passing_and_kicking_never_exceed_neutral():
    for temp in (-10, 20, 40, 90):
        for wind in (0, 12, 30):
            for precipitation in Precipitation:
                assert passing_impact(temp, wind, precipitation) <= 1.0
                assert kicking_impact(temp, wind, precipitation) <= 1.0


def test_calculate_impact_dispatches_by_kind():
    assert calculate_impact("passing", 15, 22, Precipitation.SNOW) == 0.613
    assert calculate_impact(ImpactKind.KICKING, 15, 22, Precipitation.SNOW) == 0.48


def test_unknown_kind_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        calculate_impact("punting", 70, 5, Precipitation.NONE)
    assert excinfo.value.field == "kind"
