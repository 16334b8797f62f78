import pytest

from nfl_stadium_factors.scoring.adjustments import apply_adjustment
from nfl_stadium_factors.scoring.impacts import ImpactKind
from nfl_stadium_factors.utils.validators import ValidationError


def test_missing_weather_keeps_baseline():
    for kind in ImpactKind:
        assert apply_adjustment(0.95, None, kind) == 0.95


def test_baseline_is_scaled_by_impact(snowy_cold):
    # 0.95 x 0.613
    assert apply_adjustment(0.95, snowy_cold, "passing") == 0.582


def test_calm_weather_keeps_baseline(mild):
    assert apply_adjustment(1.03, mild, ImpactKind.RUSHING) == 1.03


def test_invalid_kind_raises_even_without_weather():
    with pytest.raises(ValidationError):
        apply_adjustment(1.0, None, "punting")
