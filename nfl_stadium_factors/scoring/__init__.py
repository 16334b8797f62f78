"""
Scoring package - The weather impact scoring engine.

This package contains:
- impacts.py: Passing, rushing and kicking impact functions
- adjustments.py: Apply impacts to stadium baselines
- advantage.py: Home-vs-away team weather advantage
- positions.py: Position group multipliers
- assembler.py: Per-stadium results and ranking
"""

from nfl_stadium_factors.scoring.impacts import (
    ImpactKind,
    passing_impact,
    rushing_impact,
    kicking_impact,
    calculate_impact,
)
from nfl_stadium_factors.scoring.adjustments import apply_adjustment
from nfl_stadium_factors.scoring.advantage import (
    compute_advantage,
    build_narrative,
    INDOOR_NARRATIVE,
    UNAVAILABLE_NARRATIVE,
    NEUTRAL_NARRATIVE,
)
from nfl_stadium_factors.scoring.positions import compute_position_impacts
from nfl_stadium_factors.scoring.assembler import (
    weather_summary,
    build_stadium_result,
    rank_results,
)

__all__ = [
    "ImpactKind",
    "passing_impact",
    "rushing_impact",
    "kicking_impact",
    "calculate_impact",
    "apply_adjustment",
    "compute_advantage",
    "build_narrative",
    "INDOOR_NARRATIVE",
    "UNAVAILABLE_NARRATIVE",
    "NEUTRAL_NARRATIVE",
    "compute_position_impacts",
    "weather_summary",
    "build_stadium_result",
    "rank_results",
]
