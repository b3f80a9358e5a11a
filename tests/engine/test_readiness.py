"""Tests for readiness scoring.

Tests cover:
- Reference feedback values
- Sleep buckets (ordered, exactly one applies)
- Soreness penalties stacking at the extreme
- Stress penalty
- Clamping to [0, 100]
- Configurable baseline
- Determinism
"""

import pytest

from adaptive_training.engine.config import EngineConfig
from adaptive_training.engine.models import Feedback
from adaptive_training.engine.readiness import calculate_readiness
from adaptive_training.engine.types import StressLevel


def _feedback(sleep: float = 7, soreness: int = 1, stress: StressLevel = StressLevel.LOW) -> Feedback:
    return Feedback(sleep_quality=sleep, soreness=soreness, stress_level=stress)


# ============================================================================
# REFERENCE VALUES
# ============================================================================


def test_good_sleep_low_stress_scores_85():
    """80 baseline + 5 sleep bonus, no soreness or stress penalty."""
    assert calculate_readiness(_feedback(sleep=8, soreness=2)) == 85


def test_short_sleep_high_stress_scores_55():
    """Sleep 5 falls in the <= 6 bucket: 80 - 10 sleep - 15 stress."""
    assert calculate_readiness(_feedback(sleep=5, soreness=3, stress=StressLevel.HIGH)) == 55


def test_neutral_feedback_scores_baseline():
    """Sleep 7 triggers no sleep bucket."""
    assert calculate_readiness(_feedback(sleep=7, soreness=2, stress=StressLevel.MEDIUM)) == 80


# ============================================================================
# SLEEP BUCKETS
# ============================================================================


@pytest.mark.parametrize(
    ("sleep", "expected"),
    [
        (1, 60),
        (4, 60),
        (5, 70),
        (6, 70),
        (7, 80),
        (7.5, 80),
        (8, 85),
        (10, 85),
    ],
)
def test_sleep_buckets(sleep, expected):
    """Exactly one sleep modifier applies, evaluated as an ordered chain."""
    assert calculate_readiness(_feedback(sleep=sleep)) == expected


# ============================================================================
# SORENESS AND STRESS
# ============================================================================


def test_soreness_four_costs_ten():
    assert calculate_readiness(_feedback(soreness=4)) == 70


def test_extreme_soreness_stacks_both_penalties():
    """Soreness 5 applies the >= 4 and the == 5 penalty: -30 in total."""
    assert calculate_readiness(_feedback(soreness=5)) == 50


def test_high_stress_costs_fifteen():
    assert calculate_readiness(_feedback(stress=StressLevel.HIGH)) == 65


def test_medium_stress_has_no_penalty():
    assert calculate_readiness(_feedback(stress=StressLevel.MEDIUM)) == 80


# ============================================================================
# BOUNDS
# ============================================================================


def test_worst_feedback_is_clamped_at_zero():
    """Low baseline with every penalty would go negative."""
    config = EngineConfig(baseline_readiness=30)
    feedback = _feedback(sleep=1, soreness=5, stress=StressLevel.HIGH)

    assert calculate_readiness(feedback, config) == 0


def test_best_feedback_is_clamped_at_hundred():
    config = EngineConfig(baseline_readiness=100)

    assert calculate_readiness(_feedback(sleep=9), config) == 100


@pytest.mark.parametrize("sleep", [1, 3, 5, 7, 9, 10])
@pytest.mark.parametrize("soreness", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("stress", list(StressLevel))
def test_score_always_within_bounds(sleep, soreness, stress):
    score = calculate_readiness(_feedback(sleep=sleep, soreness=soreness, stress=stress))

    assert isinstance(score, int)
    assert 0 <= score <= 100


# ============================================================================
# CONFIGURATION AND DETERMINISM
# ============================================================================


def test_baseline_comes_from_config():
    config = EngineConfig(baseline_readiness=70)

    assert calculate_readiness(_feedback(sleep=8, soreness=2), config) == 75


def test_same_feedback_same_score():
    feedback = _feedback(sleep=6, soreness=4, stress=StressLevel.HIGH)

    assert calculate_readiness(feedback) == calculate_readiness(feedback) == 45
