"""Tests for per-exercise load autoregulation.

Tests cover:
- RPE below target → increase
- RPE at the ceiling → decrease
- Missed reps short-circuits the RPE rules
- On-target effort → maintenance
- Rounding to the loadable increment
"""

import pytest

from adaptive_training.engine.config import EngineConfig
from adaptive_training.engine.load import adjust_load, round_to_increment
from adaptive_training.engine.types import AdjustmentType

# ============================================================================
# RULE PRIORITY
# ============================================================================


def test_easy_session_increases_load():
    adjustment = adjust_load(100, rpe=7, target_rpe=8, missed_reps=False)

    assert adjustment.adjustment_type == AdjustmentType.LOAD_INCREASE
    assert adjustment.new_weight == 102.5


def test_grinding_session_decreases_load():
    adjustment = adjust_load(100, rpe=9.5, target_rpe=8, missed_reps=False)

    assert adjustment.adjustment_type == AdjustmentType.LOAD_DECREASE
    assert adjustment.new_weight == 95


def test_missed_reps_decrease_before_rpe_rules():
    """On-target RPE would maintain, missed reps wins first."""
    adjustment = adjust_load(100, rpe=8, target_rpe=8, missed_reps=True)

    assert adjustment.adjustment_type == AdjustmentType.LOAD_DECREASE
    assert adjustment.new_weight == 95


def test_missed_reps_beats_low_rpe():
    adjustment = adjust_load(100, rpe=5, target_rpe=8, missed_reps=True)

    assert adjustment.adjustment_type == AdjustmentType.LOAD_DECREASE


@pytest.mark.parametrize("rpe", [7.5, 8, 9])
def test_on_target_effort_maintains(rpe):
    adjustment = adjust_load(60, rpe=rpe, target_rpe=8)

    assert adjustment.adjustment_type == AdjustmentType.MAINTENANCE
    assert adjustment.new_weight == 60


def test_increase_threshold_follows_target():
    """RPE 8 is easy against a target of 9."""
    adjustment = adjust_load(80, rpe=8, target_rpe=9)

    assert adjustment.adjustment_type == AdjustmentType.LOAD_INCREASE
    assert adjustment.new_weight == pytest.approx(82.0)


def test_low_target_lets_ceiling_apply():
    """With target 10 an RPE of 9.5 is not 'easy', the ceiling rule fires."""
    adjustment = adjust_load(100, rpe=9.5, target_rpe=10)

    assert adjustment.adjustment_type == AdjustmentType.LOAD_DECREASE


def test_factors_come_from_config():
    config = EngineConfig(load_increase_factor=1.05)

    adjustment = adjust_load(100, rpe=6, config=config)

    assert adjustment.new_weight == pytest.approx(105.0)


def test_adjust_load_is_unrounded_to_increment():
    """Rounding to plates is the caller's job."""
    adjustment = adjust_load(60, rpe=10)

    assert adjustment.new_weight == pytest.approx(57.0)


# ============================================================================
# ROUNDING
# ============================================================================


@pytest.mark.parametrize(
    ("weight", "expected"),
    [
        (102.5, 102.5),
        (102.49999999999999, 102.5),
        (57.0, 57.5),
        (101.2, 100.0),
        (101.25, 102.5),
        (0.0, 0.0),
    ],
)
def test_round_to_nearest_increment(weight, expected):
    assert round_to_increment(weight) == expected


def test_round_to_custom_increment():
    assert round_to_increment(83.0, increment=5) == 85.0
