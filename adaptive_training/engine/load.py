"""Per-exercise load autoregulation.

Decides from the previous session whether the working weight goes up, goes
down or stays. Rules are evaluated in priority order, first match wins:

1. Missed reps → decrease 5%
2. RPE at least one point under target → increase 2.5%
3. RPE >= 9.5 → decrease 5%
4. Otherwise → maintain

This module knows nothing about exercise identity; matching a performance
record to a planned exercise is the orchestrator's job.
"""

import math

from loguru import logger

from adaptive_training.engine.config import DEFAULT_CONFIG, EngineConfig
from adaptive_training.engine.models import LoadAdjustment
from adaptive_training.engine.types import AdjustmentType

# Strips binary noise from the percentage scaling (100 * 1.025 -> 102.5)
_WEIGHT_PRECISION = 4


def round_to_increment(weight: float, increment: float = 2.5) -> float:
    """Round a weight to the nearest loadable increment, halves rounding up.

    Args:
        weight: Weight to round
        increment: Smallest loadable step (e.g. 2.5 kg of plates)

    Returns:
        Rounded weight
    """
    steps = math.floor(round(weight / increment, 9) + 0.5)
    return round(steps * increment, _WEIGHT_PRECISION)


def adjust_load(
    current_weight: float,
    rpe: float,
    target_rpe: float = 8.0,
    missed_reps: bool = False,
    *,
    config: EngineConfig | None = None,
) -> LoadAdjustment:
    """Compute the next working weight from last-session effort.

    Args:
        current_weight: Weight used in the last session
        rpe: RPE reported for the last session (1-10)
        target_rpe: Target RPE for the exercise
        missed_reps: Whether the target reps were not completed

    Returns:
        LoadAdjustment with the scaled (unrounded) weight and adjustment type
    """
    config = config or DEFAULT_CONFIG

    if missed_reps:
        adjustment_type = AdjustmentType.LOAD_DECREASE
        factor = config.load_decrease_factor
        rule = "missed_reps"
    elif rpe <= target_rpe - config.rpe_increase_margin:
        adjustment_type = AdjustmentType.LOAD_INCREASE
        factor = config.load_increase_factor
        rule = "rpe_below_target"
    elif rpe >= config.rpe_ceiling:
        adjustment_type = AdjustmentType.LOAD_DECREASE
        factor = config.load_decrease_factor
        rule = "rpe_ceiling"
    else:
        adjustment_type = AdjustmentType.MAINTENANCE
        factor = 1.0
        rule = "on_target"

    new_weight = round(current_weight * factor, _WEIGHT_PRECISION)

    logger.debug(
        "Load rule triggered",
        rule=rule,
        current_weight=current_weight,
        rpe=rpe,
        target_rpe=target_rpe,
        missed_reps=missed_reps,
        new_weight=new_weight,
    )
    return LoadAdjustment(new_weight=new_weight, adjustment_type=adjustment_type)
