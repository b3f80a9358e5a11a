"""Whole-workout volume autoregulation driven by readiness."""

import math

from loguru import logger

from adaptive_training.engine.config import DEFAULT_CONFIG, EngineConfig
from adaptive_training.engine.models import VolumeAdjustment, Workout
from adaptive_training.engine.types import AdjustmentType


def adjust_volume(
    planned_workout: Workout,
    readiness_score: int,
    *,
    config: EngineConfig | None = None,
) -> VolumeAdjustment:
    """Reduce set counts when readiness is low.

    Every exercise is treated as equally fatiguing; there is no per-exercise
    exemption. The returned workout is always a new instance, the planned
    workout is left untouched.

    Args:
        planned_workout: Workout to adjust
        readiness_score: Readiness score (0-100)
        config: Engine configuration (defaults to ``DEFAULT_CONFIG``)

    Returns:
        VolumeAdjustment with the new workout and DELOAD, VOLUME_REDUCTION
        or MAINTENANCE
    """
    config = config or DEFAULT_CONFIG
    workout = planned_workout.model_copy(deep=True)

    if readiness_score < config.deload_readiness_threshold:
        exercises = [
            exercise.model_copy(update={"sets": max(1, math.floor(exercise.sets * config.deload_set_factor))})
            for exercise in workout.exercises
        ]
        adjustment_type = AdjustmentType.DELOAD
    elif readiness_score < config.volume_reduction_readiness_threshold:
        exercises = [
            exercise.model_copy(update={"sets": exercise.sets - 1}) if exercise.sets > 1 else exercise
            for exercise in workout.exercises
        ]
        adjustment_type = AdjustmentType.VOLUME_REDUCTION
    else:
        return VolumeAdjustment(workout=workout, adjustment_type=AdjustmentType.MAINTENANCE)

    logger.debug(
        "Volume rule triggered",
        readiness=readiness_score,
        adjustment_type=adjustment_type,
        sets=[exercise.sets for exercise in exercises],
    )
    return VolumeAdjustment(
        workout=workout.model_copy(update={"exercises": exercises}),
        adjustment_type=adjustment_type,
    )
