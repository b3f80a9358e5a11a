"""Daily workout decision orchestrator.

Composes the engine rules in fixed priority order:

1. Injury safety - substitute exercises that load a painful area
2. Recovery - reduce volume when readiness is low
3. Progression - autoregulate load from last-session performance

Each stage consumes the previous stage's workout. One explanation is
collected per triggered rule, in evaluation order.

DESIGN PRINCIPLES:
- Deterministic (same inputs → same outputs)
- No I/O, no shared mutable state between calls
- The caller's planned workout is never mutated
- Invalid input fails the whole call before any rule runs
"""

from loguru import logger

from adaptive_training.engine.config import DEFAULT_CONFIG, EngineConfig
from adaptive_training.engine.errors import InvalidInputError
from adaptive_training.engine.explanations import explain
from adaptive_training.engine.injury import apply_pain_flag
from adaptive_training.engine.load import adjust_load, round_to_increment
from adaptive_training.engine.models import (
    AppliedAdjustment,
    DailyWorkoutResult,
    Exercise,
    ExercisePerformance,
    Feedback,
    User,
    Workout,
)
from adaptive_training.engine.readiness import calculate_readiness
from adaptive_training.engine.types import AdjustmentType
from adaptive_training.engine.volume import adjust_volume

_SETS_REMOVED = {
    AdjustmentType.DELOAD: "50%",
    AdjustmentType.VOLUME_REDUCTION: "20%",
}


def _validate_inputs(
    user: User,
    planned_workout: Workout,
    feedback: Feedback,
    history: list[ExercisePerformance],
) -> None:
    """Fail fast on inputs the rules cannot work with.

    Raises:
        InvalidInputError: If an argument is not the expected record, the plan
            is empty or an exercise has no sets/reps
    """
    if not isinstance(user, User):
        raise InvalidInputError("user", "user must be a User record")
    if not isinstance(planned_workout, Workout):
        raise InvalidInputError("planned_workout", "planned_workout must be a Workout")
    if not isinstance(feedback, Feedback):
        raise InvalidInputError("feedback", "feedback must be a Feedback record")
    if not isinstance(history, list):
        raise InvalidInputError("history", "history must be a list of ExercisePerformance records")
    for index, performance in enumerate(history):
        if not isinstance(performance, ExercisePerformance):
            raise InvalidInputError(
                "history",
                f"history[{index}] must be an ExercisePerformance record, got {type(performance).__name__}",
            )
    if not planned_workout.exercises:
        raise InvalidInputError("planned_workout.exercises", "Planned workout has no exercises")

    for exercise in planned_workout.exercises:
        if exercise.sets < 1:
            raise InvalidInputError(
                "planned_workout.exercises.sets",
                f"Planned exercise {exercise.id!r} must have at least 1 set, got {exercise.sets}",
            )
        if exercise.reps < 1:
            raise InvalidInputError(
                "planned_workout.exercises.reps",
                f"Planned exercise {exercise.id!r} must have at least 1 rep, got {exercise.reps}",
            )


def _find_performance(exercise_id: str, history: list[ExercisePerformance]) -> ExercisePerformance | None:
    # First match wins on duplicate ids
    return next((performance for performance in history if performance.exercise_id == exercise_id), None)


class DecisionOrchestrator:
    """Produces one consolidated training decision per call.

    Holds only immutable configuration; a single instance can serve
    concurrent callers.
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def generate_daily_workout(
        self,
        user: User,
        planned_workout: Workout,
        feedback: Feedback,
        history: list[ExercisePerformance] | None = None,
    ) -> DailyWorkoutResult:
        """Decide today's workout.

        Args:
            user: Athlete the decision is for
            planned_workout: Workout as planned (never mutated)
            feedback: Today's recovery feedback
            history: Last-session performance records, matched by exercise id

        Returns:
            DailyWorkoutResult with readiness, adjusted workout and explanations

        Raises:
            InvalidInputError: If an input is not a usable record
        """
        history = history or []
        _validate_inputs(user, planned_workout, feedback, history)
        adjustments: list[AppliedAdjustment] = []

        workout = planned_workout.model_copy(deep=True)

        # Stage 1: injury safety
        workout = self._apply_injury_protocol(workout, feedback, adjustments)

        # Stage 2: recovery
        readiness = calculate_readiness(feedback, self.config)
        workout = self._apply_volume(workout, readiness, feedback, adjustments)

        # Stage 3: progression, skipped entirely during a deload
        if readiness >= self.config.load_progression_min_readiness:
            workout = self._apply_load_progression(workout, history, adjustments)
        else:
            logger.debug(
                "Load progression skipped",
                readiness=readiness,
                min_readiness=self.config.load_progression_min_readiness,
            )

        result = DailyWorkoutResult(
            readiness_score=readiness,
            workout=workout,
            explanations=[adjustment.explanation for adjustment in adjustments],
            adjustments=adjustments,
        )

        logger.info(
            "Daily workout decision",
            user_id=user.id,
            workout_id=planned_workout.id,
            readiness=readiness,
            pain_flags=len(feedback.pain_flags),
            history_records=len(history),
            adjustments=[adjustment.kind.value for adjustment in adjustments],
        )
        return result

    def _apply_injury_protocol(
        self,
        workout: Workout,
        feedback: Feedback,
        adjustments: list[AppliedAdjustment],
    ) -> Workout:
        exercises = workout.exercises
        for pain_flag in feedback.pain_flags:
            exercises, substitutions = apply_pain_flag(exercises, pain_flag, self.config)
            for substitution in substitutions:
                explanation = explain(
                    AdjustmentType.INJURY_SUBSTITUTION,
                    {
                        "pain_location": pain_flag,
                        "original_exercise": substitution.original.name,
                        "new_exercise": substitution.substitute.name,
                    },
                )
                adjustments.append(
                    AppliedAdjustment(
                        kind=AdjustmentType.INJURY_SUBSTITUTION,
                        exercise_id=substitution.substitute.id,
                        explanation=explanation,
                    )
                )
        return workout.model_copy(update={"exercises": exercises})

    def _apply_volume(
        self,
        workout: Workout,
        readiness: int,
        feedback: Feedback,
        adjustments: list[AppliedAdjustment],
    ) -> Workout:
        volume = adjust_volume(workout, readiness, config=self.config)
        if volume.adjustment_type == AdjustmentType.MAINTENANCE:
            return workout

        explanation = explain(
            volume.adjustment_type,
            {
                "sleep_hours": feedback.sleep_quality,
                "sets_removed": _SETS_REMOVED[volume.adjustment_type],
            },
        )
        adjustments.append(AppliedAdjustment(kind=volume.adjustment_type, explanation=explanation))
        return volume.workout

    def _apply_load_progression(
        self,
        workout: Workout,
        history: list[ExercisePerformance],
        adjustments: list[AppliedAdjustment],
    ) -> Workout:
        exercises: list[Exercise] = []
        for exercise in workout.exercises:
            performance = _find_performance(exercise.id, history)
            if performance is None:
                exercises.append(exercise)
                continue

            # Missed reps compare against the current slot, after substitution and volume changes
            adjustment = adjust_load(
                performance.weight,
                performance.rpe,
                exercise.rpe_target,
                performance.completed_reps < exercise.reps,
                config=self.config,
            )

            if adjustment.adjustment_type == AdjustmentType.MAINTENANCE:
                # Last lifted weight wins over the planned weight
                exercises.append(exercise.model_copy(update={"weight": performance.weight}))
                continue

            new_weight = round_to_increment(adjustment.new_weight, self.config.load_rounding_increment)
            explanation = explain(
                adjustment.adjustment_type,
                {
                    "last_rpe": performance.rpe,
                    "increase_amount": f"{new_weight - performance.weight:.1f}",
                },
            )
            adjustments.append(
                AppliedAdjustment(
                    kind=adjustment.adjustment_type,
                    exercise_id=exercise.id,
                    explanation=explanation,
                )
            )
            exercises.append(exercise.model_copy(update={"weight": new_weight}))

        return workout.model_copy(update={"exercises": exercises})


def generate_daily_workout(
    user: User,
    planned_workout: Workout,
    feedback: Feedback,
    history: list[ExercisePerformance] | None = None,
) -> DailyWorkoutResult:
    """Decide today's workout with the default engine configuration."""
    return DecisionOrchestrator().generate_daily_workout(user, planned_workout, feedback, history)
