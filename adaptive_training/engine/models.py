"""Record types consumed and produced by the decision engine.

All records are frozen pydantic models. Python code uses snake_case field
names; the JSON wire form uses camelCase aliases and both are accepted on
input. An adjusted exercise or workout is always a new instance, the planned
records are never modified.
"""

import datetime
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from adaptive_training.engine.types import AdjustmentType, ExerciseCategory, StressLevel


class EngineModel(BaseModel):
    """Base for engine records: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class User(EngineModel):
    """Athlete the decision is made for.

    Only ``id`` and ``name`` are read by the rules; training maxes and injury
    history are accepted and reserved.
    """

    id: str
    name: str
    training_maxes: dict[str, float] = Field(
        default_factory=dict,
        description="Exercise id -> one-rep max",
    )
    injury_history: list[str] = Field(default_factory=list)


class Exercise(EngineModel):
    """One exercise slot of a workout.

    Sets and reps of zero are reserved for the rest placeholder produced by
    the injury protocol; planned exercises are checked for sets/reps >= 1 by
    the orchestrator.
    """

    id: str
    name: str
    category: ExerciseCategory = ExerciseCategory.COMPOUND
    muscle_groups: list[str] = Field(default_factory=list)
    weight: float = Field(default=0.0, ge=0)
    sets: int = Field(ge=0)
    reps: int = Field(ge=0)
    rpe_target: float = Field(default=8.0, ge=1, le=10)


class Workout(EngineModel):
    id: str
    user_id: str
    name: str
    exercises: list[Exercise] = Field(default_factory=list)
    date: datetime.date = Field(default_factory=datetime.date.today)


class Feedback(EngineModel):
    """Daily subjective recovery feedback.

    Attributes:
        sleep_quality: Sleep rating (1-10, read against the readiness sleep buckets)
        soreness: Muscle soreness (1: none, 5: extreme)
        stress_level: Low, Medium or High
        pain_flags: Body parts reporting pain, processed in this order
    """

    sleep_quality: float = Field(ge=1, le=10)
    soreness: int = Field(ge=1, le=5)
    stress_level: StressLevel
    pain_flags: list[str] = Field(default_factory=list)


class ExercisePerformance(EngineModel):
    """Result of the previous session for one exercise (matched by id)."""

    exercise_id: str
    weight: float = Field(ge=0)
    completed_reps: int = Field(ge=0, description="Average reps completed per set")
    completed_sets: int = Field(ge=0)
    rpe: float = Field(ge=1, le=10)


class AppliedAdjustment(EngineModel):
    """Structured form of one triggered rule, aligned with its explanation."""

    kind: AdjustmentType
    exercise_id: str | None = Field(
        default=None,
        description="Affected exercise slot, null for workout-wide rules",
    )
    explanation: str


class DailyWorkoutResult(EngineModel):
    readiness_score: int = Field(ge=0, le=100)
    workout: Workout
    explanations: list[str] = Field(default_factory=list)
    adjustments: list[AppliedAdjustment] = Field(default_factory=list)


# ---- Component results ----


@dataclass(frozen=True)
class LoadAdjustment:
    """Outcome of a single load autoregulation decision.

    Attributes:
        new_weight: Scaled weight before rounding to the plate increment
        adjustment_type: LOAD_INCREASE, LOAD_DECREASE or MAINTENANCE
    """

    new_weight: float
    adjustment_type: AdjustmentType


@dataclass(frozen=True)
class VolumeAdjustment:
    """Outcome of a volume autoregulation decision.

    Attributes:
        workout: New workout instance with adjusted set counts
        adjustment_type: DELOAD, VOLUME_REDUCTION or MAINTENANCE
    """

    workout: Workout
    adjustment_type: AdjustmentType


@dataclass(frozen=True)
class Substitution:
    """One exercise slot replaced by the injury protocol."""

    slot_index: int
    pain_flag: str
    original: Exercise
    substitute: Exercise
