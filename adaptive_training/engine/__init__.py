"""Decision engine: readiness, autoregulation, injury safety, rationale.

Pure in-memory computation. Takes fully formed records, returns a fully
formed decision; no I/O.
"""

from .config import DEFAULT_CONFIG, EngineConfig, InjuryRule, SubstituteTemplate
from .errors import AdaptiveTrainingError, InvalidInputError
from .explanations import explain
from .injury import apply_pain_flag, get_safe_substitution, is_exercise_risky
from .load import adjust_load, round_to_increment
from .models import (
    AppliedAdjustment,
    DailyWorkoutResult,
    Exercise,
    ExercisePerformance,
    Feedback,
    User,
    Workout,
)
from .orchestrator import DecisionOrchestrator, generate_daily_workout
from .readiness import calculate_readiness
from .types import AdjustmentType, ExerciseCategory, StressLevel
from .volume import adjust_volume

__all__ = [
    "DEFAULT_CONFIG",
    "AdaptiveTrainingError",
    "AdjustmentType",
    "AppliedAdjustment",
    "DailyWorkoutResult",
    "DecisionOrchestrator",
    "EngineConfig",
    "Exercise",
    "ExerciseCategory",
    "ExercisePerformance",
    "Feedback",
    "InjuryRule",
    "InvalidInputError",
    "StressLevel",
    "SubstituteTemplate",
    "User",
    "Workout",
    "adjust_load",
    "adjust_volume",
    "apply_pain_flag",
    "calculate_readiness",
    "explain",
    "generate_daily_workout",
    "get_safe_substitution",
    "is_exercise_risky",
    "round_to_increment",
]
