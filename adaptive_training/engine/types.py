"""Closed vocabularies used by the decision engine."""

from enum import StrEnum


class AdjustmentType(StrEnum):
    """Kinds of adjustment a rule can produce (also the explanation keys)."""

    LOAD_INCREASE = "LOAD_INCREASE"
    LOAD_DECREASE = "LOAD_DECREASE"
    VOLUME_REDUCTION = "VOLUME_REDUCTION"
    DELOAD = "DELOAD"
    INJURY_SUBSTITUTION = "INJURY_SUBSTITUTION"
    MAINTENANCE = "MAINTENANCE"


class StressLevel(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ExerciseCategory(StrEnum):
    COMPOUND = "compound"
    ISOLATION = "isolation"
