"""Engine configuration - constants, not hidden module state.

Every threshold the rules read lives on ``EngineConfig``. An orchestrator holds
one instance, so differently tuned engines can coexist in one process.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from adaptive_training.engine.types import ExerciseCategory

if TYPE_CHECKING:
    from adaptive_training.config.settings import Settings


@dataclass(frozen=True)
class SubstituteTemplate:
    """Safe replacement prescribed for a risky exercise.

    Attributes:
        name: Name of the substitute exercise
        sets: Prescribed sets
        reps: Prescribed reps
        weight_factor: Fraction of the original weight carried over (0.0 = bodyweight)
        category: Exercise category of the substitute
        muscle_groups: Target muscles of the substitute
    """

    name: str
    sets: int
    reps: int
    weight_factor: float = 0.0
    category: ExerciseCategory = ExerciseCategory.COMPOUND
    muscle_groups: tuple[str, ...] = ()


@dataclass(frozen=True)
class InjuryRule:
    """Body part -> exercises that load it -> what to do instead.

    Attributes:
        body_part: Key searched for inside a reported pain flag
        risky_exercises: Name fragments searched for inside exercise names
        substitute: Replacement for any matching exercise
    """

    body_part: str
    risky_exercises: tuple[str, ...]
    substitute: SubstituteTemplate


DEFAULT_INJURY_RULES: tuple[InjuryRule, ...] = (
    InjuryRule(
        body_part="knee",
        risky_exercises=("Squat", "Lunge", "Leg Press"),
        substitute=SubstituteTemplate(
            name="Glute Bridge",
            sets=3,
            reps=15,
            category=ExerciseCategory.ISOLATION,
            muscle_groups=("glutes", "hamstrings"),
        ),
    ),
    InjuryRule(
        body_part="shoulder",
        risky_exercises=("Bench Press", "Overhead Press", "Dip"),
        substitute=SubstituteTemplate(
            name="Push-up (Neutral Grip)",
            sets=3,
            reps=12,
            muscle_groups=("chest", "triceps"),
        ),
    ),
    InjuryRule(
        body_part="back",
        risky_exercises=("Deadlift", "Row", "Good Morning"),
        substitute=SubstituteTemplate(
            name="Chest Supported Row",
            sets=3,
            reps=10,
            weight_factor=0.7,
            muscle_groups=("lats", "upper_back"),
        ),
    ),
)


@dataclass(frozen=True)
class EngineConfig:
    """Fixed rule parameters for one engine instance."""

    # ---- Readiness ----
    baseline_readiness: int = 80
    poor_sleep_max: float = 4  # <= : -20
    fair_sleep_max: float = 6  # <= : -10
    good_sleep_min: float = 8  # >= : +5
    poor_sleep_penalty: int = 20
    fair_sleep_penalty: int = 10
    good_sleep_bonus: int = 5
    high_soreness_min: int = 4
    high_soreness_penalty: int = 10
    extreme_soreness: int = 5
    extreme_soreness_penalty: int = 20
    high_stress_penalty: int = 15

    # ---- Volume ----
    deload_readiness_threshold: int = 40
    volume_reduction_readiness_threshold: int = 60
    deload_set_factor: float = 0.5

    # ---- Load ----
    load_progression_min_readiness: int = 40
    load_increase_factor: float = 1.025
    load_decrease_factor: float = 0.95
    rpe_ceiling: float = 9.5
    rpe_increase_margin: float = 1.0
    load_rounding_increment: float = 2.5

    # ---- Injury ----
    injury_rules: tuple[InjuryRule, ...] = DEFAULT_INJURY_RULES
    substitute_id_suffix: str = "_sub"
    rest_placeholder_id: str = "rest"

    @classmethod
    def from_settings(cls, settings: "Settings") -> "EngineConfig":
        """Build engine configuration from environment settings."""
        return cls(
            baseline_readiness=settings.baseline_readiness,
            deload_readiness_threshold=settings.deload_readiness_threshold,
            volume_reduction_readiness_threshold=settings.volume_reduction_readiness_threshold,
            load_progression_min_readiness=settings.load_progression_min_readiness,
            load_rounding_increment=settings.load_rounding_increment,
        )


DEFAULT_CONFIG = EngineConfig()
