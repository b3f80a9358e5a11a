"""Injury substitution protocol.

Safety layer evaluated before any recovery or progression rule. A reported
pain flag is matched against the body parts of the configured injury rules;
exercises whose names contain one of that body part's risky fragments are
replaced slot-for-slot by the rule's substitute.

Matching is on free text, not on an exercise taxonomy, so it has known false
positives ("Upright Row" is treated as a back risk) and false negatives.

Case handling differs between the two steps: the risk check lowercases the
pain flag, the substitute lookup does not. A flag such as ``Left_Knee`` is
therefore risky for squats but resolves to the rest placeholder.
"""

from loguru import logger

from adaptive_training.engine.config import DEFAULT_CONFIG, EngineConfig, InjuryRule
from adaptive_training.engine.models import Exercise, Substitution
from adaptive_training.engine.types import ExerciseCategory

_WEIGHT_PRECISION = 4


def is_exercise_risky(exercise: Exercise, pain_flag: str, rules: tuple[InjuryRule, ...]) -> bool:
    """Check whether an exercise loads the body part named in a pain flag.

    Args:
        exercise: Exercise to check
        pain_flag: Reported pain location (e.g. "left_knee")
        rules: Injury rules table

    Returns:
        True if any rule matching the flag lists a fragment of the exercise name
    """
    flag = pain_flag.lower()
    for rule in rules:
        if rule.body_part in flag and any(fragment in exercise.name for fragment in rule.risky_exercises):
            return True
    return False


def _rest_placeholder(pain_flag: str, config: EngineConfig) -> Exercise:
    return Exercise(
        id=config.rest_placeholder_id,
        name=f"Rest ({pain_flag} pain)",
        category=ExerciseCategory.ISOLATION,
        weight=0.0,
        sets=0,
        reps=0,
    )


def get_safe_substitution(
    exercise: Exercise,
    pain_flag: str,
    config: EngineConfig | None = None,
) -> Exercise:
    """Build the substitute for a risky exercise.

    The first rule (table order) whose body part appears in the pain flag
    supplies the substitute. It keeps a derived id so history lookups keyed
    on the original id skip it. No matching rule gives a zero-volume rest
    placeholder naming the affected area.

    Args:
        exercise: Exercise being replaced
        pain_flag: Reported pain location
        config: Engine configuration (defaults to ``DEFAULT_CONFIG``)

    Returns:
        New Exercise for the slot
    """
    config = config or DEFAULT_CONFIG

    for rule in config.injury_rules:
        if rule.body_part not in pain_flag:
            continue
        template = rule.substitute
        return Exercise(
            id=f"{exercise.id}{config.substitute_id_suffix}",
            name=template.name,
            category=template.category,
            muscle_groups=list(template.muscle_groups),
            weight=round(exercise.weight * template.weight_factor, _WEIGHT_PRECISION),
            sets=template.sets,
            reps=template.reps,
        )

    return _rest_placeholder(pain_flag, config)


def apply_pain_flag(
    exercises: list[Exercise],
    pain_flag: str,
    config: EngineConfig | None = None,
) -> tuple[list[Exercise], list[Substitution]]:
    """Replace every risky exercise for one pain flag.

    Slots are replaced in place in the returned list, never removed, so the
    workout keeps its length and order. Feeding the result back in for the
    next flag gives last-write-wins when two flags hit the same slot.

    Args:
        exercises: Current exercise slots
        pain_flag: Reported pain location
        config: Engine configuration (defaults to ``DEFAULT_CONFIG``)

    Returns:
        Tuple of (new exercise list, substitutions performed in slot order)
    """
    config = config or DEFAULT_CONFIG

    adjusted = list(exercises)
    substitutions: list[Substitution] = []
    for index, exercise in enumerate(adjusted):
        if not is_exercise_risky(exercise, pain_flag, config.injury_rules):
            continue
        substitute = get_safe_substitution(exercise, pain_flag, config)
        adjusted[index] = substitute
        substitutions.append(
            Substitution(slot_index=index, pain_flag=pain_flag, original=exercise, substitute=substitute)
        )
        logger.info(
            "Injury substitution",
            pain_flag=pain_flag,
            slot=index,
            original=exercise.name,
            substitute=substitute.name,
        )

    return adjusted, substitutions
