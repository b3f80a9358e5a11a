"""User-facing rationale for engine adjustments.

Explanation text is cosmetic: rendering must never fail the decision it
describes. Unknown kinds get a generic notice, missing context fields render
as ``?``.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from adaptive_training.engine.types import AdjustmentType

GENERIC_EXPLANATION = "Adjusting your plan based on recent performance."

_MISSING = "?"

EXPLANATION_TEMPLATES: dict[AdjustmentType, str] = {
    AdjustmentType.LOAD_INCREASE: (
        "🚀 **Go Mode**: Last session felt easy (RPE {last_rpe}). "
        "Adding {increase_amount}kg to keep you progressing. Aim for about RPE 8 today."
    ),
    AdjustmentType.LOAD_DECREASE: (
        "📉 **Reset**: Last session was a grind (RPE {last_rpe}) or reps were missed. "
        "Dropping the weight by about 5% so you can own every rep with clean technique."
    ),
    AdjustmentType.VOLUME_REDUCTION: (
        "🔋 **Energy Saver**: Sleep ({sleep_hours}) and stress signals say recovery is expensive today. "
        "Cutting about {sets_removed} of your sets so you still train without digging a hole."
    ),
    AdjustmentType.DELOAD: (
        "🛑 **Deload**: Your recovery markers are low. Volume is cut roughly in half today "
        "and load progression is paused so your body can rebound."
    ),
    AdjustmentType.INJURY_SUBSTITUTION: (
        "🩹 **Injury Prevention**: You flagged {pain_location} discomfort. "
        "{original_exercise} is swapped for {new_exercise} today to keep training without loading the joint. "
        "If pain persists beyond 24 hours, rest and get it checked."
    ),
    AdjustmentType.MAINTENANCE: (
        "✅ **Steady State**: Sticking to the plan. Consistency wins, focus on quality reps."
    ),
}


class _TemplateContext(dict):
    """Context mapping that renders absent fields instead of raising."""

    def __missing__(self, key: str) -> str:
        return _MISSING


def _format_value(value: Any) -> Any:
    # 7.0 -> "7", 9.5 -> "9.5"
    if isinstance(value, float):
        return f"{value:g}"
    return value


def _resolve_kind(kind: AdjustmentType | str) -> AdjustmentType | None:
    if isinstance(kind, AdjustmentType):
        return kind
    try:
        return AdjustmentType(kind)
    except ValueError:
        return None


def explain(kind: AdjustmentType | str, context: Mapping[str, Any] | None = None) -> str:
    """Render the rationale for one adjustment.

    Args:
        kind: Adjustment kind (unrecognized values are allowed)
        context: Values referenced by the kind's template

    Returns:
        Explanation text; the generic notice for unknown kinds or unusable context
    """
    adjustment_type = _resolve_kind(kind)
    if adjustment_type is None:
        logger.debug(f"No explanation template for adjustment kind {kind!r}, using generic text")
        return GENERIC_EXPLANATION

    template = EXPLANATION_TEMPLATES[adjustment_type]
    try:
        values = _TemplateContext({str(key): _format_value(value) for key, value in (context or {}).items()})
        return template.format_map(values)
    except Exception as e:
        logger.warning(
            "Explanation rendering failed, using generic text",
            kind=adjustment_type,
            error=str(e),
        )
        return GENERIC_EXPLANATION
