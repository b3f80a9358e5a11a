"""Daily readiness score from subjective feedback.

Readiness starts at the configured baseline and is moved by three independent
signals: sleep, soreness and stress. The result is clamped to 0-100.
"""

from loguru import logger

from adaptive_training.engine.config import DEFAULT_CONFIG, EngineConfig
from adaptive_training.engine.models import Feedback
from adaptive_training.engine.types import StressLevel


def _sleep_modifier(sleep_quality: float, config: EngineConfig) -> int:
    # Ordered buckets, exactly one applies (a 7 applies none)
    if sleep_quality <= config.poor_sleep_max:
        return -config.poor_sleep_penalty
    if sleep_quality <= config.fair_sleep_max:
        return -config.fair_sleep_penalty
    if sleep_quality >= config.good_sleep_min:
        return config.good_sleep_bonus
    return 0


def _soreness_modifier(soreness: int, config: EngineConfig) -> int:
    modifier = 0
    if soreness >= config.high_soreness_min:
        modifier -= config.high_soreness_penalty
    if soreness == config.extreme_soreness:
        modifier -= config.extreme_soreness_penalty
    return modifier


def calculate_readiness(feedback: Feedback, config: EngineConfig | None = None) -> int:
    """Calculate the daily readiness score.

    Args:
        feedback: Daily subjective feedback
        config: Engine configuration (defaults to ``DEFAULT_CONFIG``)

    Returns:
        Readiness score in [0, 100]

    Rules (additive):
        - Sleep: <= 4 → -20, else <= 6 → -10, else >= 8 → +5
        - Soreness: >= 4 → -10, == 5 → a further -20
        - Stress: High → -15
    """
    config = config or DEFAULT_CONFIG

    sleep = _sleep_modifier(feedback.sleep_quality, config)
    soreness = _soreness_modifier(feedback.soreness, config)
    stress = -config.high_stress_penalty if feedback.stress_level == StressLevel.HIGH else 0

    raw_score = config.baseline_readiness + sleep + soreness + stress
    score = max(0, min(100, int(raw_score)))

    logger.debug(
        "Readiness calculated",
        baseline=config.baseline_readiness,
        sleep_modifier=sleep,
        soreness_modifier=soreness,
        stress_modifier=stress,
        score=score,
    )
    return score
