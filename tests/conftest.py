"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import pytest
from loguru import logger

from adaptive_training.engine.models import Exercise, ExercisePerformance, Feedback, User, Workout
from adaptive_training.engine.types import StressLevel


@pytest.fixture(autouse=True)
def _quiet_logger():
    """Keep engine debug logs out of test output."""
    logger.remove()
    logger.add(lambda _message: None, level="DEBUG")
    yield
    logger.remove()


@pytest.fixture
def user() -> User:
    return User(id="u1", name="Test User")


@pytest.fixture
def planned_workout(user: User) -> Workout:
    """Reference plan: Squat 100kg 3x5, Bench 80kg 3x5, Row 60kg 3x10."""
    return Workout(
        id="w1",
        user_id=user.id,
        name="Full Body A",
        exercises=[
            Exercise(id="sq", name="Barbell Squat", muscle_groups=["quads"], weight=100, sets=3, reps=5),
            Exercise(id="bp", name="Bench Press", muscle_groups=["chest"], weight=80, sets=3, reps=5),
            Exercise(id="row", name="Barbell Row", muscle_groups=["back"], weight=60, sets=3, reps=10),
        ],
    )


@pytest.fixture
def rested_feedback() -> Feedback:
    """Sleep 8, soreness 2, low stress, no pain → readiness 85."""
    return Feedback(sleep_quality=8, soreness=2, stress_level=StressLevel.LOW)


@pytest.fixture
def stressed_feedback() -> Feedback:
    """Sleep 5, soreness 3, high stress, no pain → readiness 55."""
    return Feedback(sleep_quality=5, soreness=3, stress_level=StressLevel.HIGH)


@pytest.fixture
def squat_history() -> list[ExercisePerformance]:
    return [ExercisePerformance(exercise_id="sq", weight=100, completed_reps=5, completed_sets=3, rpe=7)]


@pytest.fixture
def full_history() -> list[ExercisePerformance]:
    return [
        ExercisePerformance(exercise_id="sq", weight=100, completed_reps=5, completed_sets=3, rpe=7),
        ExercisePerformance(exercise_id="bp", weight=80, completed_reps=5, completed_sets=3, rpe=8),
        ExercisePerformance(exercise_id="row", weight=60, completed_reps=10, completed_sets=3, rpe=9),
    ]
