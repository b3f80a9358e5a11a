"""Request/response schemas for the workout API."""

from typing import Literal

from pydantic import Field

from adaptive_training.engine.models import (
    DailyWorkoutResult,
    EngineModel,
    ExercisePerformance,
    Feedback,
    User,
    Workout,
)


class GenerateWorkoutRequest(EngineModel):
    """Payload for POST /api/workout/generate (camelCase on the wire)."""

    user: User
    planned_workout: Workout
    feedback: Feedback
    history: list[ExercisePerformance] = Field(
        default_factory=list,
        description="Last-session performance per exercise, matched by exercise id",
    )


class GenerateWorkoutResponse(EngineModel):
    status: Literal["success"] = "success"
    data: DailyWorkoutResult
