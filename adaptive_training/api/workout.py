"""Workout adjustment API endpoints.

Thin transport adapter: validates the payload into engine records, runs one
decision and returns it. Nothing is persisted.
"""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from adaptive_training.api.schemas import GenerateWorkoutRequest, GenerateWorkoutResponse
from adaptive_training.config.settings import settings
from adaptive_training.engine.config import EngineConfig
from adaptive_training.engine.errors import InvalidInputError
from adaptive_training.engine.orchestrator import DecisionOrchestrator

router = APIRouter(prefix="/api/workout", tags=["workout"])


@lru_cache(maxsize=1)
def get_orchestrator() -> DecisionOrchestrator:
    """Orchestrator configured from environment settings (built once)."""
    return DecisionOrchestrator(EngineConfig.from_settings(settings))


@router.post("/generate", response_model=GenerateWorkoutResponse)
def generate_workout(
    request: GenerateWorkoutRequest,
    orchestrator: DecisionOrchestrator = Depends(get_orchestrator),
) -> GenerateWorkoutResponse:
    """Generate today's adjusted workout.

    Args:
        request: User, planned workout, feedback and optional history

    Returns:
        Success envelope with readiness score, adjusted workout and explanations

    Raises:
        HTTPException: 400 if the engine rejects the input
    """
    try:
        result = orchestrator.generate_daily_workout(
            request.user,
            request.planned_workout,
            request.feedback,
            request.history,
        )
    except InvalidInputError as e:
        logger.warning(
            "Rejected workout generation request",
            user_id=request.user.id,
            field=e.field,
            error=e.message,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e

    return GenerateWorkoutResponse(data=result)
