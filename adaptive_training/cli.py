"""Developer CLI for the adaptive training engine.

Runs the reference scenarios, evaluates a request payload offline through the
same orchestrator code path as the API, or serves the API locally.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import typer
import uvicorn
from pydantic import ValidationError
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table

from adaptive_training.api.schemas import GenerateWorkoutRequest
from adaptive_training.config.settings import settings
from adaptive_training.core.logger import setup_logger
from adaptive_training.engine.config import EngineConfig
from adaptive_training.engine.errors import InvalidInputError
from adaptive_training.engine.models import (
    DailyWorkoutResult,
    Exercise,
    ExercisePerformance,
    Feedback,
    User,
    Workout,
)
from adaptive_training.engine.orchestrator import DecisionOrchestrator
from adaptive_training.engine.types import StressLevel

console = Console()

app = typer.Typer(
    name="adaptive-training",
    help="Adaptive Training Engine CLI - scenario checks and offline decisions",
    add_completion=False,
)


@dataclass(frozen=True)
class Scenario:
    title: str
    feedback: Feedback
    check: Callable[[DailyWorkoutResult], bool]
    pass_message: str


def _reference_user() -> User:
    return User(id="u1", name="Test User")


def _reference_plan(user: User) -> Workout:
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


def _reference_history() -> list[ExercisePerformance]:
    return [
        ExercisePerformance(exercise_id="sq", weight=100, completed_reps=5, completed_sets=3, rpe=7),
        ExercisePerformance(exercise_id="bp", weight=80, completed_reps=5, completed_sets=3, rpe=8),
        ExercisePerformance(exercise_id="row", weight=60, completed_reps=10, completed_sets=3, rpe=9),
    ]


SCENARIOS: list[Scenario] = [
    Scenario(
        title="Ideal Progression (good sleep, RPE 7)",
        feedback=Feedback(sleep_quality=8, soreness=2, stress_level=StressLevel.LOW),
        check=lambda result: result.readiness_score > 80 and result.workout.exercises[0].weight > 100,
        pass_message="Load increased for Squat.",
    ),
    Scenario(
        title="High Stress (short sleep, high stress)",
        feedback=Feedback(sleep_quality=5, soreness=3, stress_level=StressLevel.HIGH),
        check=lambda result: result.readiness_score < 60 and result.workout.exercises[0].sets < 3,
        pass_message="Volume reduced due to low readiness.",
    ),
    Scenario(
        title="Knee Pain",
        feedback=Feedback(sleep_quality=7, soreness=2, stress_level=StressLevel.LOW, pain_flags=["left_knee"]),
        check=lambda result: any(exercise.name == "Glute Bridge" for exercise in result.workout.exercises),
        pass_message="Squat substituted for Glute Bridge.",
    ),
]


def _print_result(result: DailyWorkoutResult) -> None:
    console.print(f"Readiness: [bold]{result.readiness_score}/100[/bold]")

    if result.explanations:
        console.print("Adjustments:")
        for explanation in result.explanations:
            console.print(f"  - {explanation}", markup=False)
    else:
        console.print("Adjustments: none")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Exercise")
    table.add_column("Weight (kg)", justify="right")
    table.add_column("Sets x Reps", justify="right")
    for exercise in result.workout.exercises:
        table.add_row(exercise.name, f"{exercise.weight:g}", f"{exercise.sets}x{exercise.reps}")
    console.print(table)


@app.command()
def scenarios(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show engine debug logs"),
) -> None:
    """Run the reference scenarios and report PASS/FAIL for each."""
    setup_logger(level="DEBUG" if verbose else "WARNING")
    orchestrator = DecisionOrchestrator(EngineConfig.from_settings(settings))
    user = _reference_user()
    plan = _reference_plan(user)
    history = _reference_history()

    failures = 0
    for scenario in SCENARIOS:
        console.print(Panel(scenario.title, style="cyan"))
        result = orchestrator.generate_daily_workout(user, plan, scenario.feedback, history)
        _print_result(result)
        if scenario.check(result):
            console.print(f"[green]PASS[/green]: {scenario.pass_message}")
        else:
            failures += 1
            console.print(f"[red]FAIL[/red]: {scenario.title}")
        console.print()

    if failures:
        raise typer.Exit(code=1)


@app.command()
def generate(
    payload: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="JSON request payload"),
) -> None:
    """Run one decision for a request payload file and print the result JSON."""
    setup_logger(level=settings.log_level)
    orchestrator = DecisionOrchestrator(EngineConfig.from_settings(settings))

    try:
        request = GenerateWorkoutRequest.model_validate_json(payload.read_text(encoding="utf-8"))
        result = orchestrator.generate_daily_workout(
            request.user,
            request.planned_workout,
            request.feedback,
            request.history,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid payload:[/red] {e.error_count()} validation error(s)")
        console.print(str(e), markup=False)
        raise typer.Exit(code=1) from e
    except InvalidInputError as e:
        console.print(f"[red]Invalid input:[/red] {e.message}")
        raise typer.Exit(code=1) from e

    console.print(JSON(json.dumps(result.model_dump(mode="json", by_alias=True))))


@app.command()
def serve(
    host: str = typer.Option(settings.api_host, help="Bind address"),
    port: int = typer.Option(settings.api_port, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Serve the workout API with uvicorn."""
    uvicorn.run("adaptive_training.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
