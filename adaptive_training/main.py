from fastapi import FastAPI

from adaptive_training import __version__
from adaptive_training.api.workout import router as workout_router
from adaptive_training.config.settings import settings
from adaptive_training.core.logger import setup_logger

setup_logger(level=settings.log_level, log_file=settings.log_file)

app = FastAPI(title="Adaptive Training Engine", version=__version__)

app.include_router(workout_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
