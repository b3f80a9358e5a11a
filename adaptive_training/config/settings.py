from loguru import logger
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")
    baseline_readiness: int = Field(
        default=80,
        validation_alias="BASELINE_READINESS",
        description="Readiness score before sleep/soreness/stress modifiers (0-100)",
        ge=0,
        le=100,
    )
    deload_readiness_threshold: int = Field(
        default=40,
        validation_alias="DELOAD_READINESS_THRESHOLD",
        description="Readiness below this value triggers a deload",
    )
    volume_reduction_readiness_threshold: int = Field(
        default=60,
        validation_alias="VOLUME_REDUCTION_READINESS_THRESHOLD",
        description="Readiness below this value removes one set per exercise",
    )
    load_progression_min_readiness: int = Field(
        default=40,
        validation_alias="LOAD_PROGRESSION_MIN_READINESS",
        description="Minimum readiness required to run load progression",
    )
    load_rounding_increment: float = Field(
        default=2.5,
        validation_alias="LOAD_ROUNDING_INCREMENT",
        description="Adjusted weights are rounded to the nearest multiple of this value",
        gt=0,
    )
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=3000, validation_alias="API_PORT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("volume_reduction_readiness_threshold")
    @classmethod
    def validate_threshold_order(cls, value: int, info: ValidationInfo) -> int:
        """Warn when the volume reduction band is empty."""
        deload = info.data.get("deload_readiness_threshold")
        if deload is not None and value < deload:
            logger.warning(
                f"VOLUME_REDUCTION_READINESS_THRESHOLD ({value}) is below DELOAD_READINESS_THRESHOLD ({deload}). "
                "Volume reduction will never trigger."
            )
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
