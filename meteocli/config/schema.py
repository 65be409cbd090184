"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from meteocli import __version__

METEOSWISS_BASE_URL = "https://app-prod-ws.meteoswiss-app.ch/v1"
DEFAULT_USER_AGENT = f"meteocli/{__version__}"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = METEOSWISS_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=15.0, gt=0.0)


class RainConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_within_minutes: int = Field(default=30, ge=1, le=1440)
    high_res_slot_minutes: int = Field(default=10, ge=1)
    low_res_slot_minutes: int = Field(default=60, ge=1)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_days: int = Field(default=7, ge=1, le=10)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return v


class CliConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    rain: RainConfig = RainConfig()
    forecast: ForecastConfig = ForecastConfig()
    logging: LoggingConfig = LoggingConfig()
