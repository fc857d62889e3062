"""Engine configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="MEAL_PLAN_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
