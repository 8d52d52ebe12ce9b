from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlannerConfig(BaseSettings):
    """Configuration for reaching the path-search engine.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    engine_url: str = Field(default="http://localhost:8080/otp", alias="PLAN_ENGINE_URL")
    engine_api_key: str | None = Field(default=None, alias="PLAN_ENGINE_API_KEY")
    engine_timeout_seconds: float = Field(default=60.0, alias="PLAN_ENGINE_TIMEOUT")


@lru_cache
def get_planner_config() -> PlannerConfig:
    """Get planner configuration (cached singleton).

    Returns:
        PlannerConfig with values from .env file or environment variables.
    """
    return PlannerConfig()
