"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from passhash.domain.cost import DEFAULT_COST, MAX_COST, MIN_COST

CostFactor = Annotated[int, Field(ge=MIN_COST, le=MAX_COST)]


class Settings(BaseSettings):
    """Environment-driven hashing settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    cost: CostFactor = Field(default=DEFAULT_COST, validation_alias="PASSHASH_COST")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
