"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    user_directory: Literal["random", "static"] = "random"
    user_not_found_ratio: float = Field(default=0.3, ge=0.0, le=1.0)
    known_user_ids: list[str] = Field(default_factory=list)
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"

    model_config = SettingsConfigDict(env_prefix="PROJECT_API_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
