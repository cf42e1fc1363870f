"""Suite configuration loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Runtime configuration used across the project."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RESTFUL_", extra="ignore")
    BASE_URL: str = "https://api.restful-api.dev"
    TARGET: Literal["stub", "live"] = "stub"  # stub roda offline contra o app em memória
    REQUEST_TIMEOUT_SECONDS: float = Field(default=60.0, gt=0)
    RETRY_MAX_RETRIES: int = Field(default=2, ge=0)
    RETRY_DELAY_MS: int = Field(default=500, ge=0)
    MISSING_OBJECT_ID: str = "999"
    CATALOGUE_OBJECT_ID: str = "7"
    RUNTIME_ENV: Literal["dev", "ci", "test"] = "dev"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "restful_it.log"

settings = Settings()
