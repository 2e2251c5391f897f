"""Runtime configuration for the age_engine package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

Usage::

    from age_engine.config import settings

    print(settings.min_birth_year)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    min_birth_year: int = Field(
        1900,
        alias="MIN_BIRTH_YEAR",
        ge=1,
        description="Earliest birth year the form accepts.",
    )


settings = Settings()
