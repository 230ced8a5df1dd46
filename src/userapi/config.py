"""Centralized application settings via pydantic-settings.

Loads configuration from environment variables with the USERAPI_ prefix.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Examples:
        Serve larger pages by default::

            USERAPI_DEFAULT_PER_PAGE=25 uvicorn src.userapi.main:app
    """

    # Pagination
    default_per_page: int = Field(default=10, ge=1)

    # API
    api_prefix: str = "/api/v1"

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "USERAPI_"}


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton.

    Uses lru_cache so the Settings object is created once and reused
    across all FastAPI Depends injections.
    """
    return Settings()
