"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - List settings (cors_origins, seed_titles) are read from env as JSON arrays

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Store
    seed_titles: list[str] = ["Buy milk"]
    max_title_length: int = 500

    @field_validator("max_title_length")
    @classmethod
    def check_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_title_length must be at least 1")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    graphql_ide: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
