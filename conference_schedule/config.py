"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All deploy-specific values come from environment variables or .env
    - get_settings() is cached (lru_cache): one instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with docker-compose
    - Default conference dates only seed the settings row; the admin API owns them after that
"""

from datetime import date
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://conference:conference@db:5432/conference"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Conference
    conference_name: str = "CRIS Con 2025"
    default_conference_start: date = date(2025, 7, 17)
    default_conference_end: date = date(2025, 7, 22)
    # IANA zone for day matching; empty = server local time
    calendar_timezone: str = ""

    # Attachments
    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
