"""Configuration settings for Hevy Trainer."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/hevy_trainer/config.py
# .parent.parent.parent = project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hevy API
    hevy_api_key: str = ""
    hevy_api_base_url: str = "https://api.hevyapp.com/v1"

    # HTTP behaviour
    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    cache_ttl_seconds: int = 300  # 5 minutes
    cache_max_size: int = 1000

    # Logging
    log_level: str = "INFO"

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.hevy_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
