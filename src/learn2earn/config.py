"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with L2E_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="L2E_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    data_file: str = "./db.json"
    cors_origins: list[str] = ["*"]
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Rewards ---
    verify_payout: float = 1
    recommendation_limit: int = 3


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
