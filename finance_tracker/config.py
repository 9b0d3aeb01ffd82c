"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finance-tracker"
    log_level: str = "INFO"

    # Report defaults
    daily_series_days: int = 30
    moving_average_window: int = 7


settings = Settings()
