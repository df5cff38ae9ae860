"""
Application configuration using Pydantic BaseSettings.
Loads environment variables and provides typed configuration.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project metadata
    PROJECT_NAME: str = "Schedule Reconciliation Engine"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://frontend:3000",
    ]

    # Remote data source (availability, leave, holidays)
    DATA_SOURCE_URL: str = "http://localhost:8080/api"
    DATA_SOURCE_TIMEOUT_SECONDS: int = 10
    DATA_SOURCE_MAX_RETRIES: int = 3
    DATA_SOURCE_RETRY_DELAY_SECONDS: float = 0.5

    # Holidays
    DEFAULT_COUNTRY: str = "PL"
    HOLIDAY_SOURCE: str = "remote"  # "remote" or "local"

    # Business rules
    MAX_AVAILABILITY_SLOTS: int = 2

    # Weekly grid layout
    WEEKLY_GRID_HOUR_HEIGHT: int = 48
    WEEKLY_GRID_FORWARD_WEEKS: int = 3

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 60

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
