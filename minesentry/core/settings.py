"""
Core settings and environment variables for MineSentry.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "MineSentry API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server (used by `python -m minesentry`)
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # CORS - Frontend URLs allowed to access this API (comma-separated)
    CORS_ORIGINS: str = "http://localhost:5000,http://localhost:5173,http://127.0.0.1:5173"

    # Prediction placeholder
    # - PREDICTION_PROVIDER: only "mock" exists; there is no real model
    # - PREDICTION_DELAY_SECONDS: artificial latency so the UI loading state is visible
    PREDICTION_PROVIDER: str = "mock"
    PREDICTION_DELAY_SECONDS: float = 1.0

    # Insert one demo report on startup so the dashboard is never empty
    SEED_DEMO_DATA: bool = False

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
