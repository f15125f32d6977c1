"""
Application configuration management with environment-based settings.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Main application settings."""

    # ============= Application Settings =============
    APP_NAME: str = "E-Skwela AR Admin Mock API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Mock backend for the E-Skwela AR admin dashboard"
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")
    API_V1_PREFIX: str = "/api/v1"

    # ============= Server Settings =============
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    RELOAD: bool = Field(default=False)

    # CORS Settings
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:8000"]

    # ============= Mock Data Settings =============
    MOCK_SEED: Optional[int] = None
    MOCK_USER_COUNT: int = 100
    MOCK_CONTENT_COUNT: int = 50
    MOCK_QUIZ_COUNT: int = 50
    MOCK_ATTEMPT_QUIZ_COUNT: int = 10  # quizzes that get seeded attempts
    MOCK_ATTEMPTS_PER_QUIZ: int = 5
    MOCK_CURRENT_USER_ID: int = 1

    # ============= Latency Simulation =============
    LATENCY_ENABLED: bool = True
    LATENCY_SCALE: float = Field(default=1.0, ge=0.0)

    # ============= Analytics Settings =============
    ANALYTICS_CACHE_MINUTES: int = 5

    # ============= Logging Settings =============
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        return v

    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT.lower() == "production"

    def is_testing(self) -> bool:
        """Check if running in testing."""
        return self.ENVIRONMENT.lower() == "testing"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
