"""EcoTrack application settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application-wide settings loaded from environment variables / .env file.

    Scoring defaults live here so a deployment can tune the critical caps
    without touching code. Per-request options still win over these.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Scoring defaults ---
    CRITICAL_CAP_NO: float = Field(
        default=0.40,
        ge=0.0,
        le=1.0,
        description="Pillar ceiling when a critical question is answered 'No'.",
    )
    CRITICAL_CAP_UNKNOWN: float = Field(
        default=0.60,
        ge=0.0,
        le=1.0,
        description="Pillar ceiling when a critical question is left unanswered.",
    )
    CRITICAL_ALERT_THRESHOLD: float = Field(
        default=0.20,
        ge=0.0,
        le=1.0,
        description="Normalized pillar score at or below which a critical alert fires.",
    )

    # --- Assessments ---
    ASSESSMENT_COOLDOWN_DAYS: int = Field(
        default=180,
        ge=0,
        description="Minimum days between two completed assessments.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == Environment.PROD


def get_settings() -> Settings:
    """Factory function for dependency injection via FastAPI Depends."""
    return Settings()
