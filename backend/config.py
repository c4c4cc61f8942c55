"""Application configuration using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = "sqlite:///./finance.db"

    # Bearer token signing
    JWT_SECRET: str = "dev-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_HOURS: int = 24

    # Market data (Yahoo Finance chart endpoint)
    MARKET_DATA_BASE_URL: str = "https://query1.finance.yahoo.com/v8/finance/chart"
    MARKET_DATA_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    MARKET_DATA_TIMEOUT_SECONDS: float = 5.0
    PRICE_LOOKUP_MAX_WORKERS: int = 8

    # Dashboard summary
    RECENT_ACTIVITY_HOURS: int = 24
    RECENT_TRANSACTIONS_LIMIT: int = 5
    INCLUDE_CLOSED_INVESTMENTS: bool = True

    # Frontend origins allowed by CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # App settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize LOG_LEVEL to an uppercase Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {valid}, got {v!r}")
        return v.upper()

    @field_validator("MARKET_DATA_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Price lookups must always be bounded."""
        if v <= 0:
            raise ValueError("MARKET_DATA_TIMEOUT_SECONDS must be positive")
        return v


settings = Settings()
