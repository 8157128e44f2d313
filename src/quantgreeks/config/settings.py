"""Library settings using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    ENV: Literal["dev", "prod"] = "dev"
    LOG_LEVEL: str = "INFO"

    # Calendar convention for theta and expiry_days -> t conversion
    DAYS_PER_YEAR: float = Field(365.0, gt=0)

    # Pricer defaults
    DEFAULT_RATE: float = 0.0
    DEFAULT_DIVIDEND_YIELD: float = 0.0

    # Implied volatility solver
    IV_LOWER_BOUND: float = Field(0.001, gt=0)
    IV_UPPER_BOUND: float = Field(5.0, gt=0)
    IV_PRECISION: float = Field(1e-6, gt=0)
    IV_MAX_ITERATIONS: int = Field(100, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
