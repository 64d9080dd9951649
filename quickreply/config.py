"""Centralized configuration for the quickreply engine."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Engine configuration from environment variables."""

    # Environment
    APP_ENV: str = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Optional JSON catalog used by main.create_engine()
    CATALOG_PATH: Optional[str] = None

    # Winner resolution between the keyword and corpus paths
    KEYWORD_WIN_THRESHOLD: float = 0.55
    KEYWORD_MARGIN: float = 0.05
    CORPUS_WIN_THRESHOLD: float = 0.62
    KEYWORD_FALLBACK_THRESHOLD: float = 0.62

    # Corpus blend weights
    OVERLAP_WEIGHT: float = 0.65
    FUZZY_WEIGHT: float = 0.30
    LENGTH_WEIGHT: float = 0.05

    # Confidence bands for the composed answer
    HIGH_CONFIDENCE: float = 0.85
    MEDIUM_CONFIDENCE: float = 0.70

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    def validate_thresholds(self) -> None:
        """Validate that every score-like setting lies in [0, 1]."""
        errors: List[str] = []
        for name in (
            "KEYWORD_WIN_THRESHOLD",
            "KEYWORD_MARGIN",
            "CORPUS_WIN_THRESHOLD",
            "KEYWORD_FALLBACK_THRESHOLD",
            "OVERLAP_WEIGHT",
            "FUZZY_WEIGHT",
            "LENGTH_WEIGHT",
            "HIGH_CONFIDENCE",
            "MEDIUM_CONFIDENCE",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                errors.append(f"{name}={value} must be within [0, 1]")
        if self.MEDIUM_CONFIDENCE > self.HIGH_CONFIDENCE:
            errors.append("MEDIUM_CONFIDENCE must not exceed HIGH_CONFIDENCE")
        if errors:
            raise RuntimeError("Invalid matcher configuration: " + "; ".join(errors))

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.APP_ENV.lower() == "dev"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.APP_ENV.lower() == "production"


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    config = Config()
    config.validate_thresholds()
    return config
