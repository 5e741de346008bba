"""
Application configuration.

Settings are read from EXPRCHECK_* environment variables or a .env file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """exprcheck settings"""

    model_config = SettingsConfigDict(
        env_prefix="EXPRCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["text", "json"] = "text"
    LOG_FILE: Optional[str] = None

    # Validation
    CHECK_END: bool = False  # diagnose expressions ending on an operator or parenthesis

    # Output
    OUTPUT_FORMAT: Literal["text", "json", "yaml"] = "text"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
