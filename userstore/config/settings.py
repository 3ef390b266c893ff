"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings loaded from environment variables."""

    database_path: Optional[str] = Field(default=None)
    app_debug: bool = Field(default=False)

    @field_validator("database_path")
    @classmethod
    def normalize_database_path(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank paths as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    model_config = SettingsConfigDict(
        env_prefix="USERSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
