"""
Configuration Management Module

Configures connection parameters via environment variables or .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "docrepo"
    DEBUG: bool = False

    # MongoDB Config
    # Full connection string, credentials included when required
    MONGODB_URL: str = "mongodb://localhost:27017"
    # Default database used by repositories built from settings
    MONGODB_DATABASE: str = "docrepo"
    # Server selection timeout (ms), bounds how long a call waits for a reachable server
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    # Client application name reported to the server (optional)
    MONGODB_APP_NAME: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
