"""
Centralized configuration for the Material Share client.

All settings are loaded from environment variables with sensible defaults.
Variables are namespaced with the MATERIALSHARE_ prefix
(e.g., MATERIALSHARE_API_BASE_URL).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MATERIALSHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Material Share"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Backend REST API
    api_base_url: str = "http://localhost:8080/"
    http_timeout: float = 15.0  # seconds

    # Postal code (CEP) lookup
    postal_code_lookup_url: str = "https://viacep.com.br/ws/"

    # Local session cache
    session_file: str = ".materialshare/session.json"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
