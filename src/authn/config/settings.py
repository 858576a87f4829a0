"""Configuration Settings for authn

Manages environment variables and application configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from authn.domain.models.provider_type import ProviderType


class Settings(BaseSettings):
    """Application settings"""

    # Service info
    service_name: str = "authn"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Authentication provider (AUTH_PROVIDER), normalized on load
    auth_provider: ProviderType = ProviderType("default")

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # text or json

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance

    Returns:
        Settings instance
    """
    return Settings()
