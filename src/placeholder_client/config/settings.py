"""
Configuration settings for the placeholder client.

This module handles environment variable loading and configuration management
using Pydantic for validation and type safety.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Placeholder client configuration settings.

    All settings can be overridden via environment variables.
    """

    # JSONPlaceholder API Configuration
    placeholder_api_base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        description="Base URL for the JSONPlaceholder API"
    )
    placeholder_api_timeout: int = Field(
        default=30,
        description="Timeout in seconds for API requests"
    )
    default_content_type: str = Field(
        default="application/json",
        description="Content-Type header sent with request bodies"
    )
    random_user_api_url: str = Field(
        default="https://randomuser.me/api",
        description="Endpoint used by the raw GET walkthrough examples"
    )

    debug_mode: bool = Field(
        default=True,
        description="Enable debug mode"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="text",
        description="Logging format (json or text)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path of a rotating log file"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()
