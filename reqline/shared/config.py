"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REQLINE_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface to bind the HTTP server to")
    port: int = Field(default=8080, description="Port to bind the HTTP server to", ge=1, le=65535)
    request_timeout: float = Field(default=30.0, description="Outbound request timeout in seconds", ge=1.0)
    log_level: str = Field(default="INFO", description="Logging level")
    access_log_level: str = Field(default="INFO", description="Logging level of the aiohttp access log")
    cors_allow_origin: str = Field(default="*", description="Origin allowed by CORS")


@lru_cache
def get_settings() -> Settings:
    """Get the application settings instance."""
    return Settings()
