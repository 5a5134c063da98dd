"""Application configuration using pydantic-settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # MongoDB
    mongodb_uri: str = ""
    mongodb_database: str = "filmshelf"
    mongodb_timeout_ms: int = 5000

    # TMDb API
    tmdb_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("tmdb_api_key", "api_key"),
    )
    tmdb_timeout: float = 10.0
    tmdb_language: str = "en-US"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("api_port", "port"),
    )
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
