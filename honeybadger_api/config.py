"""Configuration management using Pydantic Settings."""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings from HONEYBADGER_* environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HONEYBADGER_",
    )

    # Honeybadger API
    api_url: str = Field(
        default="https://app.honeybadger.io",
        description="Honeybadger host URL (the /v2 prefix is added by the client)",
    )
    api_token: str = Field(
        default="",
        description="Honeybadger personal auth token",
    )
    api_timeout: float = Field(
        default=30,
        description="Honeybadger API timeout in seconds",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format_json: bool = Field(
        default=True,
        description="Use JSON logging format (False for human-readable logs in development)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value
