"""Configuration management."""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    # Engine
    level: int = Field(default=logging.INFO, description="Minimum level written by the engine")
    format: Literal["json", "console"] = Field(default="json", description="Output renderer")
    add_source: bool = Field(default=False, description="Attach the caller's file, line and function to every record")  # noqa: E501
    colors: bool = Field(default=False, description="Colorize console output")

    # Logfire
    service_name: str = Field(default="log-facade", description="Service name reported to Logfire")
    logfire_enabled: bool = False
    logfire_token: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
    )

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, value: object) -> object:
        """Accept level names (``debug``, ``WARN``...) as well as numbers."""
        if isinstance(value, str) and not value.strip().isdigit():
            name = value.strip().upper()
            if name == "WARN":
                name = "WARNING"
            level = logging.getLevelName(name)
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level: {value!r}")
            return level
        return value
