"""
Process settings for snowman.

Uses Pydantic Settings to read environment variables (and an optional `.env`
file) that control where the configuration file lives and how logging is set
up. Connection values themselves live in the configuration file.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from snowman.domain.config import DEFAULT_CONFIG_FILENAME


class Settings(BaseSettings):
    # Configuration file
    config_path: Path = Field(Path(DEFAULT_CONFIG_FILENAME), alias="SNOWMAN_CONFIG")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
