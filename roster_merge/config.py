"""
Configuration module
====================

Loads runtime settings from environment variables and a ``.env`` file.
"""

import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """
    Application settings, read from the environment.

    Attributes:
        LOG_LEVEL: level of the ``roster_merge`` logger
        OUTPUT_SHEET_NAME: name of the single sheet in the output workbook
        OUTPUT_FILENAME: attachment filename returned by the HTTP service
        HEADER_PHRASES_PATH: optional JSON/YAML file overriding header phrases
        STATIC_DIR: optional directory served at ``/`` by the HTTP service
        API_HOST / API_PORT: bind address of the HTTP service
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    LOG_LEVEL: str = "INFO"
    OUTPUT_SHEET_NAME: str = "Combined"
    OUTPUT_FILENAME: str = "combined_output.xlsx"
    HEADER_PHRASES_PATH: Optional[str] = None
    STATIC_DIR: Optional[str] = None
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v!r}")
        return level

    @field_validator("OUTPUT_SHEET_NAME")
    @classmethod
    def validate_sheet_name(cls, v: str) -> str:
        name = (v or "").strip()
        if not name or len(name) > 31:
            raise ValueError("OUTPUT_SHEET_NAME must be 1-31 characters long")
        return name


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the cached settings, creating them on first use."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None
