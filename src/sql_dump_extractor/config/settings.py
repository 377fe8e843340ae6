"""
Configuration management for the SQL dump extractor.

Environment-based configuration using Pydantic BaseSettings. Values are read
from environment variables with the DUMPX_ prefix and, optionally, from a
.env file at the project root (override its location with DUMPX_ENV_FILE).
"""

import codecs
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("DUMPX_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the DUMPX_ prefix. For example,
    DUMPX_DUMP_ENCODING=latin-1 overrides dump_encoding.

    LOG_LEVEL is read without prefix so it can be shared with other tools.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    # Dump reading
    dump_encoding: str = Field(
        default="utf-8", description="Text encoding used to read dump files"
    )
    dump_encoding_errors: str = Field(
        default="replace",
        description="Codec error handler for undecodable bytes in dump files",
    )

    # Export
    export_dir: str = Field(
        default="output", description="Default directory for extracted table files"
    )
    export_format: Literal["json", "csv"] = Field(
        default="json", description="Default export format for extracted rows"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("dump_encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown dump encoding: {value}") from e
        return value

    @field_validator("dump_encoding_errors")
    @classmethod
    def _validate_error_handler(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            raise ValueError(f"Unknown codec error handler: {value}") from e
        return value

    model_config = SettingsConfigDict(
        env_prefix="DUMPX_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused for the lifetime of the process.
    Tests that change environment variables must call
    ``get_settings.cache_clear()`` first.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
