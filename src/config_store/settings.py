"""Runtime settings for the configuration store and its command-line front end."""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="WARNING", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_format: bool = Field(default=False, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, ge=1, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, ge=0, description="Number of rotated log files to keep")


class ParserConfig(BaseModel):
    """Options controlling how configuration files are read."""

    # Accept key lines that appear before the first [section] header.
    allow_global_keys: bool = Field(default=False, description="Store keys before any header under the empty section")
    # Text encoding used for both load and save.
    encoding: str = Field(default="utf-8", description="File encoding")

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value


class StoreSettings(BaseSettings):
    """Settings loaded from env or an optional TOML file."""

    # Environment keys use CONFIG_STORE_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="CONFIG_STORE_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "StoreSettings":
        data = tomllib.loads(Path(path).read_text())
        return cls.model_validate(data)
