"""Configuration management for dich."""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator

from dich.utils.logger import get_logger

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class StorageConfig(BaseModel):
    """Storage configuration."""

    db_path: str | None = Field(default=None)

    @field_validator("db_path")
    @classmethod
    def expand_home(cls, value: str | None) -> str | None:
        return None if value is None else str(Path(value).expanduser())


class UIConfig(BaseModel):
    """UI configuration."""

    row_date_format: str = Field(default="%d %b, %H:%M")
    detail_date_format: str = Field(default="%d %b %Y, %H:%M")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return value


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Loads the dich configuration file."""

    def __init__(self, config_file: str | Path | None = None):
        if config_file is None:
            self.config_file = Path(user_config_dir("dich")) / "config.json"
        else:
            self.config_file = Path(config_file)

        self._config: Config | None = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file.

        A missing file gives the defaults; so does an unreadable or invalid
        one, with a warning in the log.
        """
        if not self.config_file.exists():
            return Config()

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)
            return Config(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            get_logger().warning(
                "ignoring invalid config file %s: %s", self.config_file, e
            )
            return Config()
