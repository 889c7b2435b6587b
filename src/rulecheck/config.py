"""Configuration management for rulecheck using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .messages import update_messages
from .rules.parser import NAME_SEPARATOR, PARAM_SEPARATOR, RULE_SEPARATOR
from .validation.record import DEFAULT_TAG, set_default_tag

CONFIG_FILE_NAME = ".rulecheck.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class RecordConfig(BaseModel):
    """Record validation configuration section."""
    default_tag: str = Field(alias="defaultTag", default=DEFAULT_TAG)

    @field_validator("default_tag")
    @classmethod
    def validate_default_tag(cls, v):
        if not v:
            raise ValueError("default_tag must not be empty")
        for separator in (RULE_SEPARATOR, NAME_SEPARATOR, PARAM_SEPARATOR):
            if separator in v:
                raise ValueError(f"default_tag must not contain '{separator}', got: {v}")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class RulecheckConfig(BaseModel):
    """Complete rulecheck configuration model."""
    record: RecordConfig = Field(default_factory=RecordConfig)
    messages: dict[str, str] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> RulecheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .rulecheck.json

    Returns:
        RulecheckConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return RulecheckConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except (OSError, TypeError, ValidationError) as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .rulecheck.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> RulecheckConfig:
    return RulecheckConfig()


def apply_config(config: RulecheckConfig) -> None:
    """Push configuration into the process-wide tables.

    Updates message templates, the default record tag and the level of
    the ``rulecheck`` logger.
    """
    if config.messages:
        update_messages(config.messages)
    set_default_tag(config.record.default_tag)
    logging.getLogger("rulecheck").setLevel(LOG_LEVELS[config.logging.level])
