"""Configuration loading and validation."""

from __future__ import annotations

import codecs
import os
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from classfinder.errors import ConfigError, ConfigNotFoundError

__all__ = [
    "Config",
    "FinderSettings",
    "InputSettings",
    "LoggingSettings",
    "SearchSettings",
    "CONFIG_ENV_VAR",
]

CONFIG_ENV_VAR = "CLASSFINDER_CONFIG"


class InputSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value


class SearchSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    workers: int = Field(default=1, ge=1)
    min_parallel: int = Field(default=10000, ge=1)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class FinderSettings(BaseModel):
    """Validated view of the whole configuration document."""

    model_config = ConfigDict(extra="forbid")

    input: InputSettings = Field(default_factory=InputSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class Config:
    """Configuration accessor with dot-path key support.

    Values not present in the underlying data fall back to the validated
    defaults, so ``Config().get("search.workers")`` returns 1.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        try:
            self._settings = FinderSettings.model_validate(data or {})
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}", cause=e) from e

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file cannot be read, the YAML is invalid, or
                it fails validation.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e
        except OSError as e:
            raise ConfigError(f"Cannot read {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config must be a mapping, got {type(data).__name__}"
            )
        return cls(data)

    @classmethod
    def from_env(cls) -> Config:
        """Load from the file named by CLASSFINDER_CONFIG, or use defaults."""
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return cls()
        return cls.load(path)

    @property
    def settings(self) -> FinderSettings:
        return self._settings

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        current: Any = self._settings.model_dump()
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
