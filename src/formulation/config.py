"""
Configuration for Formulation.

FormConfig is the setup-time configuration of a single form. Settings
holds process-wide defaults read from the environment or a .env file.
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import ConfigError

ENV_PREFIX = "FORMULATION_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValidateOn(str, Enum):
    """When the field binding triggers validation."""

    CHANGE = "change"
    BLUR = "blur"

    @classmethod
    def parse(cls, value: Union["ValidateOn", str]) -> "ValidateOn":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(v.value for v in cls)
            raise ConfigError(
                f"Unknown validateOn: {value!r}. Available: {available}"
            ) from None


class FormConfig(BaseModel):
    """Setup-time configuration of a form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    validate_on: ValidateOn = ValidateOn.BLUR
    schema_: Dict[str, Any] = Field(default_factory=dict, alias="schema")
    messages: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("validate_on", mode="before")
    @classmethod
    def _parse_validate_on(cls, value: Any) -> Any:
        return ValidateOn.parse(value) if value is not None else ValidateOn.BLUR

    @classmethod
    def coerce(
        cls, config: Union["FormConfig", Mapping[str, Any], None]
    ) -> "FormConfig":
        """Build a FormConfig from a FormConfig, a dict, or None."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        try:
            return cls.model_validate(dict(config))
        except ValidationError as e:
            # ConfigError raised inside a validator arrives wrapped
            raise ConfigError(f"Invalid form config: {e}") from e


class Settings(BaseModel):
    """Process-wide defaults."""

    validate_on: ValidateOn = ValidateOn.BLUR
    log_level: str = "WARNING"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load settings from an optional .env file and the environment.

    Environment variables override values from the file:
    - FORMULATION_VALIDATE_ON: "change" or "blur"
    - FORMULATION_LOG_LEVEL: logging level name

    Args:
        env_file: Path to a .env file (ignored if it does not exist)

    Returns:
        Settings
    """
    values: Dict[str, Optional[str]] = {}
    if env_file is not None and Path(env_file).exists():
        values.update(dotenv_values(env_file))
    values.update({k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)})

    settings = Settings()
    if validate_on := values.get(f"{ENV_PREFIX}VALIDATE_ON"):
        settings.validate_on = ValidateOn.parse(validate_on)
    if log_level := values.get(f"{ENV_PREFIX}LOG_LEVEL"):
        log_level = log_level.strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level: {log_level}. Available: {', '.join(_LOG_LEVELS)}"
            )
        settings.log_level = log_level
    return settings


def load_form_config(path: Path, settings: Optional[Settings] = None) -> FormConfig:
    """
    Load a FormConfig from a JSON file.

    The file holds ``schema``, and optionally ``messages`` and ``validateOn``.
    When validateOn is absent, the value from settings is used.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except OSError as e:
        raise ConfigError(f"Cannot read form config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Form config {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Form config {path} must be a JSON object")

    if settings is not None and "validateOn" not in data and "validate_on" not in data:
        data["validateOn"] = settings.validate_on.value
    return FormConfig.coerce(data)
