"""Settings management for the Amplify-Config CLI."""

import logging
import os
import shutil
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SETTINGS_PATH,
    JSON_OUTPUT_INDENT,
    LOG_LEVELS,
    SETTINGS_ENV_VAR,
)
from .utils import ensure_dir, expand_path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_TEMPLATE_PATH = Path(__file__).with_name("settings.toml")


def _load_default_template() -> dict[str, Any]:
    """Load the packaged default settings template."""
    with open(DEFAULT_SETTINGS_TEMPLATE_PATH, "rb") as f:
        return tomllib.load(f)


def _merge_settings_data(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge settings dictionaries recursively."""
    merged = dict(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = _merge_settings_data(base_value, value)
        else:
            merged[key] = value
    return merged


def _copy_default_settings(settings_path: Path) -> None:
    """Copy the packaged template to the user settings path."""
    ensure_dir(settings_path.parent)
    shutil.copyfile(DEFAULT_SETTINGS_TEMPLATE_PATH, settings_path)


class OutputSettings(BaseModel):
    """JSON output settings."""

    indent: int = Field(default=JSON_OUTPUT_INDENT, ge=0, description="JSON indentation (0 = single line)")
    sort_keys: bool = False


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = DEFAULT_LOG_LEVEL

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        """Accept level names in any case."""
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class Settings(BaseModel):
    """Settings for Amplify-Config."""

    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def indent(self) -> int:
        """JSON indentation width."""
        return self.output.indent

    @property
    def sort_keys(self) -> bool:
        """Whether JSON keys are sorted."""
        return self.output.sort_keys

    @property
    def log_level(self) -> str:
        """Logging level name."""
        return self.logging.level


def get_settings_path() -> Path:
    """
    Get settings file path.

    Priority:
    1. AMPLIFY_CONFIG_SETTINGS environment variable
    2. Default: ~/.config/amplify-config/settings.toml

    Returns:
        Path to settings file
    """
    env_settings = os.environ.get(SETTINGS_ENV_VAR)
    if env_settings:
        return expand_path(env_settings)

    return expand_path(DEFAULT_SETTINGS_PATH)


def create_default_settings() -> Settings:
    """Create default settings from the packaged template."""
    return Settings.model_validate(_load_default_template())


def load_settings(settings_path: Path | None = None) -> Settings:
    """
    Load settings from TOML file using Pydantic validation.

    Values missing from the file fall back to the packaged defaults.

    Args:
        settings_path: Optional custom settings path

    Returns:
        Settings instance with validated values

    Raises:
        ValueError: If settings validation fails
    """
    if settings_path is None:
        settings_path = get_settings_path()

    defaults = _load_default_template()

    if not settings_path.exists():
        try:
            _copy_default_settings(settings_path)
        except (OSError, PermissionError) as e:
            logger.warning(f"Could not copy default settings to {settings_path}: {e}")

    if settings_path.exists():
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)

        return Settings.model_validate(_merge_settings_data(defaults, data))

    return Settings.model_validate(defaults)
