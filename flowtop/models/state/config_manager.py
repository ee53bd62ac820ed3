"""Read-only YAML settings loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from flowtop.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FLOWTOP_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/flowtop/config.yaml")


class ConfigManager:
    """Locates and parses the optional settings file."""

    @staticmethod
    def config_path() -> Path:
        """Return the settings path, honoring ``$FLOWTOP_CONFIG``."""
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        return Path(override or DEFAULT_CONFIG_PATH).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Raises:
            ConfigLoadError: If the file cannot be read or does not validate.
        """
        config_path = path if path is not None else cls.config_path()
        if not config_path.exists():
            logger.debug("No settings file at %s, using defaults", config_path)
            return AppSettings()

        try:
            with open(config_path, encoding="utf-8") as handle:
                raw: Any = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
