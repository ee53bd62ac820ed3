"""State models: application settings."""

from flowtop.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from flowtop.models.state.config_manager import ConfigManager

__all__ = ["AppSettings", "ConfigError", "ConfigLoadError", "ConfigManager"]
