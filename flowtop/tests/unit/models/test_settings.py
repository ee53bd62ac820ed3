"""Tests for settings model and read-only settings loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from flowtop.constants.defaults import (
    ALT_TIMEZONE_DEFAULT,
    FETCH_TIMEOUT_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from flowtop.models.state import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigManager,
)
from flowtop.models.state.config_manager import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH


class TestAppSettings:
    """Tests for AppSettings validation."""

    def test_defaults(self) -> None:
        """Defaults watch every namespace on the current context."""
        settings = AppSettings()
        assert settings.namespace == ""
        assert settings.context is None
        assert settings.refresh_interval == REFRESH_INTERVAL_DEFAULT
        assert settings.fetch_timeout == FETCH_TIMEOUT_DEFAULT
        assert settings.alt_timezone == ALT_TIMEZONE_DEFAULT
        assert settings.use_alt_timezone is False

    def test_refresh_interval_bounds(self) -> None:
        """Refresh intervals below one second are rejected."""
        with pytest.raises(ValidationError):
            AppSettings(refresh_interval=0)

    def test_unknown_keys_ignored(self) -> None:
        """Extra keys in the settings file are ignored."""
        settings = AppSettings.model_validate({"namespace": "argo", "theme": "dark"})
        assert settings.namespace == "argo"

    def test_load_error_is_config_error(self) -> None:
        """ConfigLoadError belongs to the config error hierarchy."""
        assert issubclass(ConfigLoadError, ConfigError)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_config_path_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without an override the user config path is used."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert ConfigManager.config_path() == DEFAULT_CONFIG_PATH.expanduser()

    def test_config_path_env_override(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        """The environment variable overrides the settings location."""
        target = tmp_path / "custom.yaml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
        assert ConfigManager.config_path() == target

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing settings file is not an error."""
        assert ConfigManager.load(tmp_path / "absent.yaml") == AppSettings()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty document yields defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigManager.load(path) == AppSettings()

    def test_load_values(self, tmp_path: Path) -> None:
        """Values from the file override the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "namespace: argo\n"
            "refresh_interval: 15\n"
            "alt_timezone: Europe/Berlin\n"
            "use_alt_timezone: true\n",
            encoding="utf-8",
        )

        settings = ConfigManager.load(path)

        assert settings.namespace == "argo"
        assert settings.refresh_interval == 15
        assert settings.alt_timezone == "Europe/Berlin"
        assert settings.use_alt_timezone is True

    def test_load_from_env_path(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
    ) -> None:
        """load() without a path reads the configured location."""
        path = tmp_path / "env.yaml"
        path.write_text("context: staging\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert ConfigManager.load().context == "staging"

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Malformed YAML is reported as a load error."""
        path = tmp_path / "config.yaml"
        path.write_text("namespace: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="Cannot read"):
            ConfigManager.load(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """A top-level list is not a valid settings document."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="must contain a mapping"):
            ConfigManager.load(path)

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        """Values failing validation are reported as a load error."""
        path = tmp_path / "config.yaml"
        path.write_text("refresh_interval: -3\n", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.load(path)
