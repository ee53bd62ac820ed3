"""Tests for the command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from flowtop.cli import app, configure_logging, main
from flowtop.constants.values import APP_VERSION
from flowtop.models.state import AppSettings

runner = CliRunner()


class TestCli:
    """Tests for the typer command."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert APP_VERSION in result.output

    def test_options_are_passed_to_app(self) -> None:
        """Scope and refresh options reach the application."""
        with patch("flowtop.cli.FlowtopApp") as mock_app:
            result = runner.invoke(
                app,
                ["-n", "argo", "--context", "prod", "--interval", "10", "--timeout", "4"],
            )

        assert result.exit_code == 0, result.output
        kwargs = mock_app.call_args.kwargs
        assert kwargs["namespace"] == "argo"
        assert kwargs["context"] == "prod"
        assert kwargs["refresh_interval"] == 10
        assert kwargs["fetch_timeout"] == 4.0
        assert kwargs["settings"] is None
        mock_app.return_value.run.assert_called_once()

    def test_interval_below_minimum_rejected(self) -> None:
        """Refresh intervals below one second are a usage error."""
        with patch("flowtop.cli.FlowtopApp") as mock_app:
            result = runner.invoke(app, ["--interval", "0"])

        assert result.exit_code == 2
        mock_app.assert_not_called()

    def test_explicit_config_is_loaded(self, tmp_path: Path) -> None:
        """--config loads that file and hands the settings over."""
        path = tmp_path / "config.yaml"
        path.write_text("namespace: batch\n", encoding="utf-8")

        with patch("flowtop.cli.FlowtopApp") as mock_app:
            result = runner.invoke(app, ["--config", str(path)])

        assert result.exit_code == 0, result.output
        settings = mock_app.call_args.kwargs["settings"]
        assert isinstance(settings, AppSettings)
        assert settings.namespace == "batch"

    def test_invalid_config_is_usage_error(self, tmp_path: Path) -> None:
        """A broken --config file stops before the UI starts."""
        path = tmp_path / "config.yaml"
        path.write_text("refresh_interval: nope\n", encoding="utf-8")

        with patch("flowtop.cli.FlowtopApp") as mock_app:
            result = runner.invoke(app, ["--config", str(path)])

        assert result.exit_code == 2
        mock_app.assert_not_called()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_without_log_file_adds_null_handler(self) -> None:
        """The terminal is left to the TUI when no log file is given."""
        root = logging.getLogger()
        with patch.object(root, "addHandler") as mock_add:
            configure_logging(None, "INFO")
        assert isinstance(mock_add.call_args.args[0], logging.NullHandler)

    def test_with_log_file_uses_basic_config(self, tmp_path: Path) -> None:
        """A log file routes records through basicConfig."""
        log_file = tmp_path / "flowtop.log"
        with patch("flowtop.cli.logging.basicConfig") as mock_basic:
            configure_logging(log_file, "debug")

        kwargs = mock_basic.call_args.kwargs
        assert kwargs["filename"] == str(log_file)
        assert kwargs["level"] == logging.DEBUG

    @pytest.mark.parametrize("level", ["nonsense", ""])
    def test_unknown_level_defaults_to_info(self, tmp_path: Path, level: str) -> None:
        """Unknown level names fall back to INFO."""
        with patch("flowtop.cli.logging.basicConfig") as mock_basic:
            configure_logging(tmp_path / "x.log", level)
        assert mock_basic.call_args.kwargs["level"] == logging.INFO


def test_main_invokes_typer_app() -> None:
    """main() delegates to the typer application."""
    with patch("flowtop.cli.app", new=MagicMock()) as mock_app:
        main()
    mock_app.assert_called_once_with()
