"""Command line entry point for flowtop."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from flowtop.app import FlowtopApp
from flowtop.constants.limits import (
    FETCH_TIMEOUT_MIN,
    REFRESH_INTERVAL_MAX,
    REFRESH_INTERVAL_MIN,
)
from flowtop.constants.values import APP_TITLE, APP_VERSION
from flowtop.models.state.config_manager import ConfigLoadError, ConfigManager

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    add_completion=False,
    help="Monitor Kubernetes Jobs, CronJobs, Argo Workflows and Argo Events.",
)


def configure_logging(log_file: Path | None, level: str) -> None:
    """Send logs to ``log_file``; the terminal belongs to the TUI."""
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=str(log_file.expanduser()),
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_TITLE} {APP_VERSION}")
        raise typer.Exit()


@app.command()
def run(
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace to watch (default: all namespaces)."
    ),
    context: Optional[str] = typer.Option(
        None, "--context", help="Kubeconfig context to use."
    ),
    interval: Optional[int] = typer.Option(
        None,
        "--interval",
        min=REFRESH_INTERVAL_MIN,
        max=REFRESH_INTERVAL_MAX,
        help="Refresh interval in seconds.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=FETCH_TIMEOUT_MIN, help="Fetch timeout in seconds."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Settings file (YAML)."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write logs to this file."
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level for --log-file."),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Start the dashboard."""
    configure_logging(log_file, log_level)

    settings = None
    if config is not None:
        try:
            settings = ConfigManager.load(config.expanduser())
        except ConfigLoadError as exc:
            raise typer.BadParameter(str(exc), param_hint="--config") from exc

    FlowtopApp(
        namespace=namespace,
        context=context,
        refresh_interval=interval,
        fetch_timeout=timeout,
        settings=settings,
    ).run()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
