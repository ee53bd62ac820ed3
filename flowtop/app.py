"""Main application class for flowtop."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from flowtop.constants import APP_TITLE
from flowtop.controllers import ResourceController
from flowtop.keyboard.app import APP_BINDINGS
from flowtop.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from flowtop.screens.resources import ResourcesScreen
from flowtop.screens.resources.config import HELP_TEXT

logger = logging.getLogger(__name__)


class FlowtopApp(App[None]):
    """Terminal dashboard for Jobs, CronJobs, Argo Workflows and Argo Events."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        namespace: str | None = None,
        context: str | None = None,
        refresh_interval: int | None = None,
        fetch_timeout: float | None = None,
        settings: AppSettings | None = None,
        controller: ResourceController | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings_load_error: str | None = None
        if settings is None:
            self._load_settings()
        else:
            self.settings = settings

        # Apply CLI overrides if provided
        overrides: dict[str, object] = {}
        if namespace is not None:
            overrides["namespace"] = namespace
        if context is not None:
            overrides["context"] = context
        if refresh_interval is not None:
            overrides["refresh_interval"] = refresh_interval
        if fetch_timeout is not None:
            overrides["fetch_timeout"] = fetch_timeout
        if overrides:
            self.settings = AppSettings.model_validate(
                {**self.settings.model_dump(), **overrides}
            )

        self.controller = controller or ResourceController(
            namespace=self.settings.namespace,
            context=self.settings.context,
            request_timeout=self.settings.request_timeout,
        )

    def _load_settings(self) -> None:
        """Load application settings from the optional settings file."""
        try:
            self.settings = ConfigManager.load()
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings_load_error = str(exc)
            self.settings = AppSettings()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(
            ResourcesScreen(
                self.controller,
                refresh_interval=self.settings.refresh_interval,
                fetch_timeout=self.settings.fetch_timeout,
                alt_timezone=self.settings.alt_timezone,
                use_alt_timezone=self.settings.use_alt_timezone,
            )
        )
        if self.settings_load_error:
            self.notify(self.settings_load_error, title="Settings", severity="warning")

    def action_show_help(self) -> None:
        """Show help dialog."""
        self.notify(HELP_TEXT, severity="information", title="Help", timeout=10)

    def action_refresh(self) -> None:
        """Refresh data on the current screen."""
        refresh_method = getattr(self.screen, "action_refresh", None)
        if callable(refresh_method):
            refresh_method()

    async def action_quit(self) -> None:
        """Quit the application."""
        self.exit()


__all__ = [
    "FlowtopApp",
]
