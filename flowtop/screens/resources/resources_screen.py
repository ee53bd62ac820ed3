"""Resources screen - the tree-structured async workload table."""

from __future__ import annotations

import logging
from contextlib import suppress
from datetime import datetime, timezone

from textual import on
from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import DataTable, Footer, Header, Static

from flowtop.constants.defaults import ALT_TIMEZONE_DEFAULT
from flowtop.constants.enums import ViewMode
from flowtop.constants.timeouts import FETCH_TIMEOUT, REFRESH_INTERVAL
from flowtop.constants.values import APP_SUBTITLE, APP_TITLE
from flowtop.controllers import ResourceController
from flowtop.keyboard import RESOURCES_SCREEN_BINDINGS
from flowtop.screens.detail import ResourceDetailScreen
from flowtop.screens.mixins.worker_mixin import WorkerMixin
from flowtop.screens.resources.config import (
    EMPTY_STATE_ID,
    EMPTY_STATE_LOADING,
    EMPTY_STATE_NO_RESOURCES,
    ERROR_PANEL_ID,
    INFO_LINE_ID,
    RESOURCES_TABLE_ID,
    VIEW_MODE_BY_KEY,
    VIEW_TABS_ID,
    WARNING_LINE_ID,
)
from flowtop.screens.resources.presenter import (
    ClusterInfoLoaded,
    ResourcesLoaded,
    ResourcesLoadFailed,
    ResourcesPresenter,
)
from flowtop.viewmodel.view_state import ResourceViewState

logger = logging.getLogger(__name__)


class ResourcesScreen(WorkerMixin, Screen):
    """Polls the cluster and renders every async resource as one table."""

    BINDINGS = RESOURCES_SCREEN_BINDINGS

    def __init__(
        self,
        controller: ResourceController,
        *,
        refresh_interval: float = REFRESH_INTERVAL,
        fetch_timeout: float = FETCH_TIMEOUT,
        alt_timezone: str = ALT_TIMEZONE_DEFAULT,
        use_alt_timezone: bool = False,
    ) -> None:
        super().__init__()
        view_state = ResourceViewState()
        view_state.use_alt_timezone = use_alt_timezone
        self._presenter = ResourcesPresenter(
            self,
            controller,
            view_state=view_state,
            fetch_timeout=fetch_timeout,
            alt_timezone=alt_timezone,
        )
        self._refresh_interval = refresh_interval
        self._refresh_timer: Timer | None = None
        self._rendered_columns: tuple[str, ...] = ()

    @property
    def presenter(self) -> ResourcesPresenter:
        return self._presenter

    @property
    def view_state(self) -> ResourceViewState:
        return self._presenter.state

    # =========================================================================
    # Layout
    # =========================================================================

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id=INFO_LINE_ID)
        yield Static("", id=VIEW_TABS_ID)
        yield Static("", id=ERROR_PANEL_ID)
        yield Static(EMPTY_STATE_LOADING, id=EMPTY_STATE_ID)
        yield DataTable(id=RESOURCES_TABLE_ID, cursor_type="row", zebra_stripes=True)
        yield Static("", id=WARNING_LINE_ID)
        yield Footer()

    def on_mount(self) -> None:
        self.title = APP_TITLE
        self.sub_title = APP_SUBTITLE
        self.query_one(f"#{ERROR_PANEL_ID}", Static).display = False
        self.query_one(f"#{WARNING_LINE_ID}", Static).display = False
        self._render_all()
        self._presenter.load_cluster_info()
        self._presenter.request_refresh()
        self._refresh_timer = self.set_interval(self._refresh_interval, self._on_refresh_tick)

    def _on_refresh_tick(self) -> None:
        # Re-render so live durations advance even when the fetch is skipped.
        self._render_table()
        self._presenter.request_refresh()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_all(self) -> None:
        self._render_header_lines()
        self._render_table()
        self._render_error()

    def _render_header_lines(self) -> None:
        namespace = self._presenter.controller.namespace
        with suppress(NoMatches):
            self.query_one(f"#{INFO_LINE_ID}", Static).update(
                self._presenter.format_info_line(namespace)
            )
            self.query_one(f"#{VIEW_TABS_ID}", Static).update(
                self._presenter.format_view_tabs()
            )
            warning_line = self.query_one(f"#{WARNING_LINE_ID}", Static)
            warnings = self._presenter.format_warnings()
            warning_line.update(warnings)
            warning_line.display = bool(warnings)

    def _render_table(self) -> None:
        try:
            table = self.query_one(f"#{RESOURCES_TABLE_ID}", DataTable)
            empty_state = self.query_one(f"#{EMPTY_STATE_ID}", Static)
        except NoMatches:
            return

        state = self.view_state
        columns = self._presenter.column_headers()
        column_labels = tuple(label for label, _ in columns)
        if column_labels != self._rendered_columns:
            table.clear(columns=True)
            for label, width in columns:
                table.add_column(label, width=width)
            self._rendered_columns = column_labels
        else:
            table.clear()

        now = datetime.now(timezone.utc)
        for cells in self._presenter.format_rows(now):
            table.add_row(*cells)

        if not state.is_ready:
            empty_state.update(EMPTY_STATE_LOADING)
        else:
            empty_state.update(EMPTY_STATE_NO_RESOURCES)
        has_rows = bool(state.rows)
        empty_state.display = not has_rows and state.error is None
        table.display = has_rows and state.error is None

        if has_rows:
            table.move_cursor(row=state.cursor)
            if self.focused is None:
                table.focus()

    def _render_error(self) -> None:
        with suppress(NoMatches):
            panel = self.query_one(f"#{ERROR_PANEL_ID}", Static)
            error = self.view_state.error
            panel.update(f"Error: {error}\nPress r to retry or q to quit." if error else "")
            panel.display = error is not None

    def show_error_state(self, message: str) -> None:
        self._presenter.apply_failed(ResourcesLoadFailed(message))
        self._render_all()

    # =========================================================================
    # Message handlers
    # =========================================================================

    def on_resources_loaded(self, message: ResourcesLoaded) -> None:
        self._presenter.apply_loaded(message)
        self._render_all()

    def on_resources_load_failed(self, message: ResourcesLoadFailed) -> None:
        self._presenter.apply_failed(message)
        self._render_all()

    def on_cluster_info_loaded(self, message: ClusterInfoLoaded) -> None:
        self._presenter.apply_cluster_info(message.info)
        self._render_header_lines()

    @on(DataTable.RowHighlighted, f"#{RESOURCES_TABLE_ID}")
    def _on_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if event.cursor_row != self.view_state.cursor:
            self.view_state.set_cursor(event.cursor_row)

    @on(DataTable.RowSelected, f"#{RESOURCES_TABLE_ID}")
    def _on_row_selected(self, event: DataTable.RowSelected) -> None:
        self.view_state.set_cursor(event.cursor_row)
        self.action_show_detail()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_cursor_down(self) -> None:
        self.view_state.move_cursor(1)
        self._render_table()

    def action_cursor_up(self) -> None:
        self.view_state.move_cursor(-1)
        self._render_table()

    def _switch_view(self, view_mode: ViewMode) -> None:
        if self.view_state.set_view_mode(view_mode):
            self._render_all()

    def action_next_view(self) -> None:
        self._switch_view(self.view_state.view_mode.cycle(1))

    def action_previous_view(self) -> None:
        self._switch_view(self.view_state.view_mode.cycle(-1))

    def action_view_all(self) -> None:
        self._switch_view(VIEW_MODE_BY_KEY["1"])

    def action_view_jobs(self) -> None:
        self._switch_view(VIEW_MODE_BY_KEY["2"])

    def action_view_workflows(self) -> None:
        self._switch_view(VIEW_MODE_BY_KEY["3"])

    def action_view_events(self) -> None:
        self._switch_view(VIEW_MODE_BY_KEY["4"])

    def action_toggle_sort(self) -> None:
        self.view_state.toggle_sort_mode()
        self._render_all()

    def action_toggle_timezone(self) -> None:
        self.view_state.toggle_display_timezone()
        self._rendered_columns = ()
        self._render_all()

    def action_show_detail(self) -> None:
        snapshot = self.view_state.select()
        if snapshot is None:
            return
        self.app.push_screen(
            ResourceDetailScreen(snapshot, self._presenter.display_timezone)
        )

    def action_refresh(self) -> None:
        """Manual refresh; also allowed while an error is shown."""
        if not self._presenter.request_refresh():
            self.notify("Refresh already in progress", severity="information")


__all__ = ["ResourcesScreen"]
