"""Resources screen presenter - refresh scheduling, state updates, and row formatting."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone, tzinfo
from typing import Any

from rich.text import Text
from textual.message import Message

from flowtop.constants.defaults import ALT_TIMEZONE_DEFAULT
from flowtop.constants.enums import ResourceKind, ViewMode
from flowtop.constants.limits import MAX_MESSAGE_LENGTH
from flowtop.constants.timeouts import FETCH_TIMEOUT
from flowtop.constants.values import (
    NAMESPACE_ALL_LABEL,
    PLACEHOLDER_EMPTY,
    STATUS_BADGES,
    TIME_FORMAT_CLOCK,
)
from flowtop.controllers import (
    ClusterInfo,
    ResourceBatch,
    ResourceController,
    ResourceFetchError,
)
from flowtop.models.core.resource_info import AsyncResourceInfo
from flowtop.screens.mixins.worker_mixin import DataLoaded, DataLoadFailed
from flowtop.screens.resources.config import (
    TABLE_COLUMNS_BY_VIEW,
    TZ_COLUMN_STRIP_PREFIXES,
    VIEW_TAB_LABELS,
)
from flowtop.utils.schedule import resolve_timezone, split_schedule_fields
from flowtop.utils.time_utils import format_duration, format_timestamp
from flowtop.viewmodel.tree_builder import ResourceRow
from flowtop.viewmodel.view_state import ResourceViewState

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class ResourcesLoaded(DataLoaded):
    """Message carrying a freshly fetched resource batch."""

    def __init__(self, batch: ResourceBatch, duration_ms: float = 0.0) -> None:
        super().__init__(batch, duration_ms)
        self.batch = batch


class ResourcesLoadFailed(DataLoadFailed):
    """Message indicating a resource fetch failed or timed out."""


class ClusterInfoLoaded(Message):
    """Message carrying kubeconfig context/cluster names."""

    def __init__(self, info: ClusterInfo) -> None:
        super().__init__()
        self.info = info


# =============================================================================
# Formatting helpers
# =============================================================================


def truncate_text(value: str, max_length: int) -> str:
    """Shorten ``value`` to ``max_length`` characters, ``-`` when empty."""
    if not value:
        return PLACEHOLDER_EMPTY
    if len(value) > max_length:
        return value[: max(max_length - 3, 0)] + "..."
    return value


def format_names(names: tuple[str, ...] | list[str]) -> str:
    """Render a name list as ``first (+N)``."""
    if not names:
        return PLACEHOLDER_EMPTY
    if len(names) == 1:
        return names[0]
    return f"{names[0]} (+{len(names) - 1})"


def format_status(record: AsyncResourceInfo) -> Text:
    label, style = STATUS_BADGES[record.status.value]
    return Text(label, style=style)


def short_timezone(name: str) -> str:
    """TZ column text: region prefix dropped, ``-`` when unset."""
    if not name:
        return PLACEHOLDER_EMPTY
    for prefix in TZ_COLUMN_STRIP_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


class ResourcesPresenter:
    """Presenter for ResourcesScreen.

    Owns the single ResourceViewState and the single pending-fetch slot:
    ``request_refresh`` is a no-op while a fetch is in flight, and the slot
    is released only once the screen has applied the outcome.
    """

    def __init__(
        self,
        screen: Any,
        controller: ResourceController,
        *,
        view_state: ResourceViewState | None = None,
        fetch_timeout: float = FETCH_TIMEOUT,
        alt_timezone: str = ALT_TIMEZONE_DEFAULT,
    ) -> None:
        self._screen = screen
        self._controller = controller
        self._state = view_state or ResourceViewState()
        self._fetch_timeout = fetch_timeout
        self._alt_timezone_name = alt_timezone
        self._alt_timezone = resolve_timezone(alt_timezone)
        self._fetch_in_flight = False
        self._cluster_info = ClusterInfo(context=controller.context or "")

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> ResourceViewState:
        return self._state

    @property
    def controller(self) -> ResourceController:
        return self._controller

    @property
    def fetch_in_flight(self) -> bool:
        return self._fetch_in_flight

    @property
    def cluster_info(self) -> ClusterInfo:
        return self._cluster_info

    @property
    def display_timezone(self) -> tzinfo:
        return self._alt_timezone if self._state.use_alt_timezone else timezone.utc

    @property
    def display_timezone_label(self) -> str:
        """Short label of the display timezone, e.g. ``UTC`` or ``JST``."""
        if not self._state.use_alt_timezone:
            return "UTC"
        label = datetime.now(self._alt_timezone).tzname()
        return label or self._alt_timezone_name

    # =========================================================================
    # Refresh cycle
    # =========================================================================

    def request_refresh(self) -> bool:
        """Start a fetch unless one is already in flight.

        Returns:
            True when a new fetch was started.
        """
        if self._fetch_in_flight:
            logger.debug("Refresh skipped: fetch already in flight")
            return False
        self._fetch_in_flight = True
        start_worker = getattr(self._screen, "start_worker", None)
        if callable(start_worker):
            start_worker(self._load_resources_worker, name="resources-fetch", exclusive=True)
        else:
            self._screen.run_worker(
                self._load_resources_worker, name="resources-fetch", exclusive=True
            )
        return True

    @staticmethod
    def _friendly_error(error: BaseException) -> str:
        """Convert an exception to a user-friendly error message."""
        msg = str(error)
        lower = msg.lower()
        if "timed out" in lower or "timeout" in lower:
            return "Connection timed out"
        if "connection refused" in lower:
            return "Connection refused"
        if "Command [" in msg or "Command '" in msg:
            return "Command failed"
        if len(msg) > 80:
            return msg[:77] + "..."
        return msg or "Unknown error"

    async def _load_resources_worker(self) -> None:
        """Fetch one batch, bounded by the fetch timeout, and post the outcome."""
        started = time.monotonic()
        try:
            batch = await asyncio.wait_for(
                self._controller.fetch_all_resources(),
                timeout=self._fetch_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Resource fetch timed out after %.1fs", self._fetch_timeout)
            self._screen.post_message(
                ResourcesLoadFailed(f"Fetch timed out after {self._fetch_timeout:g}s")
            )
        except asyncio.CancelledError:
            self._fetch_in_flight = False
            raise
        except ResourceFetchError as exc:
            logger.exception("Resource fetch failed")
            self._screen.post_message(ResourcesLoadFailed(str(exc) or "Fetch failed"))
        except Exception as exc:
            logger.exception("Unexpected error while fetching resources")
            self._screen.post_message(ResourcesLoadFailed(self._friendly_error(exc)))
        else:
            duration_ms = (time.monotonic() - started) * 1000
            self._screen.post_message(ResourcesLoaded(batch, duration_ms))

    def apply_loaded(self, message: ResourcesLoaded) -> None:
        """Apply a fetched batch to the view state and free the fetch slot."""
        batch = message.batch
        self._state.apply_batch(
            batch.records, fetched_at=batch.fetched_at, warnings=batch.warnings
        )
        self._fetch_in_flight = False

    def apply_failed(self, message: ResourcesLoadFailed) -> None:
        """Surface a failed fetch, keeping the previous rows, and free the slot."""
        self._state.apply_fetch_error(message.error)
        self._fetch_in_flight = False

    def load_cluster_info(self) -> None:
        self._screen.run_worker(
            self._load_cluster_info_worker, name="cluster-info", group="cluster-info"
        )

    async def _load_cluster_info_worker(self) -> None:
        info = await self._controller.resolve_cluster_info()
        self._screen.post_message(ClusterInfoLoaded(info))

    def apply_cluster_info(self, info: ClusterInfo) -> None:
        self._cluster_info = info

    # =========================================================================
    # Formatting
    # =========================================================================

    def column_headers(self, view_mode: ViewMode | None = None) -> list[tuple[str, int]]:
        """Column (label, width) pairs for a view, LAST/NEXT tagged with the timezone."""
        mode = view_mode or self._state.view_mode
        tz_label = self.display_timezone_label
        columns: list[tuple[str, int]] = []
        for label, width in TABLE_COLUMNS_BY_VIEW[mode]:
            if label in ("LAST", "NEXT"):
                label = f"{label}({tz_label})"
            columns.append((label, width))
        return columns

    def format_row(
        self,
        row: ResourceRow,
        now: datetime | None = None,
        view_mode: ViewMode | None = None,
    ) -> tuple[str | Text, ...]:
        """Render one row's cells for the given (or current) view mode."""
        mode = view_mode or self._state.view_mode
        record = row.record
        reference = now or datetime.now(timezone.utc)
        kind_cell = f"{row.branch.glyph}{record.kind.value}"
        namespace = record.namespace or PLACEHOLDER_EMPTY
        duration = format_duration(record.duration_at(reference))
        status = format_status(record)

        if mode is ViewMode.ALL:
            return (
                kind_cell,
                namespace,
                record.name,
                status,
                duration,
                truncate_text(record.message, MAX_MESSAGE_LENGTH),
            )

        if mode is ViewMode.EVENTS:
            event_source = record.event_source_name or PLACEHOLDER_EMPTY
            if record.kind is ResourceKind.EVENT_SOURCE:
                event_name = record.event_type or PLACEHOLDER_EMPTY
                trigger = PLACEHOLDER_EMPTY
            else:
                event_name = format_names(record.event_names)
                trigger = format_names(record.trigger_names)
            return (
                kind_cell,
                namespace,
                record.name,
                status,
                event_source,
                event_name,
                trigger,
            )

        display_tz = self.display_timezone
        return (
            kind_cell,
            namespace,
            record.name,
            status,
            duration,
            *split_schedule_fields(record.schedule),
            short_timezone(record.timezone),
            format_timestamp(record.last_run, display_tz),
            format_timestamp(record.next_run, display_tz),
            truncate_text(record.message, MAX_MESSAGE_LENGTH),
        )

    def format_rows(self, now: datetime | None = None) -> list[tuple[str | Text, ...]]:
        reference = now or datetime.now(timezone.utc)
        return [self.format_row(row, reference) for row in self._state.rows]

    def format_view_tabs(self) -> Text:
        """Tab strip with the active view highlighted."""
        text = Text()
        for index, (mode, label) in enumerate(VIEW_TAB_LABELS.items()):
            if index:
                text.append("  ")
            if mode is self._state.view_mode:
                text.append(f" {label} ", style="bold reverse")
            else:
                text.append(f" {label} ", style="dim")
        return text

    def format_info_line(self, namespace: str = "") -> Text:
        """ctx / cluster / ns / resources / tz / sort / updated summary."""
        info = self._cluster_info
        updated = (
            self._state.last_refresh.astimezone(self.display_timezone).strftime(
                TIME_FORMAT_CLOCK
            )
            if self._state.last_refresh
            else PLACEHOLDER_EMPTY
        )
        parts: list[tuple[str, str, str]] = [
            ("ctx:", info.context or PLACEHOLDER_EMPTY, "bold magenta"),
            ("cluster:", info.cluster or PLACEHOLDER_EMPTY, "bold yellow"),
            ("ns:", namespace or NAMESPACE_ALL_LABEL, "bold cyan"),
            ("resources:", str(len(self._state.rows)), "green"),
            ("tz:", self.display_timezone_label, "bold #ffaf00"),
            ("sort:", self._state.sort_mode.value, "bold #d75fff"),
            ("updated:", updated, "grey62"),
        ]
        text = Text()
        for index, (label, value, style) in enumerate(parts):
            if index:
                text.append("  ")
            text.append(label, style="grey50")
            text.append(" ")
            text.append(value, style=style)
        return text

    def format_warnings(self) -> str:
        """One-line summary of nonfatal per-family warnings."""
        warnings = self._state.warnings
        if not warnings:
            return ""
        return "; ".join(f"{kind}: {message}" for kind, message in sorted(warnings.items()))


__all__ = [
    "ClusterInfoLoaded",
    "ResourcesLoadFailed",
    "ResourcesLoaded",
    "ResourcesPresenter",
    "format_names",
    "short_timezone",
    "truncate_text",
]
