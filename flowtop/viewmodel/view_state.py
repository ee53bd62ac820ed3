"""View-model state for the resources screen.

``ResourceViewState`` owns the last received record batch, the user-selected
view and sort modes and the cursor. Rows are re-derived wholesale on every
change; nothing is patched in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from flowtop.constants.enums import SortMode, ViewMode, ViewPhase
from flowtop.models.core.resource_info import AsyncResourceInfo
from flowtop.viewmodel.filtering import derive_rows
from flowtop.viewmodel.tree_builder import ResourceRow

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResourceViewState:
    """Rows, cursor and modes derived from the latest resource batch.

    Idle until the first batch arrives, Ready afterwards. Mode changes while
    Ready re-derive from the stored batch without fetching.
    """

    def __init__(
        self,
        view_mode: ViewMode = ViewMode.ALL,
        sort_mode: SortMode = SortMode.STATUS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._clock = clock or _utc_now
        self.phase = ViewPhase.IDLE
        self.view_mode = view_mode
        self.sort_mode = sort_mode
        self.use_alt_timezone = False
        self.cursor = 0
        self.last_refresh: datetime | None = None
        self.error: str | None = None
        self.warnings: dict[str, str] = {}
        self._records: tuple[AsyncResourceInfo, ...] = ()
        self._rows: tuple[ResourceRow, ...] = ()

    @property
    def rows(self) -> tuple[ResourceRow, ...]:
        return self._rows

    @property
    def records(self) -> tuple[AsyncResourceInfo, ...]:
        """The last received batch, unfiltered."""
        return self._records

    @property
    def is_ready(self) -> bool:
        return self.phase is ViewPhase.READY

    @property
    def current_row(self) -> ResourceRow | None:
        if not self._rows:
            return None
        return self._rows[self.cursor]

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def _clamp_cursor(self) -> None:
        if not self._rows:
            self.cursor = 0
        else:
            self.cursor = min(max(self.cursor, 0), len(self._rows) - 1)

    def _rederive(self, now: datetime | None = None) -> None:
        reference = now or self._clock()
        self._rows = tuple(
            derive_rows(self._records, self.view_mode, self.sort_mode, reference)
        )
        self._clamp_cursor()

    def apply_batch(
        self,
        records: Iterable[AsyncResourceInfo],
        *,
        fetched_at: datetime | None = None,
        warnings: dict[str, str] | None = None,
    ) -> None:
        """Replace the record set and re-derive rows (Idle/Ready -> Ready)."""
        self._records = tuple(records)
        self.last_refresh = fetched_at or self._clock()
        self.warnings = dict(warnings or {})
        self.clear_error()
        self.phase = ViewPhase.READY
        self._rederive(self.last_refresh)
        logger.debug(
            "Applied batch: %d records, %d rows", len(self._records), len(self._rows)
        )

    def apply_fetch_error(self, message: str) -> None:
        """Surface a failed fetch, keeping the previous batch untouched."""
        self.error = message or "Fetch failed"

    def clear_error(self) -> None:
        """Drop the visible fetch error."""
        self.error = None

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def set_view_mode(self, view_mode: ViewMode) -> bool:
        """Switch view mode. Returns True when the mode changed."""
        if view_mode is self.view_mode:
            return False
        self.view_mode = view_mode
        self.cursor = 0
        if self.is_ready:
            self._rederive()
        return True

    def cycle_view_mode(self, step: int = 1) -> ViewMode:
        self.set_view_mode(self.view_mode.cycle(step))
        return self.view_mode

    def toggle_sort_mode(self) -> SortMode:
        self.sort_mode = self.sort_mode.toggled()
        if self.is_ready:
            self._rederive()
        return self.sort_mode

    def toggle_display_timezone(self) -> bool:
        """Flip between UTC and the alternate display timezone."""
        self.use_alt_timezone = not self.use_alt_timezone
        return self.use_alt_timezone

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def move_cursor(self, delta: int) -> int:
        self.cursor += delta
        self._clamp_cursor()
        return self.cursor

    def set_cursor(self, index: int) -> int:
        self.cursor = index
        self._clamp_cursor()
        return self.cursor

    def select(self) -> AsyncResourceInfo | None:
        """Snapshot of the record under the cursor for the detail view.

        The copy is independent of later batches.
        """
        row = self.current_row
        if row is None:
            return None
        return row.record.model_copy(deep=True)


__all__ = ["ResourceViewState"]
