"""Tests for ResourceViewState."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from flowtop.constants.enums import (
    ResourceKind,
    ResourceStatus,
    SortMode,
    ViewMode,
    ViewPhase,
)
from flowtop.models.core.resource_info import AsyncResourceInfo
from flowtop.viewmodel.view_state import ResourceViewState

NOW = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)


def _records() -> list[AsyncResourceInfo]:
    return [
        AsyncResourceInfo(kind=ResourceKind.JOB, name="job-a", status=ResourceStatus.RUNNING),
        AsyncResourceInfo(kind=ResourceKind.JOB, name="job-b", status=ResourceStatus.FAILED),
        AsyncResourceInfo(
            kind=ResourceKind.WORKFLOW, name="wf-a", status=ResourceStatus.SUCCEEDED
        ),
        AsyncResourceInfo(
            kind=ResourceKind.SENSOR, name="sensor-a", status=ResourceStatus.PENDING
        ),
    ]


class TestResourceViewStateLifecycle:
    """Tests for batch application and errors."""

    @pytest.fixture
    def state(self) -> ResourceViewState:
        """Create a view state with a pinned clock."""
        return ResourceViewState(clock=lambda: NOW)

    def test_initial_state_is_idle(self, state: ResourceViewState) -> None:
        """A fresh state has no rows and is not ready."""
        assert state.phase is ViewPhase.IDLE
        assert state.is_ready is False
        assert state.rows == ()
        assert state.current_row is None
        assert state.select() is None

    def test_apply_batch_makes_ready(self, state: ResourceViewState) -> None:
        """The first batch moves the state to Ready and derives rows."""
        state.apply_batch(_records(), warnings={"Sensor": "forbidden"})

        assert state.phase is ViewPhase.READY
        assert state.last_refresh == NOW
        assert [row.record.name for row in state.rows] == [
            "job-a",
            "job-b",
            "sensor-a",
            "wf-a",
        ]
        assert state.warnings == {"Sensor": "forbidden"}

    def test_fetch_error_keeps_previous_rows(self, state: ResourceViewState) -> None:
        """A failed fetch sets the error without touching the last batch."""
        state.apply_batch(_records())
        rows_before = state.rows

        state.apply_fetch_error("Unable to connect to the server")

        assert state.error == "Unable to connect to the server"
        assert state.rows == rows_before
        assert state.is_ready is True

    def test_empty_error_message_gets_default(self, state: ResourceViewState) -> None:
        """An empty error still surfaces as an error."""
        state.apply_fetch_error("")
        assert state.error == "Fetch failed"

    def test_next_batch_clears_error(self, state: ResourceViewState) -> None:
        """A successful fetch after a failure clears the error."""
        state.apply_fetch_error("boom")
        state.apply_batch(_records())
        assert state.error is None

    def test_clear_error(self, state: ResourceViewState) -> None:
        """clear_error drops the error and keeps the rows."""
        state.apply_batch(_records())
        state.apply_fetch_error("boom")

        state.clear_error()

        assert state.error is None
        assert len(state.rows) == 4

    def test_batch_fetched_at_is_used(self, state: ResourceViewState) -> None:
        """The fetch timestamp becomes last_refresh."""
        fetched_at = datetime(2024, 5, 1, 7, 59, tzinfo=timezone.utc)
        state.apply_batch([], fetched_at=fetched_at)
        assert state.last_refresh == fetched_at
        assert state.rows == ()


class TestResourceViewStateModes:
    """Tests for view/sort mode changes and the cursor."""

    @pytest.fixture
    def state(self) -> ResourceViewState:
        """Create a ready view state."""
        state = ResourceViewState(clock=lambda: NOW)
        state.apply_batch(_records())
        return state

    def test_set_view_mode_rederives_and_resets_cursor(
        self,
        state: ResourceViewState,
    ) -> None:
        """Switching views filters rows and moves the cursor to the top."""
        state.set_cursor(3)

        changed = state.set_view_mode(ViewMode.JOBS)

        assert changed is True
        assert state.cursor == 0
        assert [row.record.name for row in state.rows] == ["job-a", "job-b"]

    def test_set_same_view_mode_is_noop(self, state: ResourceViewState) -> None:
        """Selecting the active view changes nothing."""
        state.set_cursor(2)
        assert state.set_view_mode(ViewMode.ALL) is False
        assert state.cursor == 2

    def test_view_mode_while_idle_does_not_derive(self) -> None:
        """Mode changes before the first batch only record the mode."""
        state = ResourceViewState(clock=lambda: NOW)
        state.set_view_mode(ViewMode.EVENTS)
        assert state.view_mode is ViewMode.EVENTS
        assert state.rows == ()

    def test_cycle_view_mode_wraps(self, state: ResourceViewState) -> None:
        """Cycling past the last tab returns to the first."""
        assert state.cycle_view_mode(-1) is ViewMode.EVENTS
        assert state.cycle_view_mode(1) is ViewMode.ALL

    def test_toggle_sort_mode(self, state: ResourceViewState) -> None:
        """Sort mode alternates between status and next run."""
        assert state.toggle_sort_mode() is SortMode.NEXT_RUN
        assert state.toggle_sort_mode() is SortMode.STATUS

    def test_toggle_display_timezone(self, state: ResourceViewState) -> None:
        """The timezone flag flips each time."""
        assert state.toggle_display_timezone() is True
        assert state.toggle_display_timezone() is False

    def test_cursor_is_clamped(self, state: ResourceViewState) -> None:
        """The cursor never leaves the row range."""
        assert state.move_cursor(-5) == 0
        assert state.move_cursor(100) == len(state.rows) - 1
        assert state.set_cursor(-1) == 0

    def test_cursor_clamped_when_rows_shrink(self, state: ResourceViewState) -> None:
        """A smaller batch pulls the cursor back into range."""
        state.set_cursor(3)
        state.apply_batch(_records()[:2])
        assert state.cursor == 1

    def test_select_returns_independent_snapshot(self, state: ResourceViewState) -> None:
        """The detail snapshot survives later batches unchanged."""
        snapshot = state.select()
        assert snapshot is not None
        assert snapshot.name == "job-a"

        state.apply_batch(
            [AsyncResourceInfo(kind=ResourceKind.JOB, name="job-a", status=ResourceStatus.FAILED)]
        )

        assert snapshot.status is ResourceStatus.RUNNING
        assert snapshot is not state.rows[0].record
