"""Tests for view filtering and root ordering."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from flowtop.constants.enums import (
    ResourceKind,
    ResourceStatus,
    SortMode,
    TreeBranch,
    ViewMode,
)
from flowtop.models.core.resource_info import AsyncResourceInfo
from flowtop.viewmodel.filtering import (
    derive_rows,
    filter_by_view_mode,
    sort_roots,
    with_next_run,
)

NOW = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


def _record(
    kind: ResourceKind,
    name: str,
    status: ResourceStatus = ResourceStatus.RUNNING,
    **kwargs: object,
) -> AsyncResourceInfo:
    return AsyncResourceInfo(kind=kind, name=name, namespace="ops", status=status, **kwargs)


@pytest.fixture
def mixed_records() -> list[AsyncResourceInfo]:
    """One record of every kind."""
    return [_record(kind, kind.value.lower()) for kind in ResourceKind]


class TestFilterByViewMode:
    """Tests for filter_by_view_mode."""

    @pytest.mark.parametrize(
        ("view_mode", "expected"),
        [
            (ViewMode.ALL, set(ResourceKind)),
            (ViewMode.JOBS, {ResourceKind.JOB, ResourceKind.CRON_JOB}),
            (ViewMode.WORKFLOWS, {ResourceKind.WORKFLOW, ResourceKind.CRON_WORKFLOW}),
            (ViewMode.EVENTS, {ResourceKind.SENSOR, ResourceKind.EVENT_SOURCE}),
        ],
    )
    def test_view_mode_kinds(
        self,
        mixed_records: list[AsyncResourceInfo],
        view_mode: ViewMode,
        expected: set[ResourceKind],
    ) -> None:
        """Each view should pass exactly its kinds."""
        kept = filter_by_view_mode(mixed_records, view_mode)
        assert {record.kind for record in kept} == expected


class TestSortRoots:
    """Tests for root ordering."""

    def test_status_priority_order(self) -> None:
        """Running < Failed < Pending < Succeeded < Unknown, then by name."""
        roots = [
            _record(ResourceKind.WORKFLOW, "e", ResourceStatus.UNKNOWN),
            _record(ResourceKind.WORKFLOW, "d", ResourceStatus.SUCCEEDED),
            _record(ResourceKind.WORKFLOW, "c", ResourceStatus.PENDING),
            _record(ResourceKind.WORKFLOW, "b2", ResourceStatus.FAILED),
            _record(ResourceKind.WORKFLOW, "b1", ResourceStatus.FAILED),
            _record(ResourceKind.WORKFLOW, "a", ResourceStatus.RUNNING),
        ]

        ordered = sort_roots(roots, SortMode.STATUS)

        assert [record.name for record in ordered] == ["a", "b1", "b2", "c", "d", "e"]

    def test_next_run_order_puts_unscheduled_last(self) -> None:
        """Records without a next run sort after every scheduled record."""
        roots = with_next_run(
            [
                _record(ResourceKind.CRON_JOB, "none"),
                _record(ResourceKind.CRON_JOB, "later", schedule="0 12 * * *"),
                _record(ResourceKind.CRON_JOB, "sooner", schedule="0 9 * * *"),
                _record(ResourceKind.CRON_JOB, "broken", schedule="nope"),
            ],
            NOW,
        )

        ordered = sort_roots(roots, SortMode.NEXT_RUN)

        assert [record.name for record in ordered] == ["sooner", "later", "broken", "none"]


class TestWithNextRun:
    """Tests for next-run attachment."""

    def test_next_run_computed_against_reference(self) -> None:
        """A 09:00 UTC schedule evaluated at 08:00 UTC fires at 09:00 UTC."""
        record = _record(ResourceKind.CRON_JOB, "daily", schedule="0 9 * * *", timezone="UTC")

        (resolved,) = with_next_run([record], NOW)

        assert resolved.next_run == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        assert record.next_run is None

    def test_unscheduled_records_untouched(self) -> None:
        """Records without a schedule are passed through as-is."""
        record = _record(ResourceKind.JOB, "one-off")
        assert with_next_run([record], NOW)[0] is record


class TestDeriveRows:
    """Tests for the full derivation."""

    def test_nightly_scenario(self) -> None:
        """A CronJob with two owned Jobs renders as a tree, newest child first."""
        start = datetime(2024, 1, 1, 2, 0, tzinfo=timezone.utc)
        records = [
            _record(
                ResourceKind.JOB,
                "nightly-1",
                ResourceStatus.SUCCEEDED,
                start_time=start,
                parent_kind="CronJob",
                parent_name="nightly",
            ),
            _record(ResourceKind.CRON_JOB, "nightly", schedule="0 2 * * *"),
            _record(
                ResourceKind.JOB,
                "nightly-2",
                ResourceStatus.SUCCEEDED,
                start_time=start + timedelta(hours=1),
                parent_kind="CronJob",
                parent_name="nightly",
            ),
        ]

        rows = derive_rows(records, ViewMode.ALL, SortMode.STATUS, NOW)

        assert [(row.record.name, row.branch) for row in rows] == [
            ("nightly", TreeBranch.NONE),
            ("nightly-2", TreeBranch.MID),
            ("nightly-1", TreeBranch.LAST),
        ]

    def test_filtered_out_parent_leaves_orphans(self) -> None:
        """Children keep showing when the view hides their parent kind."""
        records = [
            _record(ResourceKind.CRON_WORKFLOW, "etl", schedule="*/5 * * * *"),
            _record(
                ResourceKind.JOB,
                "etl-job",
                parent_kind="CronJob",
                parent_name="etl",
            ),
        ]

        rows = derive_rows(records, ViewMode.JOBS, SortMode.STATUS, NOW)

        assert [(row.record.name, row.branch) for row in rows] == [
            ("etl-job", TreeBranch.NONE)
        ]

    @pytest.mark.parametrize("tz_name", ["Asia", "America"])
    def test_region_timezone_falls_back_to_utc(self, tz_name: str) -> None:
        """A region-only timezone should not break derivation."""
        records = [
            _record(ResourceKind.CRON_JOB, "daily", schedule="0 9 * * *", timezone=tz_name)
        ]

        rows = derive_rows(records, ViewMode.ALL, SortMode.NEXT_RUN, NOW)

        assert rows[0].record.next_run == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def test_derivation_is_idempotent(self, mixed_records: list[AsyncResourceInfo]) -> None:
        """Same inputs and reference time give identical rows."""
        records = [
            *mixed_records,
            _record(ResourceKind.CRON_JOB, "sched", schedule="15 * * * *"),
        ]

        first = derive_rows(records, ViewMode.ALL, SortMode.NEXT_RUN, NOW)
        second = derive_rows(records, ViewMode.ALL, SortMode.NEXT_RUN, NOW)

        assert first == second
