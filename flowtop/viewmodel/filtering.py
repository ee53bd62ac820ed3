"""View filtering and root ordering for resource records."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from flowtop.constants.enums import SortMode, ViewMode
from flowtop.models.core.resource_info import AsyncResourceInfo
from flowtop.utils.schedule import next_run_time
from flowtop.viewmodel.tree_builder import ResourceRow, build_tree


def filter_by_view_mode(
    records: Iterable[AsyncResourceInfo],
    view_mode: ViewMode,
) -> list[AsyncResourceInfo]:
    """Keep the records whose kind belongs to ``view_mode``."""
    allowed = view_mode.kinds
    if allowed is None:
        return list(records)
    return [record for record in records if record.kind in allowed]


def with_next_run(
    records: Iterable[AsyncResourceInfo],
    now: datetime,
) -> list[AsyncResourceInfo]:
    """Attach the next trigger time, evaluated once against ``now``.

    Records without a schedule are returned as-is.
    """
    resolved: list[AsyncResourceInfo] = []
    for record in records:
        if record.schedule:
            upcoming = next_run_time(record.schedule, record.timezone, now)
            record = record.model_copy(update={"next_run": upcoming})
        resolved.append(record)
    return resolved


def status_sort_key(record: AsyncResourceInfo) -> tuple[int, str]:
    return (record.status.priority, record.name)


def next_run_sort_key(record: AsyncResourceInfo) -> tuple[bool, float, str]:
    if record.next_run is None:
        return (True, 0.0, record.name)
    return (False, record.next_run.timestamp(), record.name)


def sort_roots(
    roots: Sequence[AsyncResourceInfo],
    sort_mode: SortMode,
) -> list[AsyncResourceInfo]:
    """Order root records by status priority or by next run."""
    if sort_mode is SortMode.NEXT_RUN:
        return sorted(roots, key=next_run_sort_key)
    return sorted(roots, key=status_sort_key)


def derive_rows(
    records: Iterable[AsyncResourceInfo],
    view_mode: ViewMode,
    sort_mode: SortMode,
    now: datetime,
) -> list[ResourceRow]:
    """Filter, order and tree-annotate one record set.

    Deterministic for identical inputs and the same ``now``.
    """
    visible = with_next_run(filter_by_view_mode(records, view_mode), now)
    roots = [record for record in visible if not record.has_parent]
    children = [record for record in visible if record.has_parent]
    return build_tree(sort_roots(roots, sort_mode), children)


__all__ = [
    "derive_rows",
    "filter_by_view_mode",
    "next_run_sort_key",
    "sort_roots",
    "status_sort_key",
    "with_next_run",
]
