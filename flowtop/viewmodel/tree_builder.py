"""Parent/child grouping of resource records into display rows.

Roots are records without a parent reference. Each root is followed by the
children naming it as parent, newest first. Children whose parent is not in
the record set are appended after every group as orphans.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from flowtop.constants.enums import TreeBranch
from flowtop.models.core.resource_info import AsyncResourceInfo


@dataclass(frozen=True)
class ResourceRow:
    """One display row: a record plus its position in the tree."""

    record: AsyncResourceInfo
    branch: TreeBranch = TreeBranch.NONE

    @property
    def is_child(self) -> bool:
        return self.branch is not TreeBranch.NONE


def _child_sort_key(record: AsyncResourceInfo) -> tuple[bool, float, str]:
    start: datetime | None = record.start_time
    return (start is not None, start.timestamp() if start else 0.0, record.name)


def sort_children(children: Sequence[AsyncResourceInfo]) -> list[AsyncResourceInfo]:
    """Order children by start time descending, unstarted last, ties by name descending."""
    return sorted(children, key=_child_sort_key, reverse=True)


def build_tree(
    roots_in_order: Sequence[AsyncResourceInfo],
    children: Sequence[AsyncResourceInfo],
) -> list[ResourceRow]:
    """Flatten sorted roots and their children into branch-annotated rows.

    Args:
        roots_in_order: Parentless records, already in display order.
        children: Records carrying a parent reference, in any order.
    """
    # Arena: root slot index keyed by (namespace, name). The first root
    # in display order wins when two roots share a key.
    root_index: dict[tuple[str, str], int] = {}
    for index, root in enumerate(roots_in_order):
        root_index.setdefault((root.namespace, root.name), index)

    grouped: list[list[AsyncResourceInfo]] = [[] for _ in roots_in_order]
    orphans: dict[tuple[str, str], list[AsyncResourceInfo]] = {}
    for child in children:
        key = (child.namespace, child.parent_name)
        slot = root_index.get(key)
        if slot is None:
            orphans.setdefault(key, []).append(child)
        else:
            grouped[slot].append(child)

    rows: list[ResourceRow] = []
    for root, group in zip(roots_in_order, grouped):
        rows.append(ResourceRow(root))
        ordered = sort_children(group)
        for position, child in enumerate(ordered):
            branch = TreeBranch.LAST if position == len(ordered) - 1 else TreeBranch.MID
            rows.append(ResourceRow(child, branch))

    for key in sorted(orphans):
        rows.extend(ResourceRow(orphan) for orphan in sort_children(orphans[key]))
    return rows


__all__ = ["ResourceRow", "build_tree", "sort_children"]
