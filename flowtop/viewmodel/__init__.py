"""View-model layer: filtering, tree grouping and cursor state."""

from flowtop.viewmodel.filtering import (
    derive_rows,
    filter_by_view_mode,
    sort_roots,
    with_next_run,
)
from flowtop.viewmodel.tree_builder import ResourceRow, build_tree
from flowtop.viewmodel.view_state import ResourceViewState

__all__ = [
    "ResourceRow",
    "ResourceViewState",
    "build_tree",
    "derive_rows",
    "filter_by_view_mode",
    "sort_roots",
    "with_next_run",
]
