"""Screen-specific keyboard bindings."""

from typing import Annotated

from textual.binding import Binding

# ============================================================================
# Resources Screen Bindings
# ============================================================================

# tab/shift+tab are priority bindings so they cycle views instead of focus.
RESOURCES_SCREEN_BINDINGS: list[
    Binding | Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("j", "cursor_down", "Down"),
    ("k", "cursor_up", "Up"),
    Binding("down", "cursor_down", "Down", show=False),
    Binding("up", "cursor_up", "Up", show=False),
    Binding("tab", "next_view", "Next view", priority=True),
    Binding("shift+tab", "previous_view", "Prev view", priority=True),
    ("1", "view_all", "All"),
    ("2", "view_jobs", "Jobs"),
    ("3", "view_workflows", "Workflows"),
    ("4", "view_events", "Events"),
    ("s", "toggle_sort", "Sort"),
    ("J", "toggle_timezone", "UTC/Alt TZ"),
    ("enter", "show_detail", "Details"),
]

# ============================================================================
# Detail Screen Bindings
# ============================================================================

DETAIL_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "close", "Close"),
    ("enter", "close", "Close"),
    ("q", "close", "Close"),
]

__all__ = [
    "DETAIL_SCREEN_BINDINGS",
    "RESOURCES_SCREEN_BINDINGS",
]
