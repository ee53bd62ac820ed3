"""Resources screen configuration - view tabs, column definitions, and widget IDs."""

from __future__ import annotations

from flowtop.constants.enums import ViewMode

# =============================================================================
# View tabs
# =============================================================================

VIEW_TAB_LABELS: dict[ViewMode, str] = {
    ViewMode.ALL: "1:All",
    ViewMode.JOBS: "2:Jobs",
    ViewMode.WORKFLOWS: "3:Workflows",
    ViewMode.EVENTS: "4:Events",
}

VIEW_MODE_BY_KEY: dict[str, ViewMode] = {
    "1": ViewMode.ALL,
    "2": ViewMode.JOBS,
    "3": ViewMode.WORKFLOWS,
    "4": ViewMode.EVENTS,
}

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

ALL_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("KIND", 14),
    ("NAMESPACE", 15),
    ("NAME", 45),
    ("STATUS", 12),
    ("DURATION", 10),
    ("MESSAGE", 30),
]

# LAST/NEXT headers get the display timezone appended at render time.
SCHEDULE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("KIND", 14),
    ("NAMESPACE", 15),
    ("NAME", 38),
    ("STATUS", 12),
    ("DURATION", 10),
    ("MIN", 5),
    ("HRS", 5),
    ("DAY", 5),
    ("MON", 5),
    ("DOW", 5),
    ("TZ", 12),
    ("LAST", 13),
    ("NEXT", 13),
    ("MESSAGE", 20),
]

EVENTS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("KIND", 13),
    ("NAMESPACE", 15),
    ("NAME", 32),
    ("STATUS", 12),
    ("EVENT_SOURCE", 22),
    ("EVENT_NAME", 40),
    ("TRIGGER", 40),
]

TABLE_COLUMNS_BY_VIEW: dict[ViewMode, list[tuple[str, int]]] = {
    ViewMode.ALL: ALL_TABLE_COLUMNS,
    ViewMode.JOBS: SCHEDULE_TABLE_COLUMNS,
    ViewMode.WORKFLOWS: SCHEDULE_TABLE_COLUMNS,
    ViewMode.EVENTS: EVENTS_TABLE_COLUMNS,
}

# Region prefixes dropped from the TZ column.
TZ_COLUMN_STRIP_PREFIXES: tuple[str, ...] = ("Asia/", "America/", "Europe/")

# =============================================================================
# Widget IDs
# =============================================================================

INFO_LINE_ID = "info-line"
VIEW_TABS_ID = "view-tabs"
RESOURCES_TABLE_ID = "resources-table"
ERROR_PANEL_ID = "error-panel"
WARNING_LINE_ID = "warning-line"
EMPTY_STATE_ID = "empty-state"

EMPTY_STATE_LOADING = "Loading resources..."
EMPTY_STATE_NO_RESOURCES = "No resources in this view"

HELP_TEXT = (
    "Navigation:\n"
    "  j / down: Next row\n"
    "  k / up: Previous row\n"
    "  tab / shift+tab: Next / previous view\n"
    "  1-4: All, Jobs, Workflows, Events\n"
    "Actions:\n"
    "  enter: Details\n"
    "  s: Toggle sort (status / next run)\n"
    "  J: Toggle timezone (UTC / alternate)\n"
    "  r: Refresh\n"
    "  ?: Help\n"
    "  q: Quit"
)
