"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "flowtop"
APP_SUBTITLE: Final = "Async Processing Monitor"
APP_VERSION: Final = "0.3.0"

# ============================================================================
# Display placeholders
# ============================================================================

PLACEHOLDER_EMPTY: Final = "-"
NAMESPACE_ALL_LABEL: Final = "all"
TIME_FORMAT_SHORT: Final = "%m/%d %H:%M"
TIME_FORMAT_LONG: Final = "%Y-%m-%d %H:%M:%S"
TIME_FORMAT_CLOCK: Final = "%H:%M:%S"

# ============================================================================
# Status badges (text, Rich markup style)
# ============================================================================

STATUS_BADGES: Final = {
    "Running": ("● Running", "white on #005f87"),
    "Succeeded": ("✓ Succeeded", "white on #005f00"),
    "Failed": ("✗ Failed", "white on #5f0000"),
    "Pending": ("○ Pending", "white on #5f5f00"),
    "Unknown": ("? Unknown", "white on #303030"),
}

__all__ = [
    "APP_SUBTITLE",
    "APP_TITLE",
    "APP_VERSION",
    "NAMESPACE_ALL_LABEL",
    "PLACEHOLDER_EMPTY",
    "STATUS_BADGES",
    "TIME_FORMAT_CLOCK",
    "TIME_FORMAT_LONG",
    "TIME_FORMAT_SHORT",
]
