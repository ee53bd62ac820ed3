"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_MESSAGE_LENGTH: Final = 160
DETAIL_WRAP_WIDTH: Final = 50

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1
REFRESH_INTERVAL_MAX: Final = 3600
FETCH_TIMEOUT_MIN: Final = 1.0

__all__ = [
    "DETAIL_WRAP_WIDTH",
    "FETCH_TIMEOUT_MIN",
    "MAX_MESSAGE_LENGTH",
    "REFRESH_INTERVAL_MAX",
    "REFRESH_INTERVAL_MIN",
]
