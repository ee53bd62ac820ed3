"""Timeout constants for the TUI.

All timeout and interval values for API requests, async operations, and refresh cycles.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "8s"

# Process-level command timeout: above the request timeout, below FETCH_TIMEOUT
KUBECTL_COMMAND_TIMEOUT: Final = 9

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

FETCH_TIMEOUT: Final = 10.0
CLUSTER_CHECK_TIMEOUT: Final = 8.0

# ============================================================================
# Refresh cycle
# ============================================================================

REFRESH_INTERVAL: Final = 5.0

__all__ = [
    "CLUSTER_CHECK_TIMEOUT",
    "CLUSTER_REQUEST_TIMEOUT",
    "FETCH_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "REFRESH_INTERVAL",
]
