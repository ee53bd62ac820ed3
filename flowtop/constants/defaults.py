"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Cluster scope defaults
# ============================================================================

NAMESPACE_DEFAULT: Final = ""  # all namespaces

# ============================================================================
# Refresh defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 5
FETCH_TIMEOUT_DEFAULT: Final = 10.0
REQUEST_TIMEOUT_DEFAULT: Final = "8s"

# ============================================================================
# Display defaults
# ============================================================================

ALT_TIMEZONE_DEFAULT: Final = "Asia/Tokyo"

__all__ = [
    "ALT_TIMEZONE_DEFAULT",
    "FETCH_TIMEOUT_DEFAULT",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REQUEST_TIMEOUT_DEFAULT",
]
