"""Constants module for the flowtop TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in flowtop.keyboard module.
"""

from flowtop.constants.defaults import (
    ALT_TIMEZONE_DEFAULT,
    FETCH_TIMEOUT_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
)
from flowtop.constants.enums import (
    ResourceKind,
    ResourceStatus,
    SortMode,
    TreeBranch,
    ViewMode,
    ViewPhase,
)
from flowtop.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    FETCH_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    REFRESH_INTERVAL,
)
from flowtop.constants.values import APP_SUBTITLE, APP_TITLE, APP_VERSION

__all__ = [
    # Application
    "ALT_TIMEZONE_DEFAULT",
    "APP_SUBTITLE",
    "APP_TITLE",
    "APP_VERSION",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "FETCH_TIMEOUT",
    "FETCH_TIMEOUT_DEFAULT",
    "KUBECTL_COMMAND_TIMEOUT",
    "NAMESPACE_DEFAULT",
    "REFRESH_INTERVAL",
    "REFRESH_INTERVAL_DEFAULT",
    "REQUEST_TIMEOUT_DEFAULT",
    # Enums
    "ResourceKind",
    "ResourceStatus",
    "SortMode",
    "TreeBranch",
    "ViewMode",
    "ViewPhase",
]
