"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Resource Enums
# =============================================================================

class ResourceKind(Enum):
    """Kinds of asynchronous workload resources tracked by the dashboard."""

    JOB = "Job"
    CRON_JOB = "CronJob"
    WORKFLOW = "Workflow"
    CRON_WORKFLOW = "CronWorkflow"
    SENSOR = "Sensor"
    EVENT_SOURCE = "EventSource"


class ResourceStatus(Enum):
    """Normalized status shared by every resource kind."""

    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    PENDING = "Pending"
    UNKNOWN = "Unknown"

    @property
    def priority(self) -> int:
        """Sort priority used by the status ordering (lower sorts first)."""
        return STATUS_PRIORITY[self]


STATUS_PRIORITY: dict[ResourceStatus, int] = {
    ResourceStatus.RUNNING: 0,
    ResourceStatus.FAILED: 1,
    ResourceStatus.PENDING: 2,
    ResourceStatus.SUCCEEDED: 3,
    ResourceStatus.UNKNOWN: 4,
}


# =============================================================================
# View Enums
# =============================================================================

class ViewMode(Enum):
    """Named filters over resource kinds, in tab order."""

    ALL = "All"
    JOBS = "Jobs"
    WORKFLOWS = "Workflows"
    EVENTS = "Events"

    @property
    def kinds(self) -> frozenset[ResourceKind] | None:
        """Kinds passed by this view, or None when every kind passes."""
        return VIEW_MODE_KINDS[self]

    def cycle(self, step: int = 1) -> "ViewMode":
        """Return the view mode ``step`` tabs away, wrapping around."""
        members = list(ViewMode)
        return members[(members.index(self) + step) % len(members)]


VIEW_MODE_KINDS: dict[ViewMode, frozenset[ResourceKind] | None] = {
    ViewMode.ALL: None,
    ViewMode.JOBS: frozenset({ResourceKind.JOB, ResourceKind.CRON_JOB}),
    ViewMode.WORKFLOWS: frozenset({ResourceKind.WORKFLOW, ResourceKind.CRON_WORKFLOW}),
    ViewMode.EVENTS: frozenset({ResourceKind.SENSOR, ResourceKind.EVENT_SOURCE}),
}


class SortMode(Enum):
    """Orderings for root-level rows."""

    STATUS = "status"
    NEXT_RUN = "next"

    def toggled(self) -> "SortMode":
        return SortMode.NEXT_RUN if self is SortMode.STATUS else SortMode.STATUS


class TreeBranch(Enum):
    """Position of a row inside its parent/child group."""

    NONE = ""
    MID = "┣ "
    LAST = "┗ "

    @property
    def glyph(self) -> str:
        return self.value


# =============================================================================
# Application State Enums
# =============================================================================

class ViewPhase(Enum):
    """Lifecycle of the view state."""

    IDLE = "idle"
    READY = "ready"


__all__ = [
    "STATUS_PRIORITY",
    "VIEW_MODE_KINDS",
    "ResourceKind",
    "ResourceStatus",
    "SortMode",
    "TreeBranch",
    "ViewMode",
    "ViewPhase",
]
