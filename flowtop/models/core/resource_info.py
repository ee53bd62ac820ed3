"""Canonical async-resource models shared by every resource kind."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict

from flowtop.constants.enums import ResourceKind, ResourceStatus


class DAGNodeInfo(BaseModel):
    """One node summary of a workflow DAG."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""  # DAG, Pod, Retry, Steps, ...
    phase: str = ""


class AsyncResourceInfo(BaseModel):
    """Unified, kind-agnostic view of one monitored resource.

    Instances are immutable; a fresh set is built for every poll and the
    previous set is discarded wholesale.
    """

    model_config = ConfigDict(frozen=True)

    kind: ResourceKind
    name: str
    namespace: str = ""
    status: ResourceStatus = ResourceStatus.UNKNOWN

    start_time: datetime | None = None
    end_time: datetime | None = None
    message: str = ""
    retries: int = 0
    max_retries: int = 0

    # Metrics
    success_count: int = 0
    failure_count: int = 0
    throughput: float = 0.0  # per minute
    queue_depth: int = 0

    # Schedule (CronJob / CronWorkflow)
    schedule: str = ""
    timezone: str = ""
    last_run: datetime | None = None
    next_run: datetime | None = None

    # Parent relationship (Job <- CronJob, Workflow <- CronWorkflow)
    parent_kind: str = ""
    parent_name: str = ""

    dag_nodes: tuple[DAGNodeInfo, ...] = ()

    # Event info (Sensor / EventSource)
    event_source_name: str = ""
    event_names: tuple[str, ...] = ()
    trigger_names: tuple[str, ...] = ()
    event_type: str = ""

    @property
    def identity(self) -> tuple[ResourceKind, str, str]:
        """Identity unique within one polled batch."""
        return (self.kind, self.namespace, self.name)

    @property
    def has_parent(self) -> bool:
        return bool(self.parent_name)

    def duration_at(self, now: datetime | None = None) -> timedelta:
        """Elapsed run time as of ``now``.

        Finished resources report ``end - start``; running ones report wall
        clock time since start, so the value moves between renders.
        """
        if self.start_time is None:
            return timedelta(0)
        if self.end_time is not None:
            end = self.end_time
        else:
            end = now or datetime.now(timezone.utc)
        return max(end - self.start_time, timedelta(0))
