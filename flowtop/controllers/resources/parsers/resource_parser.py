"""Resource parser for the resources controller - normalizes raw kubectl items.

Every ``parse_*`` method is total: missing or mistyped optional fields fall
back to zero values and never raise.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
from typing import Any

from flowtop.constants.enums import ResourceKind, ResourceStatus
from flowtop.models.core.resource_info import AsyncResourceInfo, DAGNodeInfo
from flowtop.utils.time_utils import parse_k8s_timestamp


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    with suppress(ValueError, TypeError, OverflowError):
        return max(0, int(value))
    return 0


class ResourceParser:
    """Parses raw Kubernetes/Argo items into AsyncResourceInfo records."""

    _WORKFLOW_PHASES = {
        "Running": ResourceStatus.RUNNING,
        "Succeeded": ResourceStatus.SUCCEEDED,
        "Failed": ResourceStatus.FAILED,
        "Error": ResourceStatus.FAILED,
        "Pending": ResourceStatus.PENDING,
    }
    # Keys of an EventSource spec that configure the source rather than name its type.
    _EVENT_SOURCE_META_KEYS = frozenset(
        {"eventBusName", "replicas", "service", "template", "style"}
    )

    def __init__(self) -> None:
        """Initialize resource parser."""
        self._parsers: dict[ResourceKind, Callable[[Any], AsyncResourceInfo]] = {
            ResourceKind.JOB: self.parse_job,
            ResourceKind.CRON_JOB: self.parse_cron_job,
            ResourceKind.WORKFLOW: self.parse_workflow,
            ResourceKind.CRON_WORKFLOW: self.parse_cron_workflow,
            ResourceKind.SENSOR: self.parse_sensor,
            ResourceKind.EVENT_SOURCE: self.parse_event_source,
        }

    def parse(self, kind: ResourceKind, item: Any) -> AsyncResourceInfo:
        """Parse one raw item of the given kind."""
        return self._parsers[kind](item)

    def parse_items(self, kind: ResourceKind, items: list[Any]) -> list[AsyncResourceInfo]:
        """Parse a raw item list, producing exactly one record per item."""
        return [self.parse(kind, item) for item in items]

    @staticmethod
    def _base_fields(item: Any) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any], dict[str, Any]]:
        """Split an item into (item, metadata, spec, status) dicts."""
        raw = _as_dict(item)
        return (
            raw,
            _as_dict(raw.get("metadata")),
            _as_dict(raw.get("spec")),
            _as_dict(raw.get("status")),
        )

    @staticmethod
    def _owner_reference(metadata: dict[str, Any], owner_kind: str) -> tuple[str, str]:
        """Return (kind, name) of the first owner reference with ``owner_kind``."""
        for ref in _as_list(metadata.get("ownerReferences")):
            ref_dict = _as_dict(ref)
            if ref_dict.get("kind") == owner_kind:
                return owner_kind, _as_str(ref_dict.get("name"))
        return "", ""

    @staticmethod
    def _ready_condition(status: dict[str, Any]) -> tuple[ResourceStatus, str]:
        """Map the ``Ready`` condition to (status, message)."""
        result = (ResourceStatus.UNKNOWN, "")
        for condition in _as_list(status.get("conditions")):
            cond = _as_dict(condition)
            if cond.get("type") != "Ready":
                continue
            if cond.get("status") == "True":
                result = (ResourceStatus.RUNNING, "")
            else:
                result = (ResourceStatus.FAILED, _as_str(cond.get("message")))
        return result

    # ------------------------------------------------------------------
    # Batch Jobs / CronJobs
    # ------------------------------------------------------------------

    def parse_job(self, item: Any) -> AsyncResourceInfo:
        """Parse a batch/v1 Job.

        Status comes from the succeeded/failed/active counters, checked in
        that order.
        """
        _, metadata, spec, status = self._base_fields(item)
        parent_kind, parent_name = self._owner_reference(
            metadata, ResourceKind.CRON_JOB.value
        )

        succeeded = _as_int(status.get("succeeded"))
        failed = _as_int(status.get("failed"))
        active = _as_int(status.get("active"))

        retries = 0
        if succeeded > 0:
            job_status = ResourceStatus.SUCCEEDED
        elif failed > 0:
            job_status = ResourceStatus.FAILED
            retries = failed
        elif active > 0:
            job_status = ResourceStatus.RUNNING
        else:
            job_status = ResourceStatus.PENDING

        message = ""
        for condition in _as_list(status.get("conditions")):
            cond = _as_dict(condition)
            if cond.get("type") == "Failed" and cond.get("status") == "True":
                message = _as_str(cond.get("message")) or _as_str(cond.get("reason"))

        return AsyncResourceInfo(
            kind=ResourceKind.JOB,
            name=_as_str(metadata.get("name")),
            namespace=_as_str(metadata.get("namespace")),
            status=job_status,
            start_time=parse_k8s_timestamp(status.get("startTime")),
            end_time=parse_k8s_timestamp(status.get("completionTime")),
            message=message,
            retries=retries,
            max_retries=_as_int(spec.get("backoffLimit")),
            success_count=succeeded,
            failure_count=failed,
            parent_kind=parent_kind,
            parent_name=parent_name,
        )

    def parse_cron_job(self, item: Any) -> AsyncResourceInfo:
        """Parse a batch/v1 CronJob."""
        _, metadata, spec, status = self._base_fields(item)
        suspended = spec.get("suspend") is True
        return AsyncResourceInfo(
            kind=ResourceKind.CRON_JOB,
            name=_as_str(metadata.get("name")),
            namespace=_as_str(metadata.get("namespace")),
            status=ResourceStatus.PENDING if suspended else ResourceStatus.RUNNING,
            end_time=parse_k8s_timestamp(status.get("lastSuccessfulTime")),
            schedule=_as_str(spec.get("schedule")),
            timezone=_as_str(spec.get("timeZone")),
            last_run=parse_k8s_timestamp(status.get("lastScheduleTime")),
        )

    # ------------------------------------------------------------------
    # Argo Workflows
    # ------------------------------------------------------------------

    def _parse_dag_nodes(self, status: dict[str, Any]) -> tuple[DAGNodeInfo, ...]:
        nodes: list[DAGNodeInfo] = []
        for node_data in _as_dict(status.get("nodes")).values():
            node = _as_dict(node_data)
            display_name = _as_str(node.get("displayName"))
            if not display_name:
                continue
            nodes.append(
                DAGNodeInfo(
                    name=display_name,
                    type=_as_str(node.get("type")),
                    phase=_as_str(node.get("phase")),
                )
            )
        return tuple(nodes)

    def parse_workflow(self, item: Any) -> AsyncResourceInfo:
        """Parse an argoproj.io Workflow."""
        _, metadata, _, status = self._base_fields(item)
        parent_kind, parent_name = self._owner_reference(
            metadata, ResourceKind.CRON_WORKFLOW.value
        )
        phase = _as_str(status.get("phase"))
        return AsyncResourceInfo(
            kind=ResourceKind.WORKFLOW,
            name=_as_str(metadata.get("name")),
            namespace=_as_str(metadata.get("namespace")),
            status=self._WORKFLOW_PHASES.get(phase, ResourceStatus.UNKNOWN),
            start_time=parse_k8s_timestamp(status.get("startedAt")),
            end_time=parse_k8s_timestamp(status.get("finishedAt")),
            message=_as_str(status.get("message")),
            parent_kind=parent_kind,
            parent_name=parent_name,
            dag_nodes=self._parse_dag_nodes(status),
        )

    def parse_cron_workflow(self, item: Any) -> AsyncResourceInfo:
        """Parse an argoproj.io CronWorkflow."""
        _, metadata, spec, status = self._base_fields(item)
        suspended = spec.get("suspend") is True
        schedule = _as_str(spec.get("schedule"))
        if not schedule:
            # Newer Argo releases accept a list under ``schedules``.
            schedule = next(
                (entry for entry in _as_list(spec.get("schedules")) if isinstance(entry, str)),
                "",
            )
        return AsyncResourceInfo(
            kind=ResourceKind.CRON_WORKFLOW,
            name=_as_str(metadata.get("name")),
            namespace=_as_str(metadata.get("namespace")),
            status=ResourceStatus.PENDING if suspended else ResourceStatus.RUNNING,
            schedule=schedule,
            timezone=_as_str(spec.get("timezone")),
            last_run=parse_k8s_timestamp(status.get("lastScheduledTime")),
            success_count=_as_int(status.get("succeeded")),
            failure_count=_as_int(status.get("failed")),
        )

    # ------------------------------------------------------------------
    # Argo Events
    # ------------------------------------------------------------------

    def parse_sensor(self, item: Any) -> AsyncResourceInfo:
        """Parse an argoproj.io Sensor."""
        _, metadata, spec, status = self._base_fields(item)
        sensor_status, message = self._ready_condition(status)

        source_names: list[str] = []
        event_names: list[str] = []
        for dependency in _as_list(spec.get("dependencies")):
            dep = _as_dict(dependency)
            source_name = _as_str(dep.get("eventSourceName"))
            if source_name and source_name not in source_names:
                source_names.append(source_name)
            event_name = _as_str(dep.get("eventName"))
            if event_name:
                event_names.append(event_name)

        trigger_names = [
            name
            for trigger in _as_list(spec.get("triggers"))
            if (name := _as_str(_as_dict(_as_dict(trigger).get("template")).get("name")))
        ]

        return AsyncResourceInfo(
            kind=ResourceKind.SENSOR,
            name=_as_str(metadata.get("name")),
            namespace=_as_str(metadata.get("namespace")),
            status=sensor_status,
            message=message,
            event_source_name=", ".join(source_names),
            event_names=tuple(event_names),
            trigger_names=tuple(trigger_names),
        )

    def parse_event_source(self, item: Any) -> AsyncResourceInfo:
        """Parse an argoproj.io EventSource."""
        _, metadata, spec, status = self._base_fields(item)
        source_status, message = self._ready_condition(status)

        event_type = ""
        event_names: tuple[str, ...] = ()
        for key, value in spec.items():
            if key in self._EVENT_SOURCE_META_KEYS or not isinstance(value, dict):
                continue
            event_type = key
            event_names = tuple(str(name) for name in value)
            break

        return AsyncResourceInfo(
            kind=ResourceKind.EVENT_SOURCE,
            name=_as_str(metadata.get("name")),
            namespace=_as_str(metadata.get("namespace")),
            status=source_status,
            message=message,
            event_type=event_type,
            event_names=event_names,
        )
