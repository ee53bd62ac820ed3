"""Detail screen presenter - builds the field sections of one resource snapshot."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from rich.text import Text

from flowtop.constants.limits import DETAIL_WRAP_WIDTH
from flowtop.constants.values import STATUS_BADGES, TIME_FORMAT_LONG
from flowtop.models.core.resource_info import AsyncResourceInfo
from flowtop.utils.time_utils import format_duration, format_timestamp


@dataclass(frozen=True)
class DetailSection:
    """A titled group of (label, value) fields."""

    title: str
    fields: tuple[tuple[str, str], ...]


class ResourceDetailPresenter:
    """Formats an immutable resource snapshot for the detail modal."""

    def __init__(
        self,
        record: AsyncResourceInfo,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._record = record
        self._tz = display_tz

    @property
    def record(self) -> AsyncResourceInfo:
        return self._record

    @property
    def title(self) -> str:
        return f"{self._record.kind.value}: {self._record.name}"

    def _timestamp(self, value: datetime | None) -> str:
        return format_timestamp(value, self._tz, TIME_FORMAT_LONG)

    def overview_fields(self, now: datetime | None = None) -> tuple[tuple[str, str], ...]:
        """Namespace, status, timing and schedule fields that are set."""
        record = self._record
        fields: list[tuple[str, str]] = [
            ("Namespace", record.namespace or "-"),
            ("Status", record.status.value),
        ]
        if record.start_time is not None:
            fields.append(("Started", self._timestamp(record.start_time)))
        if record.end_time is not None:
            fields.append(("Ended", self._timestamp(record.end_time)))
        duration = record.duration_at(now or datetime.now(timezone.utc))
        if duration.total_seconds() > 0:
            fields.append(("Duration", format_duration(duration)))
        if record.parent_name:
            fields.append(("Parent", f"{record.parent_kind or '-'}/{record.parent_name}"))
        if record.schedule:
            fields.append(("Schedule", record.schedule))
        if record.timezone:
            fields.append(("Timezone", record.timezone))
        if record.last_run is not None:
            fields.append(("Last Run", self._timestamp(record.last_run)))
        if record.next_run is not None:
            fields.append(("Next Run", self._timestamp(record.next_run)))
        return tuple(fields)

    def metrics_fields(self) -> tuple[tuple[str, str], ...]:
        """Counters, shown only when some run has been counted."""
        record = self._record
        if record.success_count <= 0 and record.failure_count <= 0:
            return ()
        fields: list[tuple[str, str]] = [
            ("Success", str(record.success_count)),
            ("Failures", str(record.failure_count)),
        ]
        if record.retries > 0:
            fields.append(("Retries", f"{record.retries} / {record.max_retries}"))
        if record.throughput > 0:
            fields.append(("Throughput", f"{record.throughput:.2f}/min"))
        if record.queue_depth > 0:
            fields.append(("Queue", str(record.queue_depth)))
        return tuple(fields)

    def event_fields(self) -> tuple[tuple[str, str], ...]:
        record = self._record
        fields: list[tuple[str, str]] = []
        if record.event_type:
            fields.append(("Type", record.event_type))
        if record.event_source_name:
            fields.append(("Source", record.event_source_name))
        if record.event_names:
            fields.append(("Events", ", ".join(record.event_names)))
        if record.trigger_names:
            fields.append(("Triggers", ", ".join(record.trigger_names)))
        return tuple(fields)

    def dag_fields(self) -> tuple[tuple[str, str], ...]:
        return tuple(
            (node.name, " ".join(part for part in (node.type, node.phase) if part) or "-")
            for node in self._record.dag_nodes
        )

    def wrapped_message(self, width: int = DETAIL_WRAP_WIDTH) -> str:
        return textwrap.fill(self._record.message, width=width) if self._record.message else ""

    def sections(self, now: datetime | None = None) -> list[DetailSection]:
        """Non-empty sections in display order."""
        candidates = [
            DetailSection("Overview", self.overview_fields(now)),
            DetailSection("Metrics", self.metrics_fields()),
            DetailSection("Events", self.event_fields()),
            DetailSection("DAG Nodes", self.dag_fields()),
        ]
        return [section for section in candidates if section.fields]

    def render(self, now: datetime | None = None) -> Text:
        """Full detail body as Rich text."""
        text = Text()
        for index, section in enumerate(self.sections(now)):
            if index:
                text.append("\n")
            text.append(f"{section.title}\n", style="bold #875fff")
            for label, value in section.fields:
                text.append(f"{label + ':':<12}", style="grey50")
                text.append(" ")
                if section.title == "Overview" and label == "Status":
                    badge, style = STATUS_BADGES[value]
                    text.append(badge, style=style)
                else:
                    text.append(value)
                text.append("\n")
        message = self.wrapped_message()
        if message:
            text.append("\nMessage\n", style="bold #875fff")
            text.append(message)
            text.append("\n")
        return text


__all__ = ["DetailSection", "ResourceDetailPresenter"]
