"""Utility functions for the flowtop TUI."""

from flowtop.utils.schedule import (
    next_run_time,
    resolve_timezone,
    split_schedule_fields,
)
from flowtop.utils.time_utils import (
    format_duration,
    format_timestamp,
    parse_k8s_timestamp,
)

__all__ = [
    # Schedule
    "next_run_time",
    "resolve_timezone",
    "split_schedule_fields",
    # Time
    "format_duration",
    "format_timestamp",
    "parse_k8s_timestamp",
]
