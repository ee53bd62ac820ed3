"""Timestamp parsing and formatting helpers."""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from flowtop.constants.values import PLACEHOLDER_EMPTY, TIME_FORMAT_SHORT


def parse_k8s_timestamp(timestamp: Any) -> datetime | None:
    """Parse kubernetes timestamp strings into aware datetimes."""
    if not isinstance(timestamp, str) or not timestamp:
        return None
    with suppress(ValueError, TypeError):
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def format_duration(duration: timedelta) -> str:
    """Render a duration as ``45s``, ``3m20s`` or ``2h5m``."""
    total_seconds = int(duration.total_seconds())
    if total_seconds <= 0:
        return PLACEHOLDER_EMPTY
    if total_seconds < 60:
        return f"{total_seconds}s"
    if total_seconds < 3600:
        return f"{total_seconds // 60}m{total_seconds % 60}s"
    return f"{total_seconds // 3600}h{(total_seconds // 60) % 60}m"


def format_timestamp(
    value: datetime | None,
    tz: tzinfo = timezone.utc,
    fmt: str = TIME_FORMAT_SHORT,
) -> str:
    """Format an optional timestamp in the display timezone."""
    if value is None:
        return PLACEHOLDER_EMPTY
    return value.astimezone(tz).strftime(fmt)


__all__ = ["format_duration", "format_timestamp", "parse_k8s_timestamp"]
