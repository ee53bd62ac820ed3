"""Cron schedule evaluation for CronJob/CronWorkflow resources.

Schedules are standard 5-field cron expressions (minute, hour, day-of-month,
month, day-of-week) interpreted in the resource's own timezone, falling back
to UTC when no timezone is set or the name does not resolve.

Every function takes the reference instant explicitly so callers can pin all
comparisons of one refresh to the same ``now``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from croniter import croniter

logger = logging.getLogger(__name__)

CRON_FIELD_COUNT = 5
_EMPTY_FIELDS = ("-",) * CRON_FIELD_COUNT


def resolve_timezone(name: str | None) -> tzinfo:
    """Resolve an IANA timezone name, falling back to UTC."""
    tz_name = str(name or "").strip()
    if not tz_name or tz_name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.debug("Unknown timezone %r, using UTC", tz_name)
        return timezone.utc


def split_schedule_fields(schedule: str | None) -> tuple[str, str, str, str, str]:
    """Split a schedule into MIN/HRS/DAY/MON/DOW columns.

    Returns ``"-"`` placeholders when the schedule is empty or has fewer than
    five fields.
    """
    fields = str(schedule or "").split()
    if len(fields) < CRON_FIELD_COUNT:
        return _EMPTY_FIELDS
    return (fields[0], fields[1], fields[2], fields[3], fields[4])


def next_run_time(
    schedule: str | None,
    tz_name: str | None,
    now: datetime,
) -> datetime | None:
    """Return the next trigger time at or after ``now``, in UTC.

    Returns None for empty or unparseable schedules instead of raising.
    """
    expression = str(schedule or "").strip()
    if not expression or len(expression.split()) != CRON_FIELD_COUNT:
        return None

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local_now = now.astimezone(resolve_timezone(tz_name))

    try:
        # Step back one microsecond so an exact match on ``now`` counts.
        iterator = croniter(expression, local_now - timedelta(microseconds=1))
        upcoming = iterator.get_next(datetime)
    except (ValueError, KeyError, TypeError, OverflowError):
        logger.debug("Unparseable schedule %r", expression)
        return None

    if upcoming.tzinfo is None:
        upcoming = upcoming.replace(tzinfo=local_now.tzinfo)
    return upcoming.astimezone(timezone.utc)


__all__ = [
    "CRON_FIELD_COUNT",
    "next_run_time",
    "resolve_timezone",
    "split_schedule_fields",
]
