"""Wall-clock line rendered next to the pomodoro status."""

from __future__ import annotations

import datetime as dt

DEFAULT_UTC_OFFSET_HOURS = 8

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def format_clock(now: dt.datetime, utc_offset_hours: int = DEFAULT_UTC_OFFSET_HOURS) -> str:
    """Format `now` as `HH:MM YYYY-MM-DD Weekday` at a fixed UTC offset.

    The host's local zone is never consulted; naive datetimes are taken as UTC.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=dt.timezone.utc)
    local = now.astimezone(dt.timezone(dt.timedelta(hours=utc_offset_hours)))
    return (
        f"{local.hour:02d}:{local.minute:02d} "
        f"{local.year}-{local.month:02d}-{local.day:02d} "
        f"{_WEEKDAYS[local.weekday()]}"
    )
