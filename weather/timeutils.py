from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo


def get_zone(tz_str: str) -> ZoneInfo:
    """Return a ZoneInfo instance or raise for invalid input."""

    try:
        return ZoneInfo(tz_str)
    except Exception as exc:
        raise ValueError(f"Invalid timezone: {tz_str}") from exc


def from_unix(ts: float, tz: tzinfo | None = None) -> datetime:
    """Convert Unix seconds to an aware datetime.

    With no zone the server's local time is used.
    """

    if tz is None:
        return datetime.fromtimestamp(ts).astimezone()
    return datetime.fromtimestamp(ts, tz)


def format_clock(ts: float, tz: tzinfo | None = None) -> str:
    """Return a 12-hour clock string such as ``06:05:09 AM``."""

    return from_unix(ts, tz).strftime("%I:%M:%S %p")


def format_short_day(dt: datetime) -> str:
    """Return ``Mon, Jan 6`` style labels."""

    return f"{dt:%a}, {dt:%b} {dt.day}"


def format_long_day(dt: datetime | date) -> str:
    """Return ``Monday, January 6`` style labels."""

    return f"{dt:%A}, {dt:%B} {dt.day}"


def isoformat_utc(dt: datetime) -> str:
    """Return a millisecond ISO8601 string in UTC with a ``Z`` suffix."""

    aware = dt.astimezone(timezone.utc)  # noqa: UP017
    text = aware.isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")
